"""
OTP error taxonomy.

Every error carries the HTTP status and the user-facing message the API
returns for it.
"""


class OtpError(Exception):
    status_code = 400
    default_message = "OTP error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(OtpError):
    default_message = "phone required"


class NotFoundError(OtpError):
    default_message = "OTP not found"


class ExpiredError(OtpError):
    default_message = "OTP expired"


class MismatchError(OtpError):
    default_message = "Invalid OTP"


class DeliveryError(OtpError):
    status_code = 500
    default_message = "OTP sending failed"
