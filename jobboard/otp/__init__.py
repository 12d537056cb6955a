"""
OTP issuance and verification
"""

from .errors import (
    DeliveryError,
    ExpiredError,
    MismatchError,
    NotFoundError,
    OtpError,
    ValidationError,
)
from .otp_manager import OtpManager, OtpRecord, generate_code
from .sms_provider import SmsProvider, TwilioSmsProvider
from .sms_provider_mock import MockSMSProvider

__all__ = [
    "DeliveryError",
    "ExpiredError",
    "MismatchError",
    "MockSMSProvider",
    "NotFoundError",
    "OtpError",
    "OtpManager",
    "OtpRecord",
    "SmsProvider",
    "TwilioSmsProvider",
    "ValidationError",
    "generate_code",
]
