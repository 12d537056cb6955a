"""
SMS Providers
Deliver OTP codes to a phone number
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

import requests
from starlette.concurrency import run_in_threadpool
from twilio.base.exceptions import TwilioException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from ..logging_config import get_logger
from .errors import DeliveryError

logger = get_logger("jobboard.sms")

OTP_MESSAGE_TEMPLATE = "Your OTP is: {otp}"


class SmsProvider(ABC):
    """
    Base class for OTP delivery over SMS.
    """

    @abstractmethod
    async def send_otp(self, phone: str, otp: str) -> Dict[str, Any]:
        """
        Send ``otp`` to ``phone``. Raises DeliveryError on failure.
        """


class TwilioSmsProvider(SmsProvider):
    """
    Sends OTP messages through the Twilio Messages API.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        timeout: float = 10.0,
        client: Client = None,
    ):
        self.from_number = from_number
        self.timeout = timeout
        self.client = client or Client(
            account_sid,
            auth_token,
            http_client=TwilioHttpClient(timeout=timeout),
        )

    def _create_message(self, phone: str, body: str):
        return self.client.messages.create(body=body, to=phone, from_=self.from_number)

    async def send_otp(self, phone: str, otp: str) -> Dict[str, Any]:
        body = OTP_MESSAGE_TEMPLATE.format(otp=otp)
        try:
            message = await run_in_threadpool(self._create_message, phone, body)
        except TwilioException as e:
            logger.error("Twilio rejected OTP SMS to phone ending %s: %s", phone[-4:], e)
            raise DeliveryError() from e
        except requests.RequestException as e:
            logger.error("Twilio unreachable for phone ending %s: %s", phone[-4:], e)
            raise DeliveryError() from e

        logger.info("OTP SMS queued sid=%s phone ending %s", message.sid, phone[-4:])
        return {"success": True, "message_id": message.sid}
