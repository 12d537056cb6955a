"""
Mock SMS Provider
Simulates SMS sending for OTP
"""

import itertools
from typing import Any, Dict, List, Tuple

from ..logging_config import get_logger
from .sms_provider import OTP_MESSAGE_TEMPLATE, SmsProvider

logger = get_logger("jobboard.sms")


class MockSMSProvider(SmsProvider):
    """
    Mock SMS provider for development/testing.

    Nothing leaves the process; messages are logged and kept in ``outbox``.
    """

    def __init__(self):
        self.outbox: List[Tuple[str, str]] = []
        self._ids = itertools.count(1)

    async def send_otp(self, phone: str, otp: str) -> Dict[str, Any]:
        body = OTP_MESSAGE_TEMPLATE.format(otp=otp)
        self.outbox.append((phone, otp))
        logger.info("[MOCK SMS] Sending %r to %s", body, phone)
        return {"success": True, "message_id": f"MOCK{next(self._ids):03d}"}

    def last_code(self, phone: str) -> str:
        for sent_phone, otp in reversed(self.outbox):
            if sent_phone == phone:
                return otp
        raise KeyError(phone)
