"""
OTP Manager
Handles OTP generation, hashed storage, delivery and validation
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from ..logging_config import get_logger
from .errors import DeliveryError, ExpiredError, MismatchError, NotFoundError, ValidationError
from .sms_provider import SmsProvider

logger = get_logger("jobboard.otp")

OTP_MIN = 1000
OTP_MAX = 9999


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_code() -> str:
    """
    Uniformly random 4-digit code in [1000, 9999]
    """
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


@dataclass(frozen=True)
class OtpRecord:
    phone: str
    hash: str
    expires_at: datetime
    attempts: int = 0


class OtpManager:
    """
    Owns the phone -> OtpRecord mapping.

    Records are replaced, never updated in place. All map access happens
    under ``_lock``; the lock is released before the SMS provider is called.
    """

    def __init__(
        self,
        secret: str,
        sms_provider: SmsProvider,
        ttl_seconds: int = 300,
        max_attempts: int = 0,
        clock: Callable[[], datetime] = _utcnow,
        code_generator: Callable[[], str] = generate_code,
    ) -> None:
        if not secret:
            raise ValueError("OTP hashing secret is required")
        self._secret = secret.encode("utf-8")
        self.sms_provider = sms_provider
        self.ttl = timedelta(seconds=ttl_seconds)
        self.max_attempts = max_attempts
        self._clock = clock
        self._generate_code = code_generator
        self._records: Dict[str, OtpRecord] = {}
        self._lock = threading.Lock()

    def hash_code(self, code: str) -> str:
        return hmac.new(self._secret, code.encode("utf-8"), hashlib.sha256).hexdigest()

    def _is_expired(self, record: OtpRecord) -> bool:
        return self._clock() > record.expires_at

    async def issue_otp(self, phone: Optional[str]) -> None:
        """
        Generate, store and deliver a fresh code for ``phone``.

        The record is written before delivery and stays in place if the
        provider fails; a retry simply overwrites it.
        """
        if not phone:
            raise ValidationError("phone required")

        code = self._generate_code()
        record = OtpRecord(
            phone=phone,
            hash=self.hash_code(code),
            expires_at=self._clock() + self.ttl,
        )
        with self._lock:
            replaced = phone in self._records
            self._records[phone] = record
        logger.info("OTP issued for phone ending %s (replaced=%s)", phone[-4:], replaced)

        try:
            await self.sms_provider.send_otp(phone, code)
        except DeliveryError:
            logger.exception("OTP delivery failed for phone ending %s", phone[-4:])
            raise
        except Exception as e:
            logger.exception("OTP delivery failed for phone ending %s", phone[-4:])
            raise DeliveryError() from e

    def verify_otp(self, phone: Optional[str], code: Optional[str]) -> None:
        """
        Check ``code`` against the pending record for ``phone``.

        Order: missing record, expiry, hash mismatch. Success consumes the record.
        """
        if not phone or not code:
            raise ValidationError("phone and otp required")

        submitted = self.hash_code(code)
        with self._lock:
            record = self._records.get(phone)
            if record is None:
                raise NotFoundError()
            if self._is_expired(record):
                raise ExpiredError()
            if not hmac.compare_digest(record.hash, submitted):
                self._record_mismatch(record)
                raise MismatchError()
            del self._records[phone]
        logger.info("OTP verified for phone ending %s", phone[-4:])

    def _record_mismatch(self, record: OtpRecord) -> None:
        # caller holds _lock
        if self.max_attempts <= 0:
            return
        attempts = record.attempts + 1
        if attempts >= self.max_attempts:
            del self._records[record.phone]
            logger.warning(
                "OTP for phone ending %s discarded after %d failed attempts",
                record.phone[-4:],
                attempts,
            )
        else:
            self._records[record.phone] = replace(record, attempts=attempts)

    def has_pending(self, phone: str) -> bool:
        with self._lock:
            record = self._records.get(phone)
            return record is not None and not self._is_expired(record)

    def get_record(self, phone: str) -> Optional[OtpRecord]:
        with self._lock:
            return self._records.get(phone)

    def sweep_expired(self) -> int:
        """
        Drop every expired record. Returns the number removed.
        """
        with self._lock:
            expired = [phone for phone, rec in self._records.items() if self._is_expired(rec)]
            for phone in expired:
                del self._records[phone]
        if expired:
            logger.info("Swept %d expired OTP records", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
