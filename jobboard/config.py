"""
Service configuration.

Values come from the environment (a local .env file is honoured). The OTP
hashing secret has no default: the service refuses to start without it.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os

from dotenv import load_dotenv, find_dotenv

SMS_PROVIDERS = ("twilio", "mock")


@dataclass(frozen=True)
class Settings:
    otp_hash_secret: str
    otp_ttl_seconds: int = 300
    otp_max_attempts: int = 0
    otp_sweep_interval_seconds: float = 60.0
    sms_provider: str = "twilio"
    twilio_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_from: Optional[str] = None
    sms_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    port: int = 3000


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from ``env`` (defaults to os.environ after loading .env).

    Raises RuntimeError when required values are missing or malformed.
    """
    if env is None:
        load_dotenv(find_dotenv(), override=False)
        env = os.environ

    secret = env.get("OTP_HASH_SECRET") or env.get("JWT_SECRET")
    if not secret:
        raise RuntimeError("OTP_HASH_SECRET not set in environment or .env")

    sms_provider = (env.get("SMS_PROVIDER") or "twilio").strip().lower()
    if sms_provider not in SMS_PROVIDERS:
        raise RuntimeError(f"SMS_PROVIDER must be one of {', '.join(SMS_PROVIDERS)}")

    settings = Settings(
        otp_hash_secret=secret,
        otp_ttl_seconds=_int(env, "OTP_TTL_SECONDS", 300),
        otp_max_attempts=_int(env, "OTP_MAX_ATTEMPTS", 0),
        otp_sweep_interval_seconds=_float(env, "OTP_SWEEP_INTERVAL_SECONDS", 60.0),
        sms_provider=sms_provider,
        twilio_sid=env.get("TWILIO_SID"),
        twilio_auth_token=env.get("TWILIO_AUTH_TOKEN"),
        twilio_from=env.get("TWILIO_FROM"),
        sms_timeout_seconds=_float(env, "SMS_TIMEOUT_SECONDS", 10.0),
        log_level=env.get("LOG_LEVEL", "INFO"),
        port=_int(env, "PORT", 3000),
    )

    if settings.otp_ttl_seconds <= 0:
        raise RuntimeError("OTP_TTL_SECONDS must be positive")
    if settings.otp_max_attempts < 0:
        raise RuntimeError("OTP_MAX_ATTEMPTS must not be negative")
    if sms_provider == "twilio":
        missing = [
            name
            for name, value in (
                ("TWILIO_SID", settings.twilio_sid),
                ("TWILIO_AUTH_TOKEN", settings.twilio_auth_token),
                ("TWILIO_FROM", settings.twilio_from),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"Twilio SMS provider requires {', '.join(missing)}")
    return settings
