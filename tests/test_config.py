import pytest

from jobboard.config import load_settings

TWILIO_ENV = {
    "OTP_HASH_SECRET": "s3cret",
    "TWILIO_SID": "AC123",
    "TWILIO_AUTH_TOKEN": "token",
    "TWILIO_FROM": "+15550001111",
}


def test_defaults():
    settings = load_settings(TWILIO_ENV)
    assert settings.otp_hash_secret == "s3cret"
    assert settings.otp_ttl_seconds == 300
    assert settings.otp_max_attempts == 0
    assert settings.sms_provider == "twilio"
    assert settings.sms_timeout_seconds == 10.0
    assert settings.port == 3000


def test_missing_secret_refuses_to_start():
    env = dict(TWILIO_ENV)
    del env["OTP_HASH_SECRET"]
    with pytest.raises(RuntimeError, match="OTP_HASH_SECRET"):
        load_settings(env)


def test_jwt_secret_is_accepted():
    settings = load_settings({"JWT_SECRET": "legacy", "SMS_PROVIDER": "mock"})
    assert settings.otp_hash_secret == "legacy"


def test_twilio_requires_credentials():
    with pytest.raises(RuntimeError) as exc:
        load_settings({"OTP_HASH_SECRET": "x", "TWILIO_SID": "AC123"})
    assert "TWILIO_AUTH_TOKEN" in str(exc.value)
    assert "TWILIO_FROM" in str(exc.value)
    assert "TWILIO_SID" not in str(exc.value)


def test_mock_provider_needs_no_credentials():
    settings = load_settings({"OTP_HASH_SECRET": "x", "SMS_PROVIDER": "MOCK"})
    assert settings.sms_provider == "mock"


@pytest.mark.parametrize(
    "extra",
    [
        {"SMS_PROVIDER": "carrier-pigeon"},
        {"OTP_TTL_SECONDS": "five"},
        {"OTP_TTL_SECONDS": "0"},
        {"OTP_MAX_ATTEMPTS": "-1"},
        {"SMS_TIMEOUT_SECONDS": "soon"},
    ],
)
def test_invalid_values_are_rejected(extra):
    with pytest.raises(RuntimeError):
        load_settings({**TWILIO_ENV, **extra})


def test_overrides():
    settings = load_settings(
        {
            **TWILIO_ENV,
            "OTP_TTL_SECONDS": "120",
            "OTP_MAX_ATTEMPTS": "5",
            "OTP_SWEEP_INTERVAL_SECONDS": "0",
            "SMS_TIMEOUT_SECONDS": "2.5",
        }
    )
    assert settings.otp_ttl_seconds == 120
    assert settings.otp_max_attempts == 5
    assert settings.otp_sweep_interval_seconds == 0
    assert settings.sms_timeout_seconds == 2.5
