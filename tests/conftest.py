from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from jobboard.app import create_app
from jobboard.config import Settings
from jobboard.otp.sms_provider_mock import MockSMSProvider

TEST_SECRET = "test-secret"


class FakeClock:
    def __init__(self, start: datetime = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    return tmp_path / "logs"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sms():
    return MockSMSProvider()


@pytest.fixture
def settings():
    return Settings(
        otp_hash_secret=TEST_SECRET,
        sms_provider="mock",
        otp_sweep_interval_seconds=0,
    )


@pytest.fixture
def app(settings, sms, clock):
    return create_app(settings=settings, sms_provider=sms, clock=clock)


@pytest.fixture
def client(app):
    return TestClient(app)
