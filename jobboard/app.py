"""
jobboard/app.py

FastAPI application factory for the job-board service.

This module wires together:
- Logging configuration (file-based under logs/)
- CORS and a request-logging middleware
- The OTP manager, its SMS provider and the in-memory stores
- Domain routers under jobboard/api/ (otp, jobs, applications)
"""

import asyncio
from contextlib import suppress
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .api import applications_router, jobs_router, otp_router
from .config import Settings, load_settings
from .logging_config import get_logger, setup_logging
from .otp.errors import OtpError
from .otp.otp_manager import OtpManager
from .otp.sms_provider import SmsProvider, TwilioSmsProvider
from .otp.sms_provider_mock import MockSMSProvider
from .store.applications import ApplicationStore
from .store.jobs import JobStore

logger = get_logger("jobboard")

# body errors (bad JSON, wrong types) use the same message as a missing field
VALIDATION_MESSAGES = {
    "/sendOtp": "phone required",
    "/verifyOtp": "phone and otp required",
    "/apply": "Missing required fields",
}


def build_sms_provider(settings: Settings) -> SmsProvider:
    if settings.sms_provider == "mock":
        logger.warning("Using mock SMS provider; OTP codes are logged, not sent")
        return MockSMSProvider()
    return TwilioSmsProvider(
        account_sid=settings.twilio_sid,
        auth_token=settings.twilio_auth_token,
        from_number=settings.twilio_from,
        timeout=settings.sms_timeout_seconds,
    )


async def sweep_expired_otps(otp_manager: OtpManager, interval: float) -> None:
    """
    Periodically purge expired OTP records so abandoned challenges do not pile up.
    """
    while True:
        await asyncio.sleep(interval)
        try:
            otp_manager.sweep_expired()
        except Exception:
            logger.exception("OTP sweep failed; retrying in %ss", interval)


def create_app(
    settings: Optional[Settings] = None,
    sms_provider: Optional[SmsProvider] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build the application. Raises RuntimeError when configuration is incomplete.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    otp_kwargs = {"clock": clock} if clock is not None else {}
    otp_manager = OtpManager(
        secret=settings.otp_hash_secret,
        sms_provider=sms_provider or build_sms_provider(settings),
        ttl_seconds=settings.otp_ttl_seconds,
        max_attempts=settings.otp_max_attempts,
        **otp_kwargs,
    )

    app = FastAPI(title="Job Board API", version="1.0.0")
    app.state.settings = settings
    app.state.otp_manager = otp_manager
    app.state.job_store = JobStore()
    app.state.application_store = ApplicationStore()
    app.state.sweep_task = None

    # CORS (open for demo)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger. Bodies are not logged since they carry OTP codes.
        """
        response = await call_next(request)
        logger.info(
            "HTTP %s %s from %s -> %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
            response.status_code,
        )
        return response

    @app.exception_handler(OtpError)
    async def otp_error_handler(request: Request, exc: OtpError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = VALIDATION_MESSAGES.get(request.url.path, "invalid request")
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/api/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    app.include_router(otp_router)
    app.include_router(jobs_router)
    app.include_router(applications_router)

    @app.on_event("startup")
    async def on_startup():
        logger.info("Job board starting up (sms_provider=%s)", settings.sms_provider)
        if settings.otp_sweep_interval_seconds > 0:
            app.state.sweep_task = asyncio.create_task(
                sweep_expired_otps(otp_manager, settings.otp_sweep_interval_seconds)
            )

    @app.on_event("shutdown")
    async def on_shutdown():
        task = app.state.sweep_task
        if task is not None:
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        logger.info("Job board shutting down")

    return app
