from fastapi import Request

from ..otp.otp_manager import OtpManager
from ..store.applications import ApplicationStore
from ..store.jobs import JobStore


def get_otp_manager(request: Request) -> OtpManager:
    """
    Process-wide OTP manager built by create_app().
    """
    return request.app.state.otp_manager


def get_job_store(request: Request) -> JobStore:
    return request.app.state.job_store


def get_application_store(request: Request) -> ApplicationStore:
    return request.app.state.application_store
