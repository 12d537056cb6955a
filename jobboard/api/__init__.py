from .applications import router as applications_router
from .jobs import router as jobs_router
from .otp import router as otp_router

__all__ = ["applications_router", "jobs_router", "otp_router"]
