from typing import Optional

from fastapi import APIRouter, Depends

from ..otp.otp_manager import OtpManager
from .deps import get_otp_manager
from .schemas import ErrorResponse, OkResponse, SendOtpRequest, VerifyOtpRequest

router = APIRouter(tags=["otp"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/sendOtp", response_model=OkResponse, responses=ERROR_RESPONSES)
async def send_otp(
    payload: Optional[SendOtpRequest] = None,
    otp_manager: OtpManager = Depends(get_otp_manager),
):
    """
    Issue a fresh OTP for the phone and deliver it by SMS.
    """
    payload = payload or SendOtpRequest()
    await otp_manager.issue_otp(payload.phone)
    return OkResponse()


@router.post("/verifyOtp", response_model=OkResponse, responses=ERROR_RESPONSES)
async def verify_otp(
    payload: Optional[VerifyOtpRequest] = None,
    otp_manager: OtpManager = Depends(get_otp_manager),
):
    """
    Check a submitted code. A successful check consumes the OTP.
    """
    payload = payload or VerifyOtpRequest()
    otp_manager.verify_otp(payload.phone, payload.otp)
    return OkResponse()
