from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _digits_to_str(value: Any) -> Any:
    # clients often post phones and codes as JSON numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class SendOtpRequest(BaseModel):
    phone: Optional[str] = Field(None, examples=["+911234567890"])

    @field_validator("phone", mode="before")
    @classmethod
    def _coerce_phone(cls, value):
        return _digits_to_str(value)


class VerifyOtpRequest(BaseModel):
    phone: Optional[str] = Field(None, examples=["+911234567890"])
    otp: Optional[str] = Field(None, examples=["4821"])

    @field_validator("phone", "otp", mode="before")
    @classmethod
    def _coerce_digits(cls, value):
        return _digits_to_str(value)


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str


class JobOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId")
    title: str
    company: str
    location: str
    exp: str
    snippet: str
    desc: str


class ApplyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    job_id: Optional[str] = Field(None, alias="jobId")
    resume_url: Optional[str] = Field(None, alias="resumeUrl")

    @field_validator("phone", mode="before")
    @classmethod
    def _coerce_phone(cls, value):
        return _digits_to_str(value)


class ApplyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    application_id: str = Field(..., alias="applicationId")


class ApplicationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    job_id: str = Field(..., alias="jobId")
    name: str
    email: str
    phone: str
    resume_url: str = Field("", alias="resumeUrl")
    status: str
    created_at: str = Field(..., alias="createdAt")


class VisitorInfo(BaseModel):
    profile: Optional[Dict[str, str]] = None
    applications: List[ApplicationOut] = []

