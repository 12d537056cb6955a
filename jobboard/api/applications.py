from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..logging_config import get_logger
from ..store.applications import ApplicationStore
from .deps import get_application_store
from .schemas import ApplicationOut, ApplyRequest, ApplyResponse, ErrorResponse, VisitorInfo

logger = get_logger("jobboard.api.applications")

router = APIRouter(tags=["applications"])


@router.post("/apply", response_model=ApplyResponse, responses={400: {"model": ErrorResponse}})
async def apply(
    payload: Optional[ApplyRequest] = None,
    store: ApplicationStore = Depends(get_application_store),
):
    """
    Record an application for a job.
    """
    payload = payload or ApplyRequest()
    if not (payload.name and payload.email and payload.phone and payload.job_id):
        raise HTTPException(status_code=400, detail="Missing required fields")

    app = store.add(
        job_id=payload.job_id,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        resume_url=payload.resume_url,
    )
    logger.info("Application %s created for job_id=%s", app.id, app.job_id)
    return ApplyResponse(application_id=app.id)


@router.get(
    "/applications",
    response_model=List[ApplicationOut],
    responses={400: {"model": ErrorResponse}},
)
async def list_applications(
    email: Optional[str] = None,
    store: ApplicationStore = Depends(get_application_store),
):
    """
    Applications submitted with the given email (case-insensitive).
    """
    if not email:
        raise HTTPException(status_code=400, detail="email required")
    return [a.to_dict() for a in store.for_email(email)]


@router.get("/operator/visitorInfo", response_model=VisitorInfo)
async def visitor_info(
    email: Optional[str] = None,
    store: ApplicationStore = Depends(get_application_store),
):
    """
    Operator view of a visitor: a minimal profile plus their applications.
    """
    if not email:
        return VisitorInfo()
    apps = [a.to_dict() for a in store.for_email(email)]
    return {"profile": {"email": email}, "applications": apps}
