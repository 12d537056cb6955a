from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from ..logging_config import get_logger
from ..store.jobs import JobStore
from .deps import get_job_store
from .schemas import JobOut

logger = get_logger("jobboard.api.jobs")

router = APIRouter(tags=["jobs"])


@router.get("/searchJobs", response_model=List[JobOut])
async def search_jobs(keywords: Optional[str] = None, jobs: JobStore = Depends(get_job_store)):
    """
    Up to 10 jobs whose title or skills snippet contains the keywords.
    """
    results = jobs.search(keywords)
    logger.info("searchJobs keywords=%r -> %d results", keywords, len(results))
    return [j.to_dict() for j in results]


@router.get("/job/{job_id}")
async def get_job(job_id: str, jobs: JobStore = Depends(get_job_store)) -> Dict[str, Any]:
    """
    Job details, or an empty object when the id is unknown.
    """
    job = jobs.get(job_id)
    if job is None:
        logger.warning("Job not found job_id=%s", job_id)
        return {}
    return job.to_dict()
