"""
Static job listings
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional

SEARCH_LIMIT = 10


@dataclass(frozen=True)
class Job:
    job_id: str
    title: str
    company: str
    location: str
    exp: str
    snippet: str
    desc: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["jobId"] = data.pop("job_id")
        return data


DEFAULT_JOBS = (
    Job(
        job_id="job_101",
        title="Frontend Developer",
        company="Acme",
        location="Bengaluru",
        exp="2-4 yrs",
        snippet="React, JS",
        desc="Build UI for web apps.",
    ),
    Job(
        job_id="job_102",
        title="Backend Engineer",
        company="Bolt",
        location="Mumbai",
        exp="3-6 yrs",
        snippet="Node.js, DB",
        desc="Design APIs and microservices.",
    ),
)


class JobStore:
    """
    Read-only, in-memory list of jobs.
    """

    def __init__(self, jobs: Iterable[Job] = DEFAULT_JOBS):
        self._jobs: List[Job] = list(jobs)

    def search(self, keywords: Optional[str] = None, limit: int = SEARCH_LIMIT) -> List[Job]:
        """
        Case-insensitive substring match on title or snippet.
        Empty keywords match every job.
        """
        q = (keywords or "").lower()
        out = [
            j for j in self._jobs
            if not q or q in j.title.lower() or q in j.snippet.lower()
        ]
        return out[:limit]

    def get(self, job_id: str) -> Optional[Job]:
        for job in self._jobs:
            if job.job_id == job_id:
                return job
        return None

    def __len__(self) -> int:
        return len(self._jobs)
