"""
In-memory job applications
"""

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4


def new_id(prefix: str = "id") -> str:
    # millisecond timestamp, suffixed so two ids in the same ms differ
    return f"{prefix}_{int(time.time() * 1000)}{uuid4().hex[:8]}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class Application:
    job_id: str
    name: str
    email: str
    phone: str
    resume_url: str = ""
    status: str = "Applied"
    id: str = field(default_factory=lambda: new_id("app"))
    created_at: str = field(default_factory=_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "jobId": self.job_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "resumeUrl": self.resume_url,
            "status": self.status,
            "createdAt": self.created_at,
        }


class ApplicationStore:
    """
    Append-only list of applications, filtered by applicant email.
    """

    def __init__(self):
        self._items: List[Application] = []
        self._lock = threading.Lock()

    def add(
        self,
        job_id: str,
        name: str,
        email: str,
        phone: str,
        resume_url: Optional[str] = None,
    ) -> Application:
        app = Application(
            job_id=job_id,
            name=name,
            email=email,
            phone=phone,
            resume_url=resume_url or "",
        )
        with self._lock:
            self._items.append(app)
        return app

    def for_email(self, email: str) -> List[Application]:
        needle = email.lower()
        with self._lock:
            return [a for a in self._items if a.email.lower() == needle]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
