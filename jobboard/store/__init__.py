from .applications import Application, ApplicationStore
from .jobs import Job, JobStore

__all__ = ["Application", "ApplicationStore", "Job", "JobStore"]
