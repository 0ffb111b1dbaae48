"""Where job records come from.

Three sources share one interface:

* ``RemoteJobSource`` reads the hosted ``jobs`` table.
* ``SampleJobSource`` serves the fixed sample set.
* ``FallbackJobSource`` asks a primary source and answers from a fallback
  source when the primary raises ``BackendError``.

Which one the application uses is decided by the ``JOB_SOURCE`` setting
through ``build_job_source``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from jobportal.core.backend import BackendClient
from jobportal.core.config import Settings
from jobportal.core.exceptions import BackendError
from jobportal.core.logging import setup_logging
from jobportal.core.sample_data import sample_jobs
from jobportal.core.schemas import Job

logger = setup_logging('job_listing')


class JobSource(ABC):
    @abstractmethod
    def list_jobs(self) -> List[Job]:
        """Return all jobs, newest first."""

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]:
        """Return one job, or None if there is no such job."""


class RemoteJobSource(JobSource):
    """Jobs from the hosted ``jobs`` table."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    def list_jobs(self) -> List[Job]:
        rows = self.backend.select('jobs', order='created_at.desc')
        return [Job.model_validate(row) for row in rows or []]

    def get_job(self, job_id: str) -> Optional[Job]:
        try:
            row = self.backend.select('jobs', filters={'id': job_id}, single=True)
        except BackendError as e:
            # a single-object select of a missing row is answered with 406
            if e.status_code == 406:
                return None
            raise
        return Job.model_validate(row) if row else None


class SampleJobSource(JobSource):
    """The fixed sample jobs."""

    def list_jobs(self) -> List[Job]:
        return sample_jobs()

    def get_job(self, job_id: str) -> Optional[Job]:
        return next((job for job in sample_jobs() if job.id == job_id), None)


class FallbackJobSource(JobSource):
    """Reads from ``primary`` and switches to ``fallback`` on backend errors."""

    def __init__(self, primary: JobSource, fallback: JobSource):
        self.primary = primary
        self.fallback = fallback

    def list_jobs(self) -> List[Job]:
        try:
            return self.primary.list_jobs()
        except BackendError as e:
            logger.warning(f"Jobs unavailable, using sample data: {e.message}")
            return self.fallback.list_jobs()

    def get_job(self, job_id: str) -> Optional[Job]:
        try:
            return self.primary.get_job(job_id)
        except BackendError as e:
            logger.warning(f"Job {job_id} unavailable, using sample data: {e.message}")
            return self.fallback.get_job(job_id)


def build_job_source(settings: Settings, backend: BackendClient) -> JobSource:
    """Pick the job source named by ``settings.job_source``."""
    if settings.job_source == 'sample':
        return SampleJobSource()
    if settings.job_source == 'remote':
        return RemoteJobSource(backend)
    return FallbackJobSource(RemoteJobSource(backend), SampleJobSource())
