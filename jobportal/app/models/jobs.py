"""Job-related models."""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel

from jobportal.core.schemas import ApplicationStatus, JobType


class JobCard(BaseModel):
    """Job as shown on a listing card."""
    id: str
    title: str
    company: str
    location: str
    type: JobType
    salary_range: str
    description: str
    posted_date: str

    class Config:
        from_attributes = True


class JobDetail(JobCard):
    """Job detail page."""
    requirements: List[str]
    benefits: List[str]
    application_deadline: Optional[str] = None
    created_at: datetime


class ApplyResponse(BaseModel):
    """Outcome of a successful application."""
    application_id: str
    job_id: str
    resume_url: str
    status: ApplicationStatus
    message: str = "Application submitted successfully! You will receive an email confirmation shortly."
