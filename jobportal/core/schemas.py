"""Core Pydantic models for records exchanged with the hosted backend.

This module defines the records the application reads and writes:
1. Jobs, which are created and edited outside this application
2. Applications, inserted once per apply action
3. Interviews, inserted by the scheduling flow
4. Feedback, a transient object that is never persisted

Field names follow the backend's column names so rows can be validated
directly from JSON responses.

Example:
    ```python
    from jobportal.core.schemas import Job, JobType

    job = Job.model_validate(row)
    if job.type == JobType.CONTRACT:
        ...
    ```
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class JobType(str, Enum):
    """Employment types a job can be listed under."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    REMOTE = "remote"


class ApplicationStatus(str, Enum):
    """Application review status.

    Only ``PENDING`` is ever written by this application; the other values
    are set by the hiring side in the hosted backend.
    """
    PENDING = "pending"
    REVIEWED = "reviewed"
    INTERVIEW = "interview"
    REJECTED = "rejected"
    HIRED = "hired"


class InterviewStatus(str, Enum):
    """Interview booking status."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Job(BaseModel):
    """A postable position.

    Attributes:
        id: Backend identifier
        title: Position title
        company: Hiring company name
        location: Free-text location, e.g. "San Francisco, CA" or "Remote"
        type: Employment type
        salary_range: Free-text salary range
        description: Long description
        requirements: Ordered requirement strings
        benefits: Ordered benefit strings
        posted_date: Date the job was posted
        application_deadline: Last day to apply
        created_at: Creation timestamp, used for listing order
    """
    id: str
    title: str
    company: str
    location: str
    type: JobType
    salary_range: str = ""
    description: str = ""
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    posted_date: str
    application_deadline: Optional[str] = None
    created_at: datetime


class JobSummary(BaseModel):
    """Title and company of the job an application belongs to."""
    title: str
    company: str


class Application(BaseModel):
    """A user's resume + cover letter submission against a job.

    Attributes:
        id: Backend identifier
        user_id: Owning user
        job_id: Job applied to
        resume_url: Name of the uploaded resume in the resume bucket
        cover_letter: Optional cover letter text
        status: Review status
        applied_at: Submission timestamp
        jobs: Joined job title/company when selected with the job relation
    """
    id: str
    user_id: str
    job_id: str
    resume_url: str
    cover_letter: str = ""
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: Optional[datetime] = None
    jobs: Optional[JobSummary] = None


class Interview(BaseModel):
    """A scheduled interview linked to an application.

    The feedback fields exist in the backend but are never written here.
    """
    id: str
    application_id: str
    scheduled_date: datetime
    duration: int
    status: InterviewStatus = InterviewStatus.SCHEDULED
    feedback_score: Optional[int] = None
    feedback_report: Optional[str] = None
    created_at: Optional[datetime] = None


class FeedbackData(BaseModel):
    """Interview feedback shown after a session. Never persisted.

    Attributes:
        overall_score: Overall score out of 100
        communication: Communication score out of 100
        technical: Technical knowledge score out of 100
        confidence: Confidence score out of 100
        clarity: Clarity score out of 100
        strengths: Things that went well
        improvements: Areas for improvement
        detailed_feedback: Free-text summary
        recommendations: Suggested next steps
    """
    overall_score: int = Field(ge=0, le=100)
    communication: int = Field(ge=0, le=100)
    technical: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    clarity: int = Field(ge=0, le=100)
    strengths: List[str]
    improvements: List[str]
    detailed_feedback: str
    recommendations: List[str]
