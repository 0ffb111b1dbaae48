"""Interview scheduling models."""
from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from jobportal.core.schemas import InterviewStatus


class EligibleApplication(BaseModel):
    """An application that may be booked for an interview."""
    id: str
    job_id: str
    job_title: Optional[str] = None
    company: Optional[str] = None
    applied_at: Optional[datetime] = None


class ScheduleOptions(BaseModel):
    applications: List[EligibleApplication]
    dates: List[date]
    time_slots: List[str]
    durations: List[int]
    default_duration: int


class ScheduleRequest(BaseModel):
    application_id: str
    day: date
    time_slot: str = Field(pattern=r"^\d{2}:\d{2}$")
    duration: int = 30


class ScheduleResponse(BaseModel):
    interview_id: str
    application_id: str
    scheduled_date: datetime
    duration: int
    status: InterviewStatus
    message: str = "Interview scheduled successfully!"
