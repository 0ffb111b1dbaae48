"""FastAPI application models."""

from .jobs import JobCard, JobDetail, ApplyResponse
from .scheduling import EligibleApplication, ScheduleOptions, ScheduleRequest, ScheduleResponse
from .interview import PermissionReport, SessionSnapshot
from .feedback import FeedbackResponse, SkillScore
from .auth import Credentials, TokenResponse, SessionInfo, SessionUser

__all__ = [
    'JobCard',
    'JobDetail',
    'ApplyResponse',
    'EligibleApplication',
    'ScheduleOptions',
    'ScheduleRequest',
    'ScheduleResponse',
    'PermissionReport',
    'SessionSnapshot',
    'FeedbackResponse',
    'SkillScore',
    'Credentials',
    'TokenResponse',
    'SessionInfo',
    'SessionUser',
]
