"""FastAPI dependencies: settings, backend services and the user session."""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from jobportal.core.backend import BackendClient
from jobportal.core.config import Settings, get_settings
from jobportal.core.exceptions import AuthError
from jobportal.core.session import AuthService, UserSession
from jobportal.core.storage import ResumeStorage
from jobportal.features.applications.apply import ApplyService
from jobportal.features.feedback.generator import FeedbackGenerator
from jobportal.features.interview.registry import SessionRegistry
from jobportal.features.interview.session import InterviewSession
from jobportal.features.interview.timer import AsyncioTickScheduler
from jobportal.features.job_listing.source import JobSource, build_job_source
from jobportal.features.notifications.confirmation import ConfirmationClient
from jobportal.features.scheduling.scheduler import InterviewScheduler

# auto_error is off so optional-auth endpoints can share the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


@lru_cache()
def get_backend() -> BackendClient:
    """Shared client for the hosted backend."""
    return BackendClient.from_settings(get_settings())


def get_auth_service(
    backend: BackendClient = Depends(get_backend),
    settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(backend, settings)


def get_job_source(
    backend: BackendClient = Depends(get_backend),
    settings: Settings = Depends(get_settings)
) -> JobSource:
    return build_job_source(settings, backend)


def get_apply_service(
    backend: BackendClient = Depends(get_backend),
    settings: Settings = Depends(get_settings)
) -> ApplyService:
    return ApplyService(
        backend,
        ResumeStorage(backend, bucket=settings.resume_bucket),
        ConfirmationClient(backend, settings.confirmation_function)
    )


def get_scheduler(
    backend: BackendClient = Depends(get_backend),
    settings: Settings = Depends(get_settings)
) -> InterviewScheduler:
    return InterviewScheduler(backend, time_zone=settings.time_zone)


@lru_cache()
def get_session_registry() -> SessionRegistry:
    """Process-wide registry of live interview sessions."""
    settings = get_settings()
    scheduler = AsyncioTickScheduler()

    def factory(interview_id: str) -> InterviewSession:
        return InterviewSession(
            interview_id,
            scheduler,
            duration=settings.interview_duration,
            completion_delay=settings.completion_delay
        )

    return SessionRegistry(factory)


def get_feedback_generator(settings: Settings = Depends(get_settings)) -> FeedbackGenerator:
    return FeedbackGenerator(delay=settings.feedback_delay)


def get_optional_session(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthService = Depends(get_auth_service)
) -> Optional[UserSession]:
    """Session for the bearer token, or None if there is no valid token."""
    if not token:
        return None
    try:
        return auth.session_for(token)
    except AuthError:
        return None


def get_current_session(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthService = Depends(get_auth_service)
) -> UserSession:
    """Session for the bearer token; 401 if missing or invalid."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_exception
    try:
        return auth.session_for(token)
    except AuthError:
        raise credentials_exception
