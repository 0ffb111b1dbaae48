"""Application configuration loaded from the environment.

Values are read from the process environment (and a ``.env`` file if one is
present) and validated by a pydantic model, so a typo in ``JOB_SOURCE`` fails
at startup rather than on the first request.

Example:
    ```python
    from jobportal.core.config import get_settings

    settings = get_settings()
    print(settings.backend_url, settings.job_source)
    ```
"""
import os
from functools import lru_cache
from typing import List, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Runtime settings for the API and the feature modules.

    Attributes:
        backend_url: Base URL of the hosted database/auth/storage service
        backend_anon_key: Public API key sent with every backend request
        jwt_secret: Secret used to verify user access tokens
        jwt_audience: Expected ``aud`` claim of user access tokens
        resume_bucket: Storage bucket that receives uploaded resumes
        confirmation_function: Name of the remote confirmation email function
        job_source: Where job records come from (remote, sample or auto)
        request_timeout: Timeout in seconds for backend HTTP calls
        interview_duration: Countdown length of an interview in seconds
        completion_delay: Seconds between interview completion and redirect
        feedback_delay: Seconds the feedback stub waits before answering
        time_zone: Zone in which picked interview slots are interpreted
        cors_origins: Origins allowed by the CORS middleware
    """
    backend_url: str = "https://placeholder.supabase.co"
    backend_anon_key: str = "placeholder-key"
    jwt_secret: str = "change-me"
    jwt_audience: str = "authenticated"
    resume_bucket: str = "resumes"
    confirmation_function: str = "send-application-email"
    job_source: Literal["remote", "sample", "auto"] = "auto"
    request_timeout: float = Field(default=10.0, gt=0)
    interview_duration: int = Field(default=30 * 60, gt=0)
    completion_delay: float = Field(default=3.0, ge=0)
    feedback_delay: float = Field(default=3.0, ge=0)
    time_zone: str = "UTC"
    cors_origins: List[str] = ["*"]

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("time_zone")
    @classmethod
    def check_time_zone(cls, value: str) -> str:
        if value == "UTC":
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value}") from e
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


_ENV_FIELDS = {
    "BACKEND_URL": "backend_url",
    "BACKEND_ANON_KEY": "backend_anon_key",
    "BACKEND_JWT_SECRET": "jwt_secret",
    "BACKEND_JWT_AUDIENCE": "jwt_audience",
    "RESUME_BUCKET": "resume_bucket",
    "CONFIRMATION_FUNCTION": "confirmation_function",
    "JOB_SOURCE": "job_source",
    "REQUEST_TIMEOUT": "request_timeout",
    "INTERVIEW_DURATION_SECONDS": "interview_duration",
    "COMPLETION_DELAY_SECONDS": "completion_delay",
    "FEEDBACK_DELAY_SECONDS": "feedback_delay",
    "SCHEDULING_TIME_ZONE": "time_zone",
    "CORS_ORIGINS": "cors_origins",
}


def load_settings() -> Settings:
    """Build settings from environment variables.

    Returns:
        Validated settings; unset variables keep their defaults

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    load_dotenv()
    values = {
        field: os.environ[env_name]
        for env_name, field in _ENV_FIELDS.items()
        if os.getenv(env_name)
    }
    return Settings(**values)


@lru_cache()
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return load_settings()
