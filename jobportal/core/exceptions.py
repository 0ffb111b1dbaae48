"""Exception hierarchy shared by the core and the feature modules."""
from typing import Optional


class JobPortalError(Exception):
    """Base class for all jobportal errors."""


class BackendError(JobPortalError):
    """The hosted backend could not be reached or rejected a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthError(BackendError):
    """Sign-in, sign-up or token verification failed."""


class ApplyError(JobPortalError):
    """A step of the apply flow failed and the remaining steps were skipped."""


class SchedulingError(JobPortalError):
    """The interview could not be scheduled."""


class PermissionDeniedError(JobPortalError):
    """Camera or microphone access was refused."""


class InvalidTransitionError(JobPortalError):
    """An interview session action is not allowed in the current state."""

    def __init__(self, action: str, state: str):
        super().__init__(f"Cannot {action} while session is {state}")
        self.action = action
        self.state = state


class ApplicationNotFoundError(JobPortalError):
    """No application of the user with the given id is ready for an interview."""
