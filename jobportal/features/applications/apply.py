"""Apply flow: upload resume, record the application, send confirmation.

The three steps run in order and the first failure aborts the rest. Nothing
is retried or rolled back; a resume uploaded before a failed insert stays in
the bucket, and submitting again runs every step again.
"""
from typing import Optional

from jobportal.core.backend import BackendClient
from jobportal.core.exceptions import ApplyError, BackendError
from jobportal.core.logging import setup_logging
from jobportal.core.schemas import Application, ApplicationStatus, Job
from jobportal.core.session import UserSession
from jobportal.core.storage import ALLOWED_RESUME_EXTENSIONS, ResumeStorage, file_extension
from jobportal.features.notifications.confirmation import ConfirmationClient

logger = setup_logging('applications')


class ApplyService:
    """Submits applications for the signed-in user.

    Attributes:
        backend: Client for the hosted tables
        storage: Resume storage
        confirmations: Client for the confirmation email function
    """

    def __init__(
        self,
        backend: BackendClient,
        storage: ResumeStorage,
        confirmations: ConfirmationClient
    ):
        self.backend = backend
        self.storage = storage
        self.confirmations = confirmations

    @staticmethod
    def validate_resume(filename: Optional[str]) -> None:
        """Reject missing files and file types the apply form does not accept.

        Raises:
            ValueError: If no file was selected or its extension is not allowed
        """
        if not filename:
            raise ValueError("A resume file is required")
        if file_extension(filename).lower() not in ALLOWED_RESUME_EXTENSIONS:
            allowed = ", ".join(f".{ext}" for ext in ALLOWED_RESUME_EXTENSIONS)
            raise ValueError(f"Resume must be one of {allowed}")

    def apply(
        self,
        session: UserSession,
        job: Job,
        filename: str,
        content: bytes,
        cover_letter: str = "",
        content_type: Optional[str] = None
    ) -> Application:
        """Submit an application for ``job``.

        Args:
            session: The applicant's session
            job: Job being applied to
            filename: Original resume file name
            content: Resume bytes
            cover_letter: Optional cover letter
            content_type: MIME type reported by the client

        Returns:
            The inserted application

        Raises:
            ApplyError: If the upload, the insert or the confirmation call fails
        """
        try:
            resume_name = self.storage.upload_resume(
                session.user_id,
                filename,
                content,
                content_type=content_type,
                access_token=session.access_token
            )
        except BackendError as e:
            logger.error(f"Resume upload failed for user {session.user_id}: {e.message}")
            raise ApplyError("Resume upload failed") from e

        try:
            row = self.backend.insert(
                'applications',
                {
                    'user_id': session.user_id,
                    'job_id': job.id,
                    'resume_url': resume_name,
                    'cover_letter': cover_letter,
                    'status': ApplicationStatus.PENDING.value,
                },
                access_token=session.access_token
            )
        except BackendError as e:
            logger.error(f"Application insert failed for job {job.id}: {e.message}")
            raise ApplyError("Application could not be saved") from e

        try:
            self.confirmations.send(session.email or "", job.title, job.company)
        except BackendError as e:
            logger.error(f"Confirmation email request failed for job {job.id}: {e.message}")
            raise ApplyError("Confirmation email could not be requested") from e

        logger.info(f"User {session.user_id} applied to job {job.id}")
        return Application.model_validate(row)
