"""Resume storage on top of the hosted object store.

Example:
    ```python
    from jobportal.core.storage import ResumeStorage

    storage = ResumeStorage(backend, bucket='resumes')
    name = storage.upload_resume(user_id, 'cv.pdf', content, access_token=token)
    ```
"""
import mimetypes
import time
from typing import Callable, Optional

from jobportal.core.backend import BackendClient
from jobportal.core.logging import setup_logging

logger = setup_logging('storage')

ALLOWED_RESUME_EXTENSIONS = ('pdf', 'doc', 'docx')


def file_extension(filename: str) -> str:
    """Return the text after the last dot, or the whole name if there is none."""
    return filename.rsplit('.', 1)[-1]


def resume_file_name(user_id: str, filename: str, timestamp_ms: int) -> str:
    """Build the storage name for a resume.

    Args:
        user_id: Owner of the resume
        filename: Original file name, used only for its extension
        timestamp_ms: Upload time in epoch milliseconds

    Returns:
        A name such as ``resume_<user>_<millis>.pdf``
    """
    return f"resume_{user_id}_{timestamp_ms}.{file_extension(filename)}"


class ResumeStorage:
    """Uploads resumes into a single bucket."""

    def __init__(
        self,
        backend: BackendClient,
        bucket: str = 'resumes',
        clock: Callable[[], float] = time.time
    ):
        self.backend = backend
        self.bucket = bucket
        self.clock = clock

    def upload_resume(
        self,
        user_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        access_token: Optional[str] = None
    ) -> str:
        """Upload a resume and return its storage name.

        Raises:
            BackendError: If the upload is rejected
        """
        name = resume_file_name(user_id, filename, int(self.clock() * 1000))
        content_type = content_type or mimetypes.guess_type(filename)[0] or 'application/octet-stream'
        logger.info(f"Uploading resume {name} to bucket {self.bucket}")
        return self.backend.upload(
            self.bucket,
            name,
            content,
            content_type=content_type,
            access_token=access_token
        )
