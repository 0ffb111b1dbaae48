"""Plain-text exports of job descriptions."""
import re
from enum import Enum

from jobportal.core.schemas import Job


class ExportFormat(str, Enum):
    TXT = "txt"
    PDF = "pdf"
    DOCX = "docx"


def export_filename(job: Job) -> str:
    """File name for a job description download, spaces as underscores."""
    title = re.sub(r"\s+", "_", job.title)
    return f"{title}_job_description.txt"


def _lists(job: Job) -> str:
    requirements = "\n".join(job.requirements)
    benefits = "\n".join(job.benefits)
    return f"Requirements:\n{requirements}\n\nBenefits:\n{benefits}"


def job_card_text(job: Job) -> str:
    """Short export offered from the listing cards."""
    return f"{job.title}\n{job.company}\n\n{job.description}\n\n{_lists(job)}"


def job_detail_text(job: Job) -> str:
    """Full export offered from the job detail page."""
    return (
        f"{job.title}\n{job.company}\n"
        f"Location: {job.location}\n"
        f"Type: {job.type.value}\n"
        f"Salary: {job.salary_range}\n\n"
        f"Description:\n{job.description}\n\n"
        f"{_lists(job)}"
    )


def unsupported_format_notice(export_format: ExportFormat) -> str:
    return f"{export_format.value.upper()} download would be implemented with backend API"
