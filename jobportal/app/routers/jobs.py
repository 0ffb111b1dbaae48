from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional

from ..models.jobs import ApplyResponse, JobCard, JobDetail
from ..dependencies import get_apply_service, get_current_session, get_job_source

from jobportal.core.exceptions import ApplyError
from jobportal.core.logging import setup_logging
from jobportal.core.schemas import Job, JobType
from jobportal.core.session import UserSession
from jobportal.features.applications.apply import ApplyService
from jobportal.features.job_listing.export import (
    ExportFormat,
    export_filename,
    job_card_text,
    job_detail_text,
    unsupported_format_notice,
)
from jobportal.features.job_listing.filters import filter_jobs
from jobportal.features.job_listing.source import JobSource

logger = setup_logging('api.jobs')

router = APIRouter()


def _load_job(job_id: str, source: JobSource) -> Job:
    job = source.get_job(job_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job with id {job_id} not found"
        )
    return job


@router.get("", response_model=List[JobCard])
def list_jobs(
    search: Optional[str] = Query(None, description="Text to find in the title or company"),
    location: Optional[str] = Query(None, description="Text to find in the location"),
    job_type: Optional[JobType] = Query(None, alias="type", description="Exact job type"),
    source: JobSource = Depends(get_job_source)
):
    """List jobs, newest first, filtered by search text, location and type"""
    jobs = source.list_jobs()
    return filter_jobs(
        jobs,
        search=search,
        location=location,
        job_type=job_type.value if job_type else None
    )


@router.get("/{job_id}", response_model=JobDetail)
def get_job(job_id: str, source: JobSource = Depends(get_job_source)):
    """Get details for a specific job"""
    return _load_job(job_id, source)


@router.get("/{job_id}/export", response_class=PlainTextResponse)
def export_job(
    job_id: str,
    export_format: ExportFormat = Query(ExportFormat.TXT, alias="format"),
    detailed: bool = Query(True, description="Full detail export instead of the card summary"),
    source: JobSource = Depends(get_job_source)
):
    """Download a job description as a text file"""
    job = _load_job(job_id, source)
    if export_format != ExportFormat.TXT:
        raise HTTPException(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            detail=unsupported_format_notice(export_format)
        )

    content = job_detail_text(job) if detailed else job_card_text(job)
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(job)}"'}
    )


@router.post("/{job_id}/apply", response_model=ApplyResponse, status_code=status.HTTP_201_CREATED)
def apply_to_job(
    job_id: str,
    resume: UploadFile = File(..., description="Resume (.pdf, .doc or .docx)"),
    cover_letter: str = Form(""),
    session: UserSession = Depends(get_current_session),
    source: JobSource = Depends(get_job_source),
    service: ApplyService = Depends(get_apply_service)
):
    """Upload a resume and submit an application for a job"""
    job = _load_job(job_id, source)
    try:
        service.validate_resume(resume.filename)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        application = service.apply(
            session,
            job,
            resume.filename,
            resume.file.read(),
            cover_letter=cover_letter,
            content_type=resume.content_type
        )
    except ApplyError as e:
        logger.error(f"Error applying for job {job_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error submitting application. Please try again."
        )

    return ApplyResponse(
        application_id=application.id,
        job_id=application.job_id,
        resume_url=application.resume_url,
        status=application.status
    )
