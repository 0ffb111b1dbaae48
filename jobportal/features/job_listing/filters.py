"""Client-side job filters."""
from typing import Iterable, List, Optional

from jobportal.core.schemas import Job


def matches_search(job: Job, search: Optional[str]) -> bool:
    """Case-insensitive substring match against title or company."""
    if not search:
        return True
    needle = search.lower()
    return needle in job.title.lower() or needle in job.company.lower()


def matches_location(job: Job, location: Optional[str]) -> bool:
    """Case-insensitive substring match against the location."""
    if not location:
        return True
    return location.lower() in job.location.lower()


def matches_type(job: Job, job_type: Optional[str]) -> bool:
    """Exact match against the employment type."""
    if not job_type:
        return True
    return job.type.value == job_type


def filter_jobs(
    jobs: Iterable[Job],
    search: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = None
) -> List[Job]:
    """Keep the jobs that match every active filter, in their original order.

    Empty or missing filters are inactive. Since each filter is a pure
    per-job predicate, the result does not depend on the order the filters
    are applied in, and filtering a filtered list again changes nothing.

    Args:
        jobs: Jobs in listing order
        search: Text looked for in the title or company
        location: Text looked for in the location
        job_type: Employment type the job must have

    Returns:
        The matching subsequence of ``jobs``
    """
    return [
        job for job in jobs
        if matches_search(job, search)
        and matches_location(job, location)
        and matches_type(job, job_type)
    ]
