"""Job listing: sources, filters and text exports."""

from .source import JobSource, RemoteJobSource, SampleJobSource, FallbackJobSource, build_job_source
from .filters import filter_jobs
from .export import ExportFormat, export_filename, job_card_text, job_detail_text

__all__ = [
    'JobSource',
    'RemoteJobSource',
    'SampleJobSource',
    'FallbackJobSource',
    'build_job_source',
    'filter_jobs',
    'ExportFormat',
    'export_filename',
    'job_card_text',
    'job_detail_text',
]
