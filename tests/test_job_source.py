"""Tests for job sources."""
import pytest

from jobportal.core.config import Settings
from jobportal.core.exceptions import BackendError
from jobportal.features.job_listing import (
    FallbackJobSource,
    RemoteJobSource,
    SampleJobSource,
    build_job_source,
)

ROW = {
    "id": "42",
    "title": "Data Engineer",
    "company": "Pipelines Ltd",
    "location": "Remote",
    "type": "remote",
    "salary_range": "$130k - $150k",
    "description": "Build pipelines.",
    "requirements": ["Python"],
    "benefits": ["Remote work"],
    "posted_date": "2024-01-20",
    "application_deadline": "2024-02-20",
    "created_at": "2024-01-20T10:00:00Z",
}


class StubBackend:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def select(self, table, filters=None, columns="*", order=None, single=False, access_token=None):
        self.calls.append({"table": table, "filters": filters, "order": order, "single": single})
        if self.error:
            raise self.error
        if single:
            matches = [row for row in self.rows if row["id"] == filters["id"]]
            if len(matches) != 1:
                raise BackendError("JSON object requested, multiple (or no) rows returned", 406)
            return matches[0]
        return self.rows


def test_remote_lists_newest_first():
    backend = StubBackend([ROW])
    jobs = RemoteJobSource(backend).list_jobs()
    assert [job.title for job in jobs] == ["Data Engineer"]
    assert backend.calls[0]["order"] == "created_at.desc"


def test_remote_missing_job_is_none():
    assert RemoteJobSource(StubBackend([ROW])).get_job("7") is None


def test_remote_reraises_other_errors():
    backend = StubBackend(error=BackendError("boom", 500))
    with pytest.raises(BackendError):
        RemoteJobSource(backend).get_job("42")


def test_sample_source():
    source = SampleJobSource()
    assert len(source.list_jobs()) == 3
    assert source.get_job("3").title == "UX Designer"
    assert source.get_job("99") is None


def test_fallback_on_backend_error():
    backend = StubBackend(error=BackendError("Could not reach backend"))
    source = FallbackJobSource(RemoteJobSource(backend), SampleJobSource())
    assert [job.id for job in source.list_jobs()] == ["1", "2", "3"]
    assert source.get_job("2").title == "Product Manager"


def test_fallback_not_used_when_remote_answers():
    source = FallbackJobSource(RemoteJobSource(StubBackend([ROW])), SampleJobSource())
    assert [job.id for job in source.list_jobs()] == ["42"]
    assert source.get_job("1") is None


@pytest.mark.parametrize("mode,expected", [
    ("sample", SampleJobSource),
    ("remote", RemoteJobSource),
    ("auto", FallbackJobSource),
])
def test_build_job_source(mode, expected):
    assert isinstance(build_job_source(Settings(job_source=mode), StubBackend()), expected)
