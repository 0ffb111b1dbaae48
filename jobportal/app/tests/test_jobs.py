"""Tests for job listing, detail and export endpoints."""
import pytest

from jobportal.core.exceptions import BackendError


@pytest.fixture
def missing_jobs_table(fake_backend):
    """Backend that answers like a project without a jobs table."""
    fake_backend.fail["select"] = BackendError('relation "public.jobs" does not exist', 404)
    return fake_backend


@pytest.fixture
def remote_jobs(fake_backend):
    fake_backend.tables["jobs"] = [
        {
            "id": "a1",
            "title": "Backend Engineer",
            "company": "Acme",
            "location": "Berlin, DE",
            "type": "full-time",
            "salary_range": "EUR 70k",
            "description": "APIs",
            "requirements": ["Python"],
            "benefits": ["Lunch"],
            "posted_date": "2024-03-01",
            "application_deadline": "2024-04-01",
            "created_at": "2024-03-01T08:00:00Z",
        },
        {
            "id": "a2",
            "title": "Data Analyst",
            "company": "Acme",
            "location": "Remote",
            "type": "part-time",
            "salary_range": "EUR 30k",
            "description": "Dashboards",
            "requirements": [],
            "benefits": [],
            "posted_date": "2024-03-05",
            "application_deadline": None,
            "created_at": "2024-03-05T08:00:00Z",
        },
    ]
    return fake_backend


@pytest.mark.api
def test_listing_requires_session(client):
    response = client.get("/api/jobs")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.api
def test_listing_rejects_forged_token(client):
    response = client.get("/api/jobs", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


@pytest.mark.api
def test_sample_data_renders_three_cards(client, auth_headers, missing_jobs_table):
    """Without a jobs table the listing falls back to the sample jobs."""
    response = client.get("/api/jobs", headers=auth_headers)
    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 3
    assert [card["title"] for card in cards] == [
        "Senior Frontend Developer",
        "Product Manager",
        "UX Designer",
    ]


@pytest.mark.api
def test_contract_filter_leaves_ux_designer(client, auth_headers, missing_jobs_table):
    response = client.get("/api/jobs", params={"type": "contract"}, headers=auth_headers)
    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 1
    assert cards[0]["title"] == "UX Designer"


@pytest.mark.api
def test_search_and_location_filters(client, auth_headers, missing_jobs_table):
    response = client.get(
        "/api/jobs",
        params={"search": "frontend", "location": "francisco"},
        headers=auth_headers
    )
    assert [card["id"] for card in response.json()] == ["1"]


@pytest.mark.api
def test_unknown_type_is_rejected(client, auth_headers, missing_jobs_table):
    response = client.get("/api/jobs", params={"type": "internship"}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.api
def test_remote_jobs_newest_first(client, auth_headers, remote_jobs):
    response = client.get("/api/jobs", headers=auth_headers)
    assert response.status_code == 200
    assert [card["id"] for card in response.json()] == ["a2", "a1"]


@pytest.mark.api
def test_get_job(client, auth_headers, remote_jobs):
    response = client.get("/api/jobs/a1", headers=auth_headers)
    assert response.status_code == 200
    job = response.json()
    assert job["title"] == "Backend Engineer"
    assert job["requirements"] == ["Python"]


@pytest.mark.api
def test_get_nonexistent_job(client, auth_headers, remote_jobs):
    response = client.get("/api/jobs/999", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.api
def test_get_sample_job_when_backend_down(client, auth_headers, missing_jobs_table):
    response = client.get("/api/jobs/3", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["company"] == "Design Studio"


@pytest.mark.api
def test_export_text(client, auth_headers, missing_jobs_table):
    response = client.get("/api/jobs/1/export", headers=auth_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    disposition = response.headers["content-disposition"]
    assert "Senior_Frontend_Developer" in disposition
    assert disposition.endswith('_job_description.txt"')
    assert "Salary: $120,000 - $160,000" in response.text


@pytest.mark.api
def test_export_card_summary(client, auth_headers, missing_jobs_table):
    response = client.get("/api/jobs/2/export", params={"detailed": False}, headers=auth_headers)
    assert response.status_code == 200
    assert response.text.startswith("Product Manager\nStartupXYZ\n\n")
    assert "Salary:" not in response.text


@pytest.mark.api
@pytest.mark.parametrize("export_format", ["pdf", "docx"])
def test_export_other_formats_not_implemented(client, auth_headers, missing_jobs_table, export_format):
    response = client.get(
        "/api/jobs/1/export",
        params={"format": export_format},
        headers=auth_headers
    )
    assert response.status_code == 501
    assert response.json()["detail"] == (
        f"{export_format.upper()} download would be implemented with backend API"
    )
