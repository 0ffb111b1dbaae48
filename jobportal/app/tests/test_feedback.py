"""Tests for the interview feedback endpoints."""
import pytest


@pytest.mark.api
def test_feedback(client, auth_headers):
    response = client.get("/api/interview/42/feedback", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["interview_id"] == "42"
    assert body["feedback"]["overall_score"] == 78
    assert body["overall_label"] == "Average"
    assert body["overall_band"] == "medium"
    assert [skill["label"] for skill in body["skills"]] == [
        "Communication", "Technical Knowledge", "Confidence", "Clarity"
    ]
    assert body["skills"][0] == {"label": "Communication", "score": 82, "band": "high"}


@pytest.mark.api
def test_feedback_requires_session(client):
    assert client.get("/api/interview/42/feedback").status_code == 401


@pytest.mark.api
def test_feedback_report_download(client, auth_headers):
    response = client.get("/api/interview/42/feedback/report", headers=auth_headers)
    assert response.status_code == 200
    assert 'filename="interview_feedback_report.txt"' in response.headers["content-disposition"]
    assert "Overall Score: 78/100" in response.text
    assert "• Practice the STAR method for behavioral questions" in response.text
