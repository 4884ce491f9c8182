import pytest
from fastapi.testclient import TestClient

from resume_screener.api.router import limiter
from resume_screener.config import settings
from resume_screener.main import app

client = TestClient(app)

REQUIREMENTS = {
    "minimum_years_of_experience": 3,
    "required_skills": ["JavaScript", "React", "Node.js"],
    "required_education": {"minimum_degree": "bachelor", "preferred_fields": ["Computer Science"]},
}


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["agent"]
    assert "version" in data
    assert "timestamp" in data


def test_screen_raw(sample_resume_text):
    response = client.post(
        "/screen",
        json={"resume": {"kind": "raw", "text": sample_resume_text}, "requirements": REQUIREMENTS},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["screening_result"] == "pass"
    assert data["confidence_score"] == pytest.approx(0.85)
    assert "✓ Has required technical skills" in data["match_reasons"]
    assert data["candidate_profile"]["full_name"] == "John Smith"
    assert data["error_messages"] == []


def test_screen_structured_with_default_requirements():
    response = client.post(
        "/screen",
        json={"resume": {"kind": "structured", "data": {"fullName": "Ada Lovelace", "skills": ["Python"]}}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["candidate_profile"]["full_name"] == "Ada Lovelace"
    assert data["screening_result"] == "fail"
    assert "Requires 3+ years experience" in data["missing_requirements"]


def test_screen_rejects_empty_required_skills(sample_resume_text):
    response = client.post(
        "/screen",
        json={
            "resume": {"kind": "raw", "text": sample_resume_text},
            "requirements": {"minimum_years_of_experience": 1, "required_skills": []},
        },
    )
    assert response.status_code == 422


def test_screen_rejects_oversized_text():
    text = "x" * (settings.max_resume_chars + 1)
    response = client.post("/screen", json={"resume": {"kind": "raw", "text": text}})
    assert response.status_code == 400


def test_screen_batch(sample_resume_text):
    jobs = [
        {"id": "1", "title": "Frontend Engineer", "company": "Acme", "requirements": REQUIREMENTS},
        {
            "id": "2",
            "title": "Staff Engineer",
            "company": "Globex",
            "requirements": {**REQUIREMENTS, "minimum_years_of_experience": 10},
        },
    ]
    response = client.post(
        "/screen/batch",
        json={"resume": {"kind": "raw", "text": sample_resume_text}, "jobs": jobs},
    )
    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["total_jobs"] == 2
    assert summary["passed_jobs"] == 1
    assert summary["failed_jobs"] == 1
    assert summary["best_matches"][0]["job"]["id"] == "1"


def test_screen_batch_requires_jobs(sample_resume_text):
    response = client.post(
        "/screen/batch",
        json={"resume": {"kind": "raw", "text": sample_resume_text}, "jobs": []},
    )
    assert response.status_code == 422


def test_screen_report(sample_resume_text):
    response = client.post(
        "/screen/report",
        json={"resume": {"kind": "raw", "text": sample_resume_text}, "requirements": REQUIREMENTS},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["detailed_report"]["evaluation"]["result"] == "PASS"
    assert data["detailed_report"]["evaluation"]["confidence"] == 85
    assert data["detailed_features"]["completeness_score"] == 90


def test_upload_rejects_non_pdf():
    response = client.post(
        "/screen/upload",
        files={"resume_file": ("resume.txt", b"not a pdf", "text/plain")},
    )
    assert response.status_code == 400


def test_upload_rejects_unreadable_pdf():
    response = client.post(
        "/screen/upload",
        files={"resume_file": ("resume.pdf", b"not really a pdf", "application/pdf")},
    )
    assert response.status_code == 400


def test_upload_rejects_bad_requirements():
    response = client.post(
        "/screen/upload",
        files={"resume_file": ("resume.pdf", b"%PDF-1.4", "application/pdf")},
        data={"requirements": "{not json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid job requirements JSON"


def test_validate_requirements():
    response = client.post("/requirements/validate", json=REQUIREMENTS)
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": []}

    response = client.post("/requirements/validate", json={"required_skills": []})
    data = response.json()
    assert data["valid"] is False
    assert "No required skills specified" in data["errors"]
