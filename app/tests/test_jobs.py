"""
Tests for careers endpoints and admin job postings / applications
"""
import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from app.models.job import JobApplication, JobPosting


POSTING = {
    "title": "Digital Marketing Executive",
    "department": "Marketing",
    "location": "Dhaka",
    "type": "Full-time",
    "description": "Run campaigns for clients",
    "requirements": "2+ years of paid social",
    "responsibilities": "Plan and report campaigns",
    "salary_range": "30k-40k BDT",
}


@pytest.fixture
def posting(client, admin_user, admin_headers):
    response = client.post("/api/v1/admin/jobs", headers=admin_headers, json=POSTING)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def _application(posting_id, **overrides):
    data = {
        "job_posting_id": posting_id,
        "full_name": "Rahim Uddin",
        "email": "rahim@example.com",
        "phone": "01711111111",
        "resume_url": "resumes/rahim.pdf",
        "portfolio_url": "",
        "cover_letter": "I would love to join.",
    }
    data.update(overrides)
    return data


def test_public_jobs_list_only_active(client, db, posting, admin_headers):
    client.post("/api/v1/admin/jobs", headers=admin_headers, json={**POSTING, "title": "Closed role", "is_active": False})

    response = client.get("/api/v1/careers/jobs")

    assert response.status_code == status.HTTP_200_OK
    assert [job["title"] for job in response.json()["items"]] == ["Digital Marketing Executive"]


def test_anonymous_application(client, db, posting):
    response = client.post("/api/v1/careers/applications", json=_application(posting["id"]))

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "pending"
    assert data["user_id"] is None
    assert data["portfolio_url"] is None
    assert data["job_title"] == "Digital Marketing Executive"


def test_signed_in_application_is_linked(client, posting, customer_user, customer_headers):
    response = client.post(
        "/api/v1/careers/applications", headers=customer_headers, json=_application(posting["id"])
    )
    assert response.json()["user_id"] == customer_user.id


def test_application_validation(client, posting):
    response = client.post(
        "/api/v1/careers/applications",
        json=_application(posting["id"], phone="123", email="not-an-email")
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_application_to_closed_posting_rejected(client, posting, admin_headers):
    client.patch(f"/api/v1/admin/jobs/{posting['id']}/status", headers=admin_headers, json={"status": "inactive"})

    response = client.post("/api/v1/careers/applications", json=_application(posting["id"]))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_cancelled_delete_keeps_posting(client, db, posting, admin_headers):
    """Operator cancels the confirmation: row count is unchanged"""
    before = db.query(JobPosting).count()

    response = client.delete(f"/api/v1/admin/jobs/{posting['id']}", headers=admin_headers)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert db.query(JobPosting).count() == before


def test_confirmed_delete_removes_posting_and_applications(client, db, posting, admin_headers):
    client.post("/api/v1/careers/applications", json=_application(posting["id"]))

    response = client.delete(f"/api/v1/admin/jobs/{posting['id']}", headers=admin_headers, params={"confirm": True})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total"] == 0
    db.expire_all()
    assert db.query(JobApplication).count() == 0


def test_update_posting(client, posting, admin_headers):
    response = client.patch(
        f"/api/v1/admin/jobs/{posting['id']}", headers=admin_headers, json={"salary_range": "Negotiable"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["salary_range"] == "Negotiable"
    assert response.json()["title"] == POSTING["title"]


def test_application_review_flow_can_reopen(client, posting, admin_headers):
    """hired -> reviewing is allowed"""
    application = client.post("/api/v1/careers/applications", json=_application(posting["id"])).json()
    url = f"/api/v1/admin/applications/{application['id']}/status"

    for target in ("reviewing", "interviewed", "hired", "reviewing"):
        response = client.patch(url, headers=admin_headers, json={"status": target})
        assert response.status_code == status.HTTP_200_OK

    items = response.json()["items"]
    assert items[0]["status"] == "reviewing"
    assert items[0]["job_title"] == POSTING["title"]


def test_application_statuses(client, admin_user, admin_headers):
    response = client.get("/api/v1/admin/applications/statuses", headers=admin_headers)
    assert response.json()["statuses"] == ["pending", "reviewing", "interviewed", "rejected", "hired"]


def test_staff_cannot_manage_postings(client, staff_user, headers_for):
    response = client.post("/api/v1/admin/jobs", headers=headers_for(staff_user), json=POSTING)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_store_failure_on_application_is_retryable(client, db, posting, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT INTO job_applications", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    response = client.post("/api/v1/careers/applications", json=_application(posting["id"]))
    monkeypatch.undo()

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Failed to create job application"
    assert db.query(JobApplication).count() == 0
