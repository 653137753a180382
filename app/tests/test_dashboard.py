"""
Tests for the admin overview, customer dashboard and admin bootstrap
"""
from datetime import date, timedelta

from fastapi import status

from app.core.config import settings
from app.models.booking import Booking
from app.models.job import JobApplication, JobPosting
from app.models.user_role import UserRoleAssignment
from app.services.bootstrap_service import ensure_initial_admin
from app.services.dashboard_service import get_admin_overview


def _seed(db, customer):
    posting = JobPosting(title="Designer", department="Creative", location="Remote",
                         description="d", requirements="r", responsibilities="s", is_active=True)
    db.add(posting)
    db.flush()
    db.add(JobApplication(job_posting_id=posting.id, full_name="Applicant", email="a@example.com",
                          phone="01722222222", resume_url="r.pdf", status="pending"))
    db.add(Booking(user_id=customer.id, service_name="Consultation", booking_date=date.today(),
                   booking_time="09:00 AM", status="pending"))
    db.add(Booking(user_id=customer.id, service_name="Follow-up", booking_date=date.today() + timedelta(days=2),
                   booking_time="10:00 AM", status="confirmed"))
    db.commit()


def test_admin_overview_counts(db, customer_user, admin_user):
    _seed(db, customer_user)

    overview = get_admin_overview(db)

    assert overview.total_users == 2
    assert overview.pending_applications == 1
    assert overview.todays_bookings == 1
    assert overview.pending_orders == 0
    assert overview.active_jobs == 1
    assert {item.kind for item in overview.recent_activity} == {"application", "booking"}
    assert len(overview.recent_activity) == 3


def test_admin_dashboard_endpoint(client, db, customer_user, admin_user, admin_headers):
    _seed(db, customer_user)

    response = client.get("/api/v1/admin/dashboard", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["todays_bookings"] == 1


def test_customer_dashboard(client, db, customer_user, customer_headers):
    _seed(db, customer_user)
    client.post("/api/v1/orders", headers=customer_headers, json={"service_name": "Logo"})

    response = client.get("/api/v1/dashboard", headers=customer_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["profile"]["email"] == "customer@example.com"
    assert len(data["orders"]) == 1
    assert len(data["bookings"]) == 2


def test_bootstrap_creates_initial_admin_once(db):
    user = ensure_initial_admin(db)

    assert user is not None
    assert user.email == settings.INITIAL_ADMIN_EMAIL.lower()
    assert ensure_initial_admin(db) is None
    assert db.query(UserRoleAssignment).filter(UserRoleAssignment.role == "admin").count() == 1


def test_bootstrap_skipped_when_admin_exists(db, admin_user):
    assert ensure_initial_admin(db) is None
