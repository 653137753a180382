"""
Tests for the shared status lifecycle manager
"""
import pytest
from datetime import date, timedelta
from sqlalchemy.exc import OperationalError

from app.core.exceptions import (
    ConfirmationRequired,
    EntityNotFound,
    InvalidStatus,
    PersistenceError,
)
from app.models.activity import ActivityStatus
from app.models.audit_log import AuditLog
from app.models.booking import Booking, BookingStatus
from app.models.job import JobPosting
from app.services.booking_service import booking_lifecycle
from app.services.job_service import job_posting_lifecycle


@pytest.fixture
def booking(db, customer_user):
    booking = Booking(
        user_id=customer_user.id,
        service_name="SEO Audit",
        booking_date=date.today() + timedelta(days=3),
        booking_time="10:00 AM",
        status=BookingStatus.PENDING.value,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


@pytest.fixture
def posting(db):
    posting = JobPosting(
        title="Frontend Developer",
        department="Engineering",
        location="Dhaka",
        description="Build client sites",
        requirements="React",
        responsibilities="Ship features",
        is_active=True,
    )
    db.add(posting)
    db.commit()
    db.refresh(posting)
    return posting


def _fail_commit(*args, **kwargs):
    raise OperationalError("UPDATE bookings", {}, Exception("database is locked"))


def test_allowed_statuses_are_the_declared_enumeration():
    assert booking_lifecycle.allowed_statuses() == ["pending", "confirmed", "completed", "cancelled"]
    assert job_posting_lifecycle.allowed_statuses() == ["active", "inactive"]


def test_any_status_can_follow_any_other(db, booking, admin_user):
    """cancelled -> pending is allowed"""
    booking_lifecycle.transition(db, booking.id, "cancelled", actor_id=admin_user.id)
    updated = booking_lifecycle.transition(db, booking.id, BookingStatus.PENDING, actor_id=admin_user.id)
    assert updated.status == "pending"


def test_setting_current_status_is_idempotent(db, booking, admin_user):
    first = booking_lifecycle.transition(db, booking.id, "confirmed", actor_id=admin_user.id)
    second = booking_lifecycle.transition(db, booking.id, "confirmed", actor_id=admin_user.id)
    assert first.status == second.status == "confirmed"


def test_transition_writes_audit_row(db, booking, admin_user):
    booking_lifecycle.transition(db, booking.id, "completed", actor_id=admin_user.id)

    audit = db.query(AuditLog).filter(AuditLog.action == "STATUS_CHANGE").one()
    assert audit.entity_type == "booking"
    assert audit.entity_id == booking.id
    assert audit.meta_json == {"from": "pending", "to": "completed"}


def test_unknown_status_rejected(db, booking, admin_user):
    with pytest.raises(InvalidStatus):
        booking_lifecycle.transition(db, booking.id, "archived", actor_id=admin_user.id)
    db.refresh(booking)
    assert booking.status == "pending"


def test_missing_entity(db, admin_user):
    with pytest.raises(EntityNotFound):
        booking_lifecycle.transition(db, 9999, "confirmed", actor_id=admin_user.id)


def test_persistence_failure_leaves_status_unchanged(db, booking, admin_user, monkeypatch):
    monkeypatch.setattr(db, "commit", _fail_commit)

    with pytest.raises(PersistenceError):
        booking_lifecycle.transition(db, booking.id, "confirmed", actor_id=admin_user.id)

    monkeypatch.undo()
    assert db.query(Booking).filter(Booking.id == booking.id).one().status == "pending"
    assert db.query(AuditLog).count() == 0


def test_delete_requires_confirmation(db, posting, admin_user):
    with pytest.raises(ConfirmationRequired):
        job_posting_lifecycle.delete(db, posting.id, confirmed=False, actor_id=admin_user.id)
    assert db.query(JobPosting).count() == 1


def test_confirmed_delete_removes_row(db, posting, admin_user):
    job_posting_lifecycle.delete(db, posting.id, confirmed=True, actor_id=admin_user.id)

    assert db.query(JobPosting).count() == 0
    assert db.query(AuditLog).filter(AuditLog.action == "DELETE").count() == 1


def test_activity_status_maps_onto_flag(db, posting, admin_user):
    updated = job_posting_lifecycle.transition(db, posting.id, "inactive", actor_id=admin_user.id)

    assert updated.is_active is False
    assert job_posting_lifecycle.current_status(updated) is ActivityStatus.INACTIVE
    assert job_posting_lifecycle.fetch_list(db, status_filter="active") == []


def test_fetch_list_returns_every_row(db, customer_user):
    db.add_all([
        Booking(
            user_id=customer_user.id,
            service_name=f"Campaign {i}",
            booking_date=date.today() + timedelta(days=1),
            booking_time="10:00 AM",
            status=BookingStatus.PENDING.value,
        )
        for i in range(505)
    ])
    db.commit()

    assert len(booking_lifecycle.fetch_list(db)) == 505
    assert len(booking_lifecycle.fetch_list(db, status_filter="pending")) == 505
