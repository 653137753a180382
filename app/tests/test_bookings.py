"""
Tests for customer bookings and the admin booking lifecycle
"""
import pytest
from datetime import date, timedelta
from fastapi import status
from sqlalchemy.exc import OperationalError

from app.models.booking import Booking


def _future(days=7):
    return (date.today() + timedelta(days=days)).isoformat()


def _book(client, headers, service_name="Website Design", days=7, time="10:00 AM"):
    return client.post(
        "/api/v1/bookings",
        headers=headers,
        json={"service_name": service_name, "booking_date": _future(days), "booking_time": time}
    )


def test_customer_books_appointment(client, customer_user, customer_headers):
    response = _book(client, customer_headers)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "pending"
    assert data["user_id"] == customer_user.id


def test_booking_requires_sign_in(client):
    response = client.post(
        "/api/v1/bookings",
        json={"service_name": "SEO", "booking_date": _future(), "booking_time": "10:00 AM"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_booking_in_the_past_rejected(client, customer_user, customer_headers):
    response = _book(client, customer_headers, days=-1)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_booking_unknown_time_slot_rejected(client, customer_user, customer_headers):
    response = _book(client, customer_headers, time="01:00 PM")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_time_slots_listed(client):
    response = client.get("/api/v1/bookings/time-slots")
    assert response.status_code == status.HTTP_200_OK
    assert "09:00 AM" in response.json()


def test_my_bookings_only_shows_own(client, customer_user, customer_headers, user_factory, headers_for):
    other = user_factory("other@example.com")
    _book(client, customer_headers, service_name="Mine")
    _book(client, headers_for(other), service_name="Theirs")

    response = client.get("/api/v1/bookings/my", headers=customer_headers)
    assert [b["service_name"] for b in response.json()] == ["Mine"]


def test_operator_confirms_booking(client, db, customer_user, customer_headers, admin_user, admin_headers):
    """pending -> confirmed; the refreshed list shows it and no other row changes"""
    first = _book(client, customer_headers, service_name="Branding").json()
    second = _book(client, customer_headers, service_name="App Development").json()

    response = client.patch(
        f"/api/v1/admin/bookings/{first['id']}/status",
        headers=admin_headers,
        json={"status": "confirmed"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 2
    by_id = {item["id"]: item for item in data["items"]}
    assert by_id[first["id"]]["status"] == "confirmed"
    assert by_id[second["id"]]["status"] == "pending"
    assert by_id[first["id"]]["customer_name"] == "Test Customer"

    db.expire_all()
    assert db.query(Booking).filter(Booking.id == first["id"]).one().status == "confirmed"


def test_admin_list_filters_by_status(client, customer_user, customer_headers, admin_user, admin_headers):
    booking = _book(client, customer_headers).json()
    _book(client, customer_headers, days=8)
    client.patch(f"/api/v1/admin/bookings/{booking['id']}/status", headers=admin_headers, json={"status": "completed"})

    response = client.get("/api/v1/admin/bookings", headers=admin_headers, params={"status": "completed"})

    assert response.status_code == status.HTTP_200_OK
    assert [b["id"] for b in response.json()["items"]] == [booking["id"]]


def test_invalid_status_rejected(client, customer_user, customer_headers, admin_user, admin_headers):
    booking = _book(client, customer_headers).json()

    response = client.patch(
        f"/api/v1/admin/bookings/{booking['id']}/status",
        headers=admin_headers,
        json={"status": "approved"}
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_status_options(client, admin_user, admin_headers):
    response = client.get("/api/v1/admin/bookings/statuses", headers=admin_headers)
    assert response.json() == {
        "resource": "booking",
        "statuses": ["pending", "confirmed", "completed", "cancelled"],
    }


def test_unknown_booking_is_404(client, admin_user, admin_headers):
    response = client.patch("/api/v1/admin/bookings/404/status", headers=admin_headers, json={"status": "confirmed"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.parametrize("query", [{}, {"confirm": "false"}])
def test_delete_without_confirmation_keeps_booking(client, db, customer_user, customer_headers, admin_user,
                                                    admin_headers, query):
    booking = _book(client, customer_headers).json()

    response = client.delete(f"/api/v1/admin/bookings/{booking['id']}", headers=admin_headers, params=query)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert db.query(Booking).count() == 1


def test_confirmed_delete_returns_refreshed_list(client, db, customer_user, customer_headers, admin_user, admin_headers):
    booking = _book(client, customer_headers).json()

    response = client.delete(
        f"/api/v1/admin/bookings/{booking['id']}", headers=admin_headers, params={"confirm": "true"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"items": [], "total": 0}
    assert db.query(Booking).count() == 0


def test_admin_list_is_not_truncated(client, db, customer_user, admin_user, admin_headers):
    db.add_all([
        Booking(user_id=customer_user.id, service_name="Social Media", booking_date=date.today() + timedelta(days=2),
                booking_time="11:00 AM", status="pending")
        for _ in range(520)
    ])
    db.commit()
    booking_id = db.query(Booking.id).first()[0]

    response = client.patch(
        f"/api/v1/admin/bookings/{booking_id}/status", headers=admin_headers, json={"status": "confirmed"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 520
    assert len(data["items"]) == 520


def test_store_failure_on_booking_is_retryable(client, db, customer_user, customer_headers, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT INTO bookings", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    response = _book(client, customer_headers)
    monkeypatch.undo()

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Failed to create booking"
    assert db.query(Booking).count() == 0
