"""
Tests for customer orders and the admin order lifecycle
"""
from fastapi import status
from sqlalchemy.exc import OperationalError

from app.models.order import Order


def _order(client, headers, service_name="E-commerce Website"):
    response = client.post(
        "/api/v1/orders", headers=headers, json={"service_name": service_name, "description": "Shop with bKash"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_place_order_starts_pending(client, customer_user, customer_headers):
    order = _order(client, customer_headers)

    assert order["status"] == "pending"
    assert order["total_amount"] is None


def test_my_orders(client, customer_user, customer_headers):
    _order(client, customer_headers, "Logo Design")
    _order(client, customer_headers, "SEO Package")

    response = client.get("/api/v1/orders/my", headers=customer_headers)
    assert [o["service_name"] for o in response.json()] == ["SEO Package", "Logo Design"]


def test_operator_moves_order_through_statuses(client, customer_user, customer_headers, admin_user, admin_headers):
    order = _order(client, customer_headers)
    url = f"/api/v1/admin/orders/{order['id']}/status"

    response = client.patch(url, headers=admin_headers, json={"status": "in_progress"})
    assert response.json()["items"][0]["status"] == "in_progress"

    response = client.patch(url, headers=admin_headers, json={"status": "completed"})
    assert response.json()["items"][0]["status"] == "completed"
    assert response.json()["items"][0]["customer_phone"] == "01700000000"


def test_store_failure_is_reported_and_nothing_changes(client, db, customer_user, customer_headers,
                                                       admin_user, admin_headers, monkeypatch):
    order = _order(client, customer_headers)

    def failing_commit():
        raise OperationalError("UPDATE orders", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", failing_commit)
    response = client.patch(
        f"/api/v1/admin/orders/{order['id']}/status", headers=admin_headers, json={"status": "cancelled"}
    )
    monkeypatch.undo()

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Failed to update status"
    db.expire_all()
    assert db.query(Order).filter(Order.id == order["id"]).one().status == "pending"


def test_delete_order_requires_confirmation(client, db, customer_user, customer_headers, admin_user, admin_headers):
    order = _order(client, customer_headers)

    assert client.delete(f"/api/v1/admin/orders/{order['id']}", headers=admin_headers).status_code == 409
    assert db.query(Order).count() == 1

    response = client.delete(f"/api/v1/admin/orders/{order['id']}", headers=admin_headers, params={"confirm": "true"})
    assert response.status_code == status.HTTP_200_OK
    assert db.query(Order).count() == 0


def test_store_failure_on_new_order_is_retryable(client, db, customer_user, customer_headers, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT INTO orders", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", failing_commit)
    response = client.post("/api/v1/orders", headers=customer_headers, json={"service_name": "SEO"})
    monkeypatch.undo()

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == "Failed to create order"
    assert db.query(Order).count() == 0
