"""
Tests for the admin route guard and the access endpoints
"""
from fastapi import status

from app.models.user_role import AppRole
from app.services.access_resolver import AccessVerdict
from app.services.route_guard import GuardOutcome, evaluate_route


def test_guard_waits_while_loading():
    decision = evaluate_route("/admin", AccessVerdict.loading(), authenticated=True)
    assert decision.outcome is GuardOutcome.WAIT
    assert decision.allowed is False


def test_guard_redirects_signed_out_to_login():
    decision = evaluate_route("/admin/bookings", AccessVerdict.unauthenticated(), authenticated=False)
    assert decision.outcome is GuardOutcome.REDIRECT
    assert decision.redirect_to == "/login"


def test_guard_redirects_non_admin_home():
    decision = evaluate_route("/admin", AccessVerdict.from_role(AppRole.STAFF), authenticated=True)
    assert decision.redirect_to == "/"


def test_guard_allows_admin():
    decision = evaluate_route("/admin/jobs", AccessVerdict.authoritative_admin(), authenticated=True)
    assert decision.allowed is True


def test_guard_ignores_public_routes():
    decision = evaluate_route("/administration-services", AccessVerdict.unauthenticated(), authenticated=False)
    assert decision.allowed is True


def test_access_me_for_admin(client, admin_user, admin_headers):
    response = client.get("/api/v1/access/me", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["is_admin"] is True
    assert data["role"] == "admin"
    assert data["is_loading"] is False


def test_access_me_signed_out(client):
    response = client.get("/api/v1/access/me")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["is_admin"] is False
    assert response.json()["role"] is None


def test_signed_in_customer_is_sent_home(client, customer_user, customer_headers):
    """A customer opening /admin is redirected to the home page"""
    response = client.get("/api/v1/access/route", params={"path": "/admin"}, headers=customer_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["allowed"] is False
    assert data["redirect_to"] == "/"

    me = client.get("/api/v1/access/me", headers=customer_headers).json()
    assert me["role"] == "customer"
    assert me["is_admin"] is False


def test_expired_admin_session_is_not_upgraded(client, admin_user, headers_for):
    """An expired token is rejected by verify-admin and the role row is not consulted"""
    headers = headers_for(admin_user, expires_minutes=-1)

    me = client.get("/api/v1/access/me", headers=headers).json()
    assert me["is_admin"] is False
    assert me["role"] is None

    route = client.get("/api/v1/access/route", params={"path": "/admin/bookings"}, headers=headers).json()
    assert route["allowed"] is False


def test_signed_out_visitor_is_sent_to_login(client):
    response = client.get("/api/v1/access/route", params={"path": "/admin/bookings"})
    assert response.json()["redirect_to"] == "/login"


def test_admin_api_rejects_non_admin(client, customer_user, customer_headers):
    response = client.get("/api/v1/admin/bookings", headers=customer_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_admin_api_requires_token(client):
    response = client.get("/api/v1/admin/bookings")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
