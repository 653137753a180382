"""
Tests for health and version endpoints
"""
from fastapi import status

from app.core.constants import SERVICE_NAME


def test_health_reports_database(client):
    response = client.get("/api/v1/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == SERVICE_NAME
    assert data["database"] == "ok"


def test_version_endpoint(client):
    """Version endpoint is public and reports the verification mode"""
    response = client.get("/api/v1/version")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["service"] == SERVICE_NAME
    assert "version" in data
    assert data["env"] in ["local", "staging", "prod"]
    # conftest clears VERIFY_ADMIN_URL
    assert data["admin_verification"] == "local"
