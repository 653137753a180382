"""
Tests for services, portfolio and team content
"""
from fastapi import status

from app.models.portfolio import PortfolioItem
from app.utils.slugs import slugify


def test_slugify():
    assert slugify("E-commerce Platform Redesign!") == "e-commerce-platform-redesign"
    assert slugify("!!!") == "item"


def test_service_created_with_derived_slug(client, admin_user, admin_headers):
    response = client.post(
        "/api/v1/admin/services",
        headers=admin_headers,
        json={"title": "Web Development", "description": "Custom sites", "features": ["SEO", "CMS"]}
    )

    assert response.status_code == status.HTTP_201_CREATED
    service = response.json()
    assert service["slug"] == "web-development"

    public = client.get("/api/v1/services/web-development")
    assert public.status_code == status.HTTP_200_OK
    assert public.json()["features"] == ["SEO", "CMS"]


def test_duplicate_slug_gets_suffix(client, admin_user, admin_headers):
    body = {"title": "Web Development", "description": "Custom sites"}
    client.post("/api/v1/admin/services", headers=admin_headers, json=body)
    second = client.post("/api/v1/admin/services", headers=admin_headers, json=body)

    assert second.json()["slug"] == "web-development-2"


def test_inactive_service_hidden_from_public(client, admin_user, admin_headers):
    service = client.post(
        "/api/v1/admin/services", headers=admin_headers, json={"title": "Hosting", "description": "Managed"}
    ).json()

    response = client.patch(
        f"/api/v1/admin/services/{service['id']}/status", headers=admin_headers, json={"status": "inactive"}
    )
    assert response.json()["items"][0]["is_active"] is False

    assert client.get("/api/v1/services").json()["total"] == 0
    assert client.get("/api/v1/services/hosting").status_code == status.HTTP_404_NOT_FOUND


def test_portfolio_filters(client, admin_user, admin_headers):
    client.post("/api/v1/admin/portfolio", headers=admin_headers,
                json={"title": "Shop", "category": "E-commerce", "is_featured": True, "technologies": ["Django"]})
    client.post("/api/v1/admin/portfolio", headers=admin_headers,
                json={"title": "Clinic App", "category": "Mobile App"})

    assert client.get("/api/v1/portfolio").json()["total"] == 2
    assert client.get("/api/v1/portfolio", params={"category": "All"}).json()["total"] == 2
    ecommerce = client.get("/api/v1/portfolio", params={"category": "E-commerce"}).json()
    assert [i["title"] for i in ecommerce["items"]] == ["Shop"]
    featured = client.get("/api/v1/portfolio", params={"featured": "true"}).json()
    assert [i["slug"] for i in featured["items"]] == ["shop"]


def test_portfolio_unknown_category_rejected(client, admin_user, admin_headers):
    response = client.post("/api/v1/admin/portfolio", headers=admin_headers,
                           json={"title": "Thing", "category": "Blockchain"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_portfolio_update_and_delete(client, db, admin_user, admin_headers):
    item = client.post("/api/v1/admin/portfolio", headers=admin_headers, json={"title": "Landing"}).json()

    updated = client.patch(
        f"/api/v1/admin/portfolio/{item['id']}", headers=admin_headers, json={"client_name": "Acme"}
    )
    assert updated.json()["client_name"] == "Acme"

    assert client.delete(f"/api/v1/admin/portfolio/{item['id']}", headers=admin_headers).status_code == 409
    assert db.query(PortfolioItem).count() == 1
    client.delete(f"/api/v1/admin/portfolio/{item['id']}", headers=admin_headers, params={"confirm": "true"})
    assert db.query(PortfolioItem).count() == 0


def test_team_ordering_and_visibility(client, admin_user, admin_headers):
    second = client.post("/api/v1/admin/team", headers=admin_headers,
                         json={"name": "Karim", "role": "Designer", "display_order": 2}).json()
    client.post("/api/v1/admin/team", headers=admin_headers,
                json={"name": "Nadia", "role": "CEO", "display_order": 1})

    assert [m["name"] for m in client.get("/api/v1/team").json()["items"]] == ["Nadia", "Karim"]

    client.patch(f"/api/v1/admin/team/{second['id']}/status", headers=admin_headers, json={"status": "inactive"})
    assert [m["name"] for m in client.get("/api/v1/team").json()["items"]] == ["Nadia"]

    admin_list = client.get("/api/v1/admin/team", headers=admin_headers, params={"status": "inactive"}).json()
    assert [m["name"] for m in admin_list["items"]] == ["Karim"]
