# tests/test_portfolios.py
"""CreativePort portfolio routes: identity, ownership and seeding."""
import pytest
from faker import Faker

from devport.core.constants import DEFAULT_THEME

fake = Faker()


@pytest.mark.anyio
async def test_auth_user_upserted_from_headers(client, make_headers):
    headers = make_headers("user-42")
    response = await client.get("/api/auth/user", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "user-42"
    assert data["email"] == headers["X-User-Email"]

    headers["X-User-Email"] = "changed@example.com"
    data = (await client.get("/api/auth/user", headers=headers)).json()
    assert data["email"] == "changed@example.com"


@pytest.mark.anyio
async def test_missing_identity_is_401(client):
    response = await client.get("/api/portfolios")
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


@pytest.mark.anyio
async def test_create_portfolio_defaults(client, owner_headers, portfolio):
    assert portfolio["userId"] == "owner-1"
    assert portfolio["template"] == "minimal"
    assert portfolio["isPublished"] is False
    assert portfolio["theme"] == DEFAULT_THEME
    assert portfolio["domain"] == "owner.example.com"


@pytest.mark.anyio
async def test_new_portfolio_has_home_page_with_starter_sections(client, owner_headers, portfolio):
    response = await client.get(f"/api/portfolios/{portfolio['id']}", headers=owner_headers)
    assert response.status_code == 200
    detail = response.json()

    assert len(detail["pages"]) == 1
    home = detail["pages"][0]
    assert home["title"] == "Home"
    assert home["slug"] == ""
    assert home["isHomePage"] is True
    assert home["order"] == 0
    assert [s["type"] for s in home["sections"]] == ["hero", "gallery", "text", "contact"]
    assert [s["order"] for s in home["sections"]] == [0, 1, 2, 3]


@pytest.mark.anyio
async def test_unknown_template_gets_empty_home_page(client, owner_headers):
    created = (await client.post(
        "/api/portfolios", json={"title": "Odd", "template": "no-such-template"}, headers=owner_headers,
    )).json()
    detail = (await client.get(f"/api/portfolios/{created['id']}", headers=owner_headers)).json()
    assert len(detail["pages"]) == 1
    assert detail["pages"][0]["sections"] == []


@pytest.mark.anyio
async def test_list_only_own_portfolios_newest_first(client, owner_headers, stranger_headers):
    first = (await client.post("/api/portfolios", json={"title": "First"}, headers=owner_headers)).json()
    second = (await client.post("/api/portfolios", json={"title": "Second"}, headers=owner_headers)).json()
    await client.post("/api/portfolios", json={"title": "Theirs"}, headers=stranger_headers)

    response = await client.get("/api/portfolios", headers=owner_headers)
    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


@pytest.mark.anyio
async def test_other_users_portfolio_is_403(client, stranger_headers, portfolio):
    url = f"/api/portfolios/{portfolio['id']}"
    assert (await client.get(url, headers=stranger_headers)).status_code == 403
    assert (await client.put(url, json={"title": "x"}, headers=stranger_headers)).status_code == 403
    assert (await client.delete(url, headers=stranger_headers)).status_code == 403
    assert (await client.get(f"{url}/pages", headers=stranger_headers)).status_code == 403


@pytest.mark.anyio
async def test_missing_portfolio_is_404(client, owner_headers):
    response = await client.get("/api/portfolios/999", headers=owner_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Portfolio not found"}
    assert (await client.delete("/api/portfolios/999", headers=owner_headers)).status_code == 404


@pytest.mark.anyio
async def test_update_portfolio(client, owner_headers, portfolio):
    response = await client.put(
        f"/api/portfolios/{portfolio['id']}",
        json={"title": "Renamed", "isPublished": True},
        headers=owner_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["isPublished"] is True
    assert data["domain"] == portfolio["domain"]


@pytest.mark.anyio
async def test_domain_must_be_unique(client, stranger_headers, portfolio):
    response = await client.post(
        "/api/portfolios",
        json={"title": "Copycat", "domain": "OWNER.example.com"},
        headers=stranger_headers,
    )
    assert response.status_code == 400


@pytest.mark.anyio
async def test_delete_portfolio_cascades(client, owner_headers, portfolio, home_page, portfolio_storage):
    sections = await portfolio_storage.get_page_sections(home_page["id"])
    assert sections

    response = await client.delete(f"/api/portfolios/{portfolio['id']}", headers=owner_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Portfolio deleted successfully"}

    assert await portfolio_storage.get_page(home_page["id"]) is None
    assert await portfolio_storage.get_page_sections(home_page["id"]) == []
    assert (await client.get(f"/api/portfolios/{portfolio['id']}", headers=owner_headers)).status_code == 404


@pytest.mark.anyio
async def test_portfolio_templates_catalogue(client):
    response = await client.get("/api/portfolio-templates")
    assert response.status_code == 200
    ids = [t["id"] for t in response.json()]
    assert ids == ["minimal", "creative", "professional", "architecture", "fashion", "tech"]


@pytest.mark.anyio
@pytest.mark.parametrize("field", ["title", "template", "theme", "isPublished"])
async def test_update_portfolio_rejects_null(client, owner_headers, portfolio, field):
    url = f"/api/portfolios/{portfolio['id']}"
    response = await client.put(url, json={field: None}, headers=owner_headers)
    assert response.status_code == 400

    detail = (await client.get(url, headers=owner_headers)).json()
    assert detail[field] == portfolio[field]


@pytest.mark.anyio
async def test_update_portfolio_may_clear_domain(client, owner_headers, portfolio):
    response = await client.put(
        f"/api/portfolios/{portfolio['id']}", json={"domain": None}, headers=owner_headers,
    )
    assert response.status_code == 200
    assert response.json()["domain"] is None
