# tests/test_sections_reorder.py
"""Reordering sets each listed section's order to its list index."""
import itertools

import pytest


async def section_ids(client, headers, page_id):
    response = await client.get(f"/api/pages/{page_id}/sections", headers=headers)
    return [s["id"] for s in response.json()]


@pytest.mark.anyio
@pytest.mark.parametrize("permutation", list(itertools.permutations(range(4))))
async def test_reorder_every_permutation(client, owner_headers, home_page, permutation):
    ids = await section_ids(client, owner_headers, home_page["id"])
    wanted = [ids[i] for i in permutation]

    response = await client.post(
        f"/api/pages/{home_page['id']}/sections/reorder",
        json={"sectionIds": wanted},
        headers=owner_headers,
    )
    assert response.status_code == 200

    assert await section_ids(client, owner_headers, home_page["id"]) == wanted


@pytest.mark.anyio
async def test_unknown_and_foreign_ids_are_skipped(client, owner_headers, portfolio, home_page):
    other_page = (await client.post(
        f"/api/portfolios/{portfolio['id']}/pages", json={"title": "Other"}, headers=owner_headers,
    )).json()
    foreign = (await client.post(
        f"/api/pages/{other_page['id']}/sections", json={"type": "text", "order": 5}, headers=owner_headers,
    )).json()

    hero, gallery, text, contact = await section_ids(client, owner_headers, home_page["id"])
    response = await client.post(
        f"/api/pages/{home_page['id']}/sections/reorder",
        json={"sectionIds": [contact, 9999, foreign["id"], hero]},
        headers=owner_headers,
    )
    assert response.status_code == 200

    sections = {
        s["id"]: s["order"]
        for s in (await client.get(f"/api/pages/{home_page['id']}/sections", headers=owner_headers)).json()
    }
    assert sections[contact] == 0
    assert sections[hero] == 3
    assert sections[gallery] == 1
    assert sections[text] == 2

    moved = (await client.get(f"/api/pages/{other_page['id']}/sections", headers=owner_headers)).json()
    assert moved[0]["order"] == 5


@pytest.mark.anyio
async def test_reorder_on_other_users_page_is_403(client, stranger_headers, home_page):
    response = await client.post(
        f"/api/pages/{home_page['id']}/sections/reorder",
        json={"sectionIds": []},
        headers=stranger_headers,
    )
    assert response.status_code == 403
