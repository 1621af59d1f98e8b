import pytest

from devport.core.constants import RUN_OUTPUT, RUN_TIME_MIN_MS, RUN_TIME_SPREAD_MS


@pytest.mark.anyio
async def test_run_file_returns_canned_result(client, project):
    files = (await client.get(f"/api/projects/{project['id']}/files")).json()

    response = await client.post(f"/api/projects/{project['id']}/run", json={"fileId": files[0]["id"]})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["output"] == RUN_OUTPUT
    assert data["error"] is None
    assert RUN_TIME_MIN_MS <= data["executionTime"] < RUN_TIME_MIN_MS + RUN_TIME_SPREAD_MS


@pytest.mark.anyio
async def test_run_missing_file(client, project):
    response = await client.post(f"/api/projects/{project['id']}/run", json={"fileId": 12345})
    assert response.status_code == 404


@pytest.mark.anyio
async def test_run_file_from_other_project(client, project):
    other = (await client.post("/api/projects", json={"name": "other"})).json()
    other_files = (await client.get(f"/api/projects/{other['id']}/files")).json()
    response = await client.post(
        f"/api/projects/{project['id']}/run", json={"fileId": other_files[0]["id"]}
    )
    assert response.status_code == 404
