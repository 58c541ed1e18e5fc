import pytest
from httpx import AsyncClient


@pytest.mark.asyncio(loop_scope="function")
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == "OK"


@pytest.mark.asyncio(loop_scope="function")
async def test_describe_version(client: AsyncClient):
    response = await client.get("/api/v1/versions/01.02.03.00-beta+build.123")

    assert response.status_code == 200
    assert response.json() == {
        "version": "01.02.03.00-beta+build.123",
        "normalized": "1.2.3-beta",
        "major": "01",
        "minor": "02",
        "patch": "03",
        "revision": "00",
        "label": "beta",
        "metadata": "build.123",
    }


@pytest.mark.asyncio(loop_scope="function")
async def test_describe_version_keeps_non_zero_revision(client: AsyncClient):
    response = await client.get("/api/v1/versions/1.0.0.5")

    assert response.status_code == 200
    assert response.json()["normalized"] == "1.0.0.5"


@pytest.mark.asyncio(loop_scope="function")
@pytest.mark.parametrize("raw_version", ["abc", "1", "1.2.3.4.5", "1.0.0-beta_1"])
async def test_describe_malformed_version(client: AsyncClient, raw_version: str):
    response = await client.get(f"/api/v1/versions/{raw_version}")

    assert response.status_code == 400
    assert response.json() == {"detail": f"Unexpected version format: {raw_version}"}


@pytest.mark.asyncio(loop_scope="function")
async def test_normalize_versions(client: AsyncClient):
    response = await client.post(
        "/api/v1/versions/normalize",
        json=[
            {"package_id": "Newtonsoft.Json", "version": "1.0.0.0"},
            {"package_id": "Serilog", "version": "1..2"},
        ],
    )

    assert response.status_code == 200
    assert response.json() == [
        {"package_id": "newtonsoft.json", "version": "1.0.0.0", "normalized": "1.0.0", "error": None},
        {"package_id": "serilog", "version": "1..2", "normalized": None, "error": "Unexpected version format: 1..2"},
    ]


@pytest.mark.asyncio(loop_scope="function")
async def test_normalize_versions_rejects_invalid_payload(client: AsyncClient):
    response = await client.post("/api/v1/versions/normalize", json=[{"package_id": "Serilog"}])

    assert response.status_code == 422
