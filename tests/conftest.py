from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from nuget_version.main import application
from nuget_version.routes.v1.versions.service import VersionService


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as client:
        yield client


@pytest.fixture
def version_service() -> VersionService:
    return VersionService()
