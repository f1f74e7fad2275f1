from unittest.mock import AsyncMock

import pytest

from elham.boundary.db.connection import get_async_db


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


@pytest.mark.asyncio
async def test_health_check_db(client):
    response = await client.get("/api/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


@pytest.mark.asyncio
async def test_health_check_db_unavailable(app, client):
    broken = AsyncMock()
    broken.execute.side_effect = OSError("connection refused")
    app.dependency_overrides[get_async_db] = lambda: broken

    response = await client.get("/api/health/db")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database unavailable"}
