import os

import pytest


@pytest.mark.asyncio
async def test_root(client):
    r = await client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "running"


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "connected"}


@pytest.mark.asyncio
async def test_lifespan_creates_upload_folder(app, test_settings):
    assert os.path.isdir(test_settings.UPLOADS_DIR)
    assert app.state.contact_service is not None
