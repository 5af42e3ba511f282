import os

import pytest

from contact_api.services import image_storage as image_storage_module
from contact_api.services.exceptions import ImageStorageError
from contact_api.services.image_storage import ImageStorage


@pytest.mark.asyncio
async def test_save_keeps_extension(image_storage):
    url = await image_storage.save(b"data", "holiday.JPG")

    filename = url.rsplit("/", 1)[1]
    assert url == f"/uploads/{filename}"
    assert filename.endswith(".jpg")
    assert filename[:-4].isdigit()


@pytest.mark.asyncio
async def test_save_without_extension(image_storage):
    url = await image_storage.save(b"data", "noext")

    assert url.rsplit("/", 1)[1].isdigit()


@pytest.mark.asyncio
async def test_timestamp_collision_picks_next_name(image_storage, monkeypatch):
    monkeypatch.setattr(image_storage_module.time, "time_ns", lambda: 1000)
    with open(os.path.join(image_storage.directory, "1000.png"), "wb") as f:
        f.write(b"existing")

    url = await image_storage.save(b"new", "a.png")

    assert url == "/uploads/1001.png"
    with open(os.path.join(image_storage.directory, "1000.png"), "rb") as f:
        assert f.read() == b"existing"


@pytest.mark.asyncio
async def test_missing_directory_raises(tmp_path):
    storage = ImageStorage(str(tmp_path / "never-created"))

    with pytest.raises(ImageStorageError):
        await storage.save(b"data", "a.png")


def test_ensure_directory_creates_folder(tmp_path):
    storage = ImageStorage(str(tmp_path / "a" / "b"), "uploads/")
    storage.ensure_directory()

    assert os.path.isdir(storage.directory)
    assert storage.url_prefix == "/uploads"

