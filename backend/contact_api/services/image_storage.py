"""
Image Storage - Profile pictures on local disk

Uploaded images are written into a single shared folder. Filenames are the
nanosecond creation timestamp plus the original extension, so concurrent
uploads never need to coordinate; a collision just bumps the timestamp.
"""
import logging
import os
import time
from typing import Optional

import aiofiles

from contact_api.services.exceptions import ImageStorageError

logger = logging.getLogger(__name__)


class ImageStorage:
    """Directory-backed store returning a retrievable URL path per file."""

    def __init__(self, directory: str, url_prefix: str = "/uploads"):
        self.directory = directory
        self.url_prefix = "/" + url_prefix.strip("/")

    def ensure_directory(self) -> None:
        if not os.path.isdir(self.directory):
            os.makedirs(self.directory, exist_ok=True)
            logger.info(f"Created '{self.directory}' folder.")

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    async def save(self, data: bytes, original_filename: Optional[str] = None) -> str:
        """
        Write image bytes and return the URL path they are served under.

        Args:
            data: Raw file content
            original_filename: Client filename; only its extension is kept

        Returns:
            URL path such as "/uploads/1729350000123456789.png"
        """
        ext = os.path.splitext(original_filename or "")[1].lower()
        stamp = time.time_ns()

        while True:
            filename = f"{stamp}{ext}"
            file_path = os.path.join(self.directory, filename)
            try:
                async with aiofiles.open(file_path, "xb") as f:
                    await f.write(data)
            except FileExistsError:
                stamp += 1
                continue
            except OSError as e:
                logger.error(f"Failed to save image {file_path}: {e}")
                raise ImageStorageError(f"Failed to save image: {e}") from e

            logger.info(f"Stored image {filename} ({len(data)} bytes)")
            return self.url_for(filename)
