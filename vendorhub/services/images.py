"""Vendor image persistence.

Uploaded images arrive as base64 PNG data URIs. They are written under the
configured upload directory and the vendor keeps the stored path instead of
the payload. A failed write is not fatal: the image simply becomes None.
"""


import asyncio
import base64
import binascii
import logging
import uuid
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class ImageStore:
    def __init__(self, upload_dir: str):
        self._upload_dir = upload_dir.rstrip("/") or "."

    @staticmethod
    def _new_filename() -> str:
        return f"{uuid.uuid4().hex}.png"

    def _write(self, filename: str, content: bytes) -> None:
        directory = Path(self._upload_dir)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / filename).write_bytes(content)

    async def save(self, image: Optional[str]) -> Optional[str]:
        """Persist ``image`` and return its stored path, or None if it could not be written.

        An empty image is returned unchanged without touching the disk.
        """
        if not image:
            return image

        payload = image.removeprefix(PNG_DATA_URI_PREFIX)
        # Clients may drop the trailing "=" padding
        payload += "=" * (-len(payload) % 4)
        filename = self._new_filename()
        try:
            content = base64.b64decode(payload)
            await asyncio.to_thread(self._write, filename, content)
        except (binascii.Error, ValueError, OSError) as exc:
            logger.warning("Could not store vendor image %s: %s", filename, exc)
            return None

        stored = f"{self._upload_dir}/{filename}"
        logger.debug("Stored vendor image at %s (%d bytes)", stored, len(content))
        return stored
