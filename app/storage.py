"""
Image storage for car photos and agency logos (Cloudinary).
"""
from __future__ import annotations

import io
import logging
import re
import time
import uuid
from typing import Protocol

import cloudinary
import cloudinary.uploader

from core.config import Settings

log = logging.getLogger(__name__)

CAR_IMAGES_FOLDER = "images/cars"
TRAVEL_LOGOS_FOLDER = "images/travel-logos"

# .../<resource_type>/upload/[<transformations>/][v<version>/]<public_id>.<ext>
_VERSION_RE = re.compile(r"^v\d+$")


class ObjectStorage(Protocol):
    def store(self, data: bytes, content_type: str, folder: str) -> str: ...

    def delete(self, url: str) -> None: ...


def public_id_from_url(url: str) -> str:
    """Recover the Cloudinary public id (folder path, no extension) from a delivery URL."""
    marker = "/upload/"
    if marker not in (url or ""):
        raise ValueError(f"Not a Cloudinary delivery URL: {url!r}")
    parts = url.split(marker, 1)[1].split("?", 1)[0].split("/")
    for i, part in enumerate(parts):
        if _VERSION_RE.match(part):
            parts = parts[i + 1:]
            break
    path = "/".join(parts)
    stem, dot, _ext = path.rpartition(".")
    return stem if dot else path


class CloudinaryStorage:
    def __init__(self, settings: Settings):
        if not (
            settings.cloudinary_cloud_name
            and settings.cloudinary_api_key
            and settings.cloudinary_api_secret
        ):
            raise RuntimeError(
                "Cloudinary not configured. Set CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET."
            )
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )

    def store(self, data: bytes, content_type: str, folder: str) -> str:
        resource_type = "image" if (content_type or "").startswith("image/") else "auto"
        result = cloudinary.uploader.upload(
            io.BytesIO(data),
            resource_type=resource_type,
            folder=folder,
            public_id=f"{int(time.time() * 1000)}-{uuid.uuid4().hex}",
            overwrite=False,
        )
        url = result.get("secure_url") or result.get("url")
        if not url:
            raise RuntimeError("Failed to upload file")
        log.info("Uploaded %s (%d bytes)", url, len(data))
        return url

    def delete(self, url: str) -> None:
        public_id = public_id_from_url(url)
        result = cloudinary.uploader.destroy(public_id, resource_type="image", invalidate=True)
        if result.get("result") not in ("ok", "not found"):
            raise RuntimeError(f"Failed to delete file {public_id}: {result}")
        log.info("Deleted %s", public_id)


__all__ = [
    "CAR_IMAGES_FOLDER",
    "TRAVEL_LOGOS_FOLDER",
    "ObjectStorage",
    "public_id_from_url",
    "CloudinaryStorage",
]
