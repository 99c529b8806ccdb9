"""Upload service: product images in object storage."""

import secrets
import string
import time

import structlog

from core.exceptions import ValidationError
from domain.entities.stored_object import StoredObject
from domain.repositories.object_storage import IObjectStorage

logger = structlog.get_logger()

DEFAULT_FOLDER = "products"
DEFAULT_EXTENSION = "jpg"
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def build_object_path(folder: str, filename: str | None) -> str:
    """Unique object key: ``{folder}/{epoch_ms}-{6 random chars}.{ext}``."""
    extension = DEFAULT_EXTENSION
    if filename and "." in filename:
        extension = filename.rsplit(".", 1)[1] or DEFAULT_EXTENSION
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(6))
    return f"{folder}/{int(time.time() * 1000)}-{suffix}.{extension}"


class UploadService:
    """Validates uploads and writes them to the storage bucket."""

    def __init__(
        self,
        storage: IObjectStorage,
        bucket: str,
        allowed_types: list[str],
        max_bytes: int,
    ) -> None:
        self._storage = storage
        self._bucket = bucket
        self._allowed_types = allowed_types
        self._max_bytes = max_bytes

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    async def upload(
        self,
        filename: str | None,
        content_type: str | None,
        data: bytes | None,
        folder: str | None = None,
    ) -> StoredObject:
        """Validate and store a file, returning its path and public URL."""
        if data is None:
            raise ValidationError("No file provided", field="file")

        if content_type not in self._allowed_types:
            raise ValidationError(
                "Invalid file type. Only JPEG, PNG, WebP, and GIF are allowed.",
                field="file",
            )

        if len(data) > self._max_bytes:
            limit_mb = self._max_bytes // (1024 * 1024)
            raise ValidationError(
                f"File too large. Maximum size is {limit_mb}MB.",
                field="file",
            )

        path = build_object_path((folder or "").strip("/") or DEFAULT_FOLDER, filename)
        stored_path = await self._storage.upload(
            self._bucket,
            path,
            data,
            content_type=content_type,
            upsert=False,
        )
        logger.info("object_uploaded", path=stored_path, size=len(data))
        return StoredObject(
            path=stored_path,
            url=self._storage.public_url(self._bucket, stored_path),
        )

    async def delete(self, path: str | None) -> None:
        if not path:
            raise ValidationError("File path required", field="path")

        await self._storage.remove(self._bucket, [path])
        logger.info("object_deleted", path=path)
