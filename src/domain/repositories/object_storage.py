"""Object storage protocol."""

from typing import Protocol


class IObjectStorage(Protocol):
    """Blob storage addressed by bucket and object path."""

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """Store ``data`` at ``path`` and return the stored path."""
        ...

    async def remove(self, bucket: str, paths: list[str]) -> None:
        """Delete objects from the bucket."""
        ...

    def public_url(self, bucket: str, path: str) -> str:
        """Public URL for an object in a public bucket."""
        ...
