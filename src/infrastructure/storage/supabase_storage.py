"""Supabase Storage client over its REST API.

Endpoints used (relative to ``{SUPABASE_URL}/storage/v1``):

    POST   /object/{bucket}/{path}      upload (``x-upsert`` header)
    DELETE /object/{bucket}             remove, body ``{"prefixes": [...]}``
    GET    /object/public/{bucket}/{path}   public download URL
"""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.exceptions import StorageError

logger = structlog.get_logger()


class SupabaseStorage:
    """Async client for Supabase Storage, authenticated with the service role key.

    One instance is shared by the whole process; the underlying
    ``httpx.AsyncClient`` pools connections and must be closed on shutdown.
    """

    def __init__(
        self,
        supabase_url: str,
        service_role_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = f"{supabase_url.rstrip('/')}/storage/v1"
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {service_role_key}",
                "apikey": service_role_key,
            },
            timeout=timeout,
            transport=transport,
        )

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """Upload ``data`` and return the object path inside the bucket."""
        response = await self._request(
            "POST",
            f"/object/{bucket}/{quote(path)}",
            content=data,
            headers={
                "Content-Type": content_type,
                "x-upsert": "true" if upsert else "false",
            },
        )
        # Response "Key" is "{bucket}/{path}"
        key = response.json().get("Key", f"{bucket}/{path}")
        return str(key).removeprefix(f"{bucket}/")

    async def remove(self, bucket: str, paths: list[str]) -> None:
        await self._request("DELETE", f"/object/{bucket}", json={"prefixes": paths})

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._base_url}/object/public/{bucket}/{quote(path)}"

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("storage_request_failed", method=method, url=url, error=str(exc))
            raise StorageError(f"Storage request failed: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.error(
                "storage_error_response",
                method=method,
                url=url,
                status_code=response.status_code,
                error=message,
            )
            raise StorageError(message, details={"status_code": response.status_code})

        return response


def _error_message(response: httpx.Response) -> str:
    """Supabase Storage reports errors as ``{"error": ..., "message": ...}``."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Storage returned HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)
