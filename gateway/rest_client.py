# gateway/rest_client.py

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from gateway.config import Settings
from gateway.errors import NotFoundError, TransportError

logger = logging.getLogger(__name__)


def resource_path(*segments: str) -> str:
    """Join segments into a backend path, each escaped as a single segment.

    A client-supplied id can never add path segments or a query string, and
    a bare "." or ".." is escaped so it survives URL normalization.
    """
    parts = []
    for segment in segments:
        escaped = quote(str(segment), safe="")
        if escaped in (".", ".."):
            escaped = escaped.replace(".", "%2E")
        parts.append(escaped)
    return "/" + "/".join(parts)


def build_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.backend_url,
        timeout=settings.backend_timeout,
        headers={"Accept": "application/json"},
        transport=transport,
    )


class RestClient:
    """Thin JSON wrapper over the REST backend.

    Every call goes straight to the backend: no retries and no caching. Any
    failure is raised as ``TransportError`` (``NotFoundError`` for 404) so the
    calling resolver reports it against its own field.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: dict) -> Any:
        return await self.request("POST", path, body)

    async def patch(self, path: str, body: dict) -> Any:
        return await self.request("PATCH", path, body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        logger.debug("%s %s %s", method, path, body if body is not None else "")
        try:
            response = await self.http.request(method, path, json=body)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(f"Backend request {method} {path} failed: {exc}") from exc

        if response.status_code == 404:
            logger.warning("%s %s returned 404", method, path)
            raise NotFoundError(f"{path} not found")
        if response.is_error:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise TransportError(
                f"Backend returned {response.status_code} for {method} {path}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a body that is not JSON", method, path)
            raise TransportError(f"Malformed response body from {method} {path}") from exc
