"""httpx-backed implementation of :class:`~fruitkit.core.protocols.Requester`.

This module is the **only** place in the codebase that imports ``httpx``
for issuing requests.  A fresh :class:`httpx.AsyncClient` is opened for
every call and closed before returning, so no connection is reused
between calls.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from fruitkit.config import FruitkitSettings, load_settings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: FruitkitSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an :class:`httpx.AsyncClient` from *settings*.

    *transport* is forwarded as-is; tests pass an
    :class:`httpx.MockTransport` here.
    """
    settings = settings or FruitkitSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json, text/plain, */*",
        },
        transport=transport,
    )


class HttpxRequester:
    """Concrete :class:`Requester` backed by ``httpx``.

    Usage::

        requester = HttpxRequester()
        response = await requester.get("http://localhost:3000/api/fruit")
        response["data"]  # decoded JSON body

    Non-2xx responses raise :class:`httpx.HTTPStatusError`; connection
    problems raise :class:`httpx.TransportError`.  Both are left for the
    fruit service to wrap.
    """

    def __init__(
        self,
        settings: FruitkitSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings: FruitkitSettings = settings or load_settings()
        self._transport = transport

    async def get(self, url: str) -> dict[str, Any]:
        """Issue one ``GET`` for *url*.

        Returns
        -------
        dict[str, Any]
            ``{"status": int, "headers": dict, "data": body}`` where
            *body* is the decoded JSON payload, or the raw text when the
            response is not JSON.
        """
        async with build_async_client(
            self._settings, transport=self._transport
        ) as client:
            response = await client.get(url)
            logger.debug("GET %s -> %s", url, response.status_code)
            response.raise_for_status()
            return {
                "status": response.status_code,
                "headers": dict(response.headers),
                "data": self._decode_body(response),
            }

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Return the JSON body when the server declared JSON, else text."""
        content_type = response.headers.get("content-type", "")
        if "json" in content_type.lower():
            return response.json()
        return response.text
