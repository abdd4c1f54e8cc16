"""Transport port and its httpx implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from unified_chat.errors import TransportFailure, TransportTimeout


@dataclass(frozen=True)
class TransportResult:
    """One HTTP exchange as seen by the client."""

    status_code: int
    json_body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""


class Transport(Protocol):
    """Sends one JSON POST and returns the parsed result."""

    async def post(
        self,
        path: str,
        json_body: dict[str, Any],
        headers: Mapping[str, str],
    ) -> TransportResult: ...

    async def aclose(self) -> None: ...


class HTTPXTransport:
    """Transport backed by ``httpx.AsyncClient``."""

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        base_url: str,
        timeout_s: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def post(
        self,
        path: str,
        json_body: dict[str, Any],
        headers: Mapping[str, str],
    ) -> TransportResult:
        try:
            response = await self._client.post(path, json=json_body, headers=dict(headers))
        except httpx.TimeoutException as exc:
            raise TransportTimeout(f"request to '{path}' timed out: {exc}", path=path) from exc
        except httpx.RequestError as exc:
            raise TransportFailure(f"request to '{path}' failed: {exc}", path=path) from exc

        self._logger.debug("POST %s -> %s", response.request.url, response.status_code)
        return TransportResult(
            status_code=response.status_code,
            json_body=self._json_or_none(response),
            headers=dict(response.headers),
            text=response.text,
        )

    @classmethod
    def _json_or_none(cls, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            cls._logger.debug("Response body is not JSON (status %s)", response.status_code)
            return None
