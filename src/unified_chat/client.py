"""Async client orchestrating one chat exchange with a provider."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from unified_chat.config import ClientConfig
from unified_chat.errors import APIError, ConfigurationError, MalformedResponse
from unified_chat.request import build_payload
from unified_chat.tools import ToolDef
from unified_chat.transport import HTTPXTransport, Transport, TransportResult
from unified_chat.types import ChatRequest, ChatResponse


def is_success(status_code: int) -> bool:
    """Only the HTTP status decides success; bodies are never inspected."""
    return 200 <= status_code < 300


class ChatClient:
    """High-level coordinator for chatting with one configured provider."""

    _logger = logging.getLogger(__name__)

    def __init__(self, config: ClientConfig, *, transport: Transport | None = None) -> None:
        self._config = config
        self._spec = config.spec
        self._headers = config.headers()
        self._transport: Transport = transport or HTTPXTransport(
            base_url=config.resolved_base_url(),
            timeout_s=config.timeout_s,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._transport.aclose()

    async def __aenter__(self) -> ChatClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def chat(
        self,
        message: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
        tools: Sequence[ToolDef | dict[str, Any]] | None = None,
    ) -> ChatResponse:
        """Send a single user message and return the normalized response."""
        req = ChatRequest(
            provider=self._spec.name,
            message=message,
            model=self._config.resolved_model(model),
            max_tokens=max_tokens if max_tokens is not None else self._config.max_tokens,
            tools=list(tools or []),
        )
        return await self.send(req)

    async def send(self, req: ChatRequest) -> ChatResponse:
        """Execute a prebuilt request.

        Raises :class:`APIError` for non-success statuses,
        :class:`MalformedResponse` when a body breaks the provider contract and
        :class:`TransportFailure` when no response was received.
        """
        if req.provider != self._spec.name:
            raise ConfigurationError(
                f"request for provider '{req.provider}' sent to a '{self._spec.name}' client"
            )
        payload = build_payload(self._spec, req)
        self._logger.debug(
            "Sending %s request to '%s' (model=%s, tools=%d)",
            self._spec.name,
            self._spec.path,
            payload["model"],
            len(payload.get("tools", ())),
        )
        result = await self._transport.post(self._spec.path, payload, self._headers)
        if not is_success(result.status_code):
            raise self._api_error(result)
        return self._parse_success(result)

    def _api_error(self, result: TransportResult) -> APIError:
        self._logger.warning("%s request failed with status %s", self._spec.name, result.status_code)
        try:
            error = self._spec.normalize_error(result.json_body)
        except MalformedResponse as exc:
            raise MalformedResponse(
                exc.provider, exc.detail, body=exc.body, status_code=result.status_code
            ) from exc
        update: dict[str, Any] = {"status_code": result.status_code}
        if error.raw is None and result.text:
            update["raw"] = result.text
        error = error.model_copy(update=update)
        return APIError.from_error_response(error)

    def _parse_success(self, result: TransportResult) -> ChatResponse:
        body = result.json_body
        if not isinstance(body, dict):
            raise MalformedResponse(
                self._spec.name,
                "success body is not a JSON object",
                body=body if body is not None else result.text,
                status_code=result.status_code,
            )
        return self._spec.parse_response(body)
