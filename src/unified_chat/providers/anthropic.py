"""Anthropic Messages API wire rules (nested error envelope)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from unified_chat.content import normalize_content
from unified_chat.errors import MalformedResponse
from unified_chat.providers.base import ProviderSpec, build_error, build_response, require_fields
from unified_chat.types import ChatResponse, ErrorResponse

if TYPE_CHECKING:
    from unified_chat.config import ClientConfig

NAME = "anthropic"
_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
_MESSAGES_PATH = "messages"
API_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-3-7-sonnet-20250219"
DEFAULT_MAX_TOKENS = 1024

_REQUIRED_FIELDS = ("id", "model", "content", "role", "stop_reason", "stop_sequence", "type", "usage")


def build_headers(config: ClientConfig) -> dict[str, str]:
    return {
        "x-api-key": config.api_key or "",
        "anthropic-version": config.api_version or API_VERSION,
        "content-type": "application/json",
    }


def normalize_error(body: Any) -> ErrorResponse:
    """Read ``{"error": {"message", "type"}, "type"}``.

    The nested message is mandatory; its absence is a contract violation.
    """
    error = body.get("error") if isinstance(body, Mapping) else None
    if not isinstance(error, Mapping) or not isinstance(error.get("message"), str):
        raise MalformedResponse(NAME, "error body without error.message", body=body)
    return build_error(
        NAME,
        body,
        message=error["message"],
        error_type=error.get("type"),
        type=body.get("type"),
    )


def parse_response(body: dict[str, Any]) -> ChatResponse:
    require_fields(NAME, body, _REQUIRED_FIELDS)
    return build_response(
        NAME,
        body,
        model=body["model"],
        content=normalize_content(body["content"]),
        id=body["id"],
        role=body["role"],
        type=body["type"],
        stop_reason=body["stop_reason"],
        stop_sequence=body["stop_sequence"],
        usage=body["usage"],
    )


ANTHROPIC = ProviderSpec(
    name=NAME,
    path=_MESSAGES_PATH,
    default_base_url=_DEFAULT_BASE_URL,
    default_model=DEFAULT_MODEL,
    build_headers=build_headers,
    normalize_error=normalize_error,
    parse_response=parse_response,
    requires_api_key=True,
    default_max_tokens=DEFAULT_MAX_TOKENS,
)
