"""Ollama chat API wire rules (flat error envelope, single message replies)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from unified_chat.content import normalize_content, normalize_message
from unified_chat.errors import MalformedResponse
from unified_chat.providers.base import ProviderSpec, build_error, build_response, require_fields
from unified_chat.types import ChatResponse, ErrorResponse

if TYPE_CHECKING:
    from unified_chat.config import ClientConfig

NAME = "ollama"
_DEFAULT_BASE_URL = "http://localhost:11434/api"
_CHAT_PATH = "chat"
DEFAULT_MODEL = "llama3.2"
UNKNOWN_ERROR = "Unknown error"

_METADATA_FIELDS = (
    "created_at",
    "done",
    "done_reason",
    "total_duration",
    "load_duration",
    "prompt_eval_count",
    "prompt_eval_duration",
    "eval_count",
    "eval_duration",
)

_logger = logging.getLogger(__name__)


def build_headers(config: ClientConfig) -> dict[str, str]:
    headers = {"content-type": "application/json"}
    if config.api_key:
        headers["Authorization"] = f"Bearer {config.api_key}"
    return headers


def normalize_error(body: Any) -> ErrorResponse:
    """Read ``{"error": "<message>"}``; a missing error becomes "Unknown error"."""
    error = body.get("error") if isinstance(body, Mapping) else None
    if error is None:
        _logger.debug("Error body without 'error' key: %r", body)
        message = UNKNOWN_ERROR
    else:
        message = error if isinstance(error, str) else str(error)
    return build_error(NAME, body, message=message)


def parse_response(body: dict[str, Any]) -> ChatResponse:
    require_fields(NAME, body, ("model", "message"))
    message = body["message"]
    if not isinstance(message, Mapping):
        raise MalformedResponse(NAME, "'message' is not an object", body=body)

    metadata = {name: body[name] for name in _METADATA_FIELDS if name in body}
    return build_response(
        NAME,
        body,
        model=body["model"],
        content=normalize_content(message.get("content")),
        message=normalize_message(message),
        role=message.get("role"),
        **metadata,
    )


OLLAMA = ProviderSpec(
    name=NAME,
    path=_CHAT_PATH,
    default_base_url=_DEFAULT_BASE_URL,
    default_model=DEFAULT_MODEL,
    build_headers=build_headers,
    normalize_error=normalize_error,
    parse_response=parse_response,
    force_stream_false=True,
)
