"""Provider descriptions: the per-tag wire rules used by the client."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from unified_chat.errors import MalformedResponse
from unified_chat.types import ChatResponse, ErrorResponse

if TYPE_CHECKING:
    from unified_chat.config import ClientConfig


@dataclass(frozen=True)
class ProviderSpec:
    """Wire contract of one provider tag.

    Everything provider specific hangs off this record, so the client and
    request builder never branch on the tag themselves.
    """

    name: str
    path: str
    default_base_url: str
    default_model: str
    build_headers: Callable[[ClientConfig], dict[str, str]]
    normalize_error: Callable[[Any], ErrorResponse]
    parse_response: Callable[[dict[str, Any]], ChatResponse]
    requires_api_key: bool = False
    # None means max_tokens is never sent
    default_max_tokens: int | None = None
    force_stream_false: bool = False

    @property
    def sends_max_tokens(self) -> bool:
        return self.default_max_tokens is not None


def require_fields(provider: str, body: Mapping[str, Any], fields: tuple[str, ...]) -> None:
    """Fail if any of ``fields`` is missing from a success body."""
    missing = [name for name in fields if name not in body]
    if missing:
        raise MalformedResponse(provider, f"missing field(s): {', '.join(missing)}", body=body)


def build_response(provider: str, body: dict[str, Any], **fields: Any) -> ChatResponse:
    """Construct a ChatResponse, reporting type mismatches as malformed."""
    try:
        return ChatResponse(provider=provider, raw=body, **fields)
    except ValidationError as exc:
        raise MalformedResponse(provider, str(exc), body=body) from exc


def build_error(provider: str, body: Any, **fields: Any) -> ErrorResponse:
    """Construct an ErrorResponse, reporting type mismatches as malformed."""
    try:
        return ErrorResponse(raw=body, **fields)
    except ValidationError as exc:
        raise MalformedResponse(provider, str(exc), body=body) from exc
