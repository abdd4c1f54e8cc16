"""Build provider payloads from a normalized request."""

from __future__ import annotations

import logging
from typing import Any

from unified_chat.providers import ProviderSpec
from unified_chat.tools import serialize_tool
from unified_chat.types import ChatRequest

_logger = logging.getLogger(__name__)


def build_payload(spec: ProviderSpec, req: ChatRequest) -> dict[str, Any]:
    """Return the JSON body for ``req`` following ``spec``'s wire rules.

    ``tools`` is only present when at least one tool is given, ``max_tokens``
    only for providers that require it, and ``stream: false`` is always set
    for providers that would otherwise stream.
    """
    payload: dict[str, Any] = {
        "model": req.model or spec.default_model,
        "messages": [{"role": "user", "content": req.message}],
    }

    if spec.sends_max_tokens:
        payload["max_tokens"] = req.max_tokens or spec.default_max_tokens
    elif req.max_tokens is not None:
        _logger.debug("Ignoring max_tokens=%s for provider '%s'", req.max_tokens, spec.name)

    if req.tools:
        payload["tools"] = [serialize_tool(tool, spec.name) for tool in req.tools]

    if spec.force_stream_false:
        payload["stream"] = False

    return payload
