"""Normalization of heterogeneous response content into content items."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from unified_chat.types import (
    ChatMessage,
    ContentItem,
    FunctionCall,
    TextItem,
    ToolCall,
    ToolUseItem,
    TurnItem,
    UnknownItem,
)

_ITEM_TYPES = (TextItem, ToolUseItem, TurnItem, UnknownItem)


def normalize_content(content: Any) -> list[ContentItem]:
    """Turn a content-bearing field into an ordered list of content items.

    Strings become a single text item, sequences are normalized element by
    element in order, and ``None`` yields an empty list. Items that are
    already normalized are returned unchanged.
    """
    if content is None:
        return []
    if isinstance(content, str):
        return [TextItem(text=content)]
    if isinstance(content, (list, tuple)):
        return [normalize_block(block) for block in content]
    return [normalize_block(content)]


def normalize_block(block: Any) -> ContentItem:
    """Normalize one element of a content array.

    Unrecognized mappings, including ones tagged ``"unknown"``, are wrapped
    whole; only ``UnknownItem`` instances are returned as they are.
    """
    if isinstance(block, _ITEM_TYPES):
        return block
    if not isinstance(block, Mapping):
        return UnknownItem(raw=block)

    kind = block.get("type")
    if kind == "text" and _all_str(block, "text"):
        return TextItem(text=block["text"])
    if kind == "tool_use" and _all_str(block, "id", "name") and isinstance(block.get("input"), Mapping):
        return ToolUseItem(id=block["id"], name=block["name"], input=dict(block["input"]))
    if kind in ("turn", None) and _all_str(block, "role", "content"):
        return TurnItem(role=block["role"], content=block["content"])
    return UnknownItem(raw=block)


def normalize_tool_calls(tool_calls: Any) -> list[ToolCall]:
    """Reshape raw tool calls to ``{"function": {"name", "arguments"}}``.

    A call without a nested ``function`` object yields empty name/arguments
    instead of failing.
    """
    if not isinstance(tool_calls, (list, tuple)):
        return []
    calls: list[ToolCall] = []
    for call in tool_calls:
        if isinstance(call, ToolCall):
            calls.append(call)
            continue
        function = call.get("function") if isinstance(call, Mapping) else None
        if not isinstance(function, Mapping):
            calls.append(ToolCall())
            continue
        calls.append(
            ToolCall(
                function=FunctionCall(
                    name=function.get("name"),
                    arguments=function.get("arguments"),
                )
            )
        )
    return calls


def normalize_message(message: Mapping[str, Any] | ChatMessage) -> ChatMessage:
    """Message-level normalization for providers replying with one message object."""
    if isinstance(message, ChatMessage):
        return message
    content = message.get("content")
    return ChatMessage(
        role=str(message.get("role") or ""),
        content=content if isinstance(content, str) else "",
        tool_calls=normalize_tool_calls(message.get("tool_calls")),
    )


def dump_content(items: list[ContentItem]) -> list[dict[str, Any]]:
    """Plain-dict view of content items, e.g. for logging or JSON output."""
    return [item.model_dump() for item in items]


def _all_str(block: Mapping[str, Any], *keys: str) -> bool:
    return all(isinstance(block.get(key), str) for key in keys)
