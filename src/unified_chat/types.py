"""Provider-agnostic request/response models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unified_chat.tools import ToolDef


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextItem(_Frozen):
    """Plain text block."""

    type: Literal["text"] = "text"
    text: str


class ToolUseItem(_Frozen):
    """Request from the model to invoke a tool."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any]


class TurnItem(_Frozen):
    """One entry of a role/content transcript."""

    type: Literal["turn"] = "turn"
    role: str
    content: str


class UnknownItem(_Frozen):
    """Anything the normalizer does not recognise, kept as received."""

    type: Literal["unknown"] = "unknown"
    raw: Any


ContentItem = Annotated[
    Union[TextItem, ToolUseItem, TurnItem, UnknownItem],
    Field(discriminator="type"),
]


class FunctionCall(_Frozen):
    name: str | None = None
    # kept verbatim: an object for some providers, a JSON string for others
    arguments: Any = None


class ToolCall(_Frozen):
    """Message-level tool call, ``{"function": {"name", "arguments"}}``."""

    function: FunctionCall = Field(default_factory=FunctionCall)


class ChatMessage(_Frozen):
    """Message-level view of a reply (role, text and tool calls)."""

    role: str
    content: str = ""
    tool_calls: list[ToolCall] = Field(default_factory=list)


class ChatRequest(_Frozen):
    """Normalized single-turn request shared by all providers."""

    provider: str
    message: str
    model: str | None = None
    max_tokens: int | None = None
    # ToolDef instances or already shaped provider dicts
    tools: list[Any] = Field(default_factory=list)

    @field_validator("tools")
    @classmethod
    def _tools_are_known_entries(cls, value: list[Any]) -> list[Any]:
        for entry in value:
            if not isinstance(entry, (ToolDef, dict)):
                raise ValueError(f"unsupported tool entry of type {type(entry).__name__}")
        return value

    @field_validator("max_tokens")
    @classmethod
    def _max_tokens_positive(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("max_tokens must be positive")
        return value


class ChatResponse(_Frozen):
    """Normalized chat response.

    ``content`` is always an ordered list of content items. Fields a provider
    does not send stay ``None``.
    """

    provider: str
    model: str
    content: list[ContentItem] = Field(default_factory=list)

    # message-level view (providers answering with a single message object)
    message: ChatMessage | None = None

    # Anthropic style metadata
    id: str | None = None
    role: str | None = None
    type: str | None = None
    stop_reason: str | None = None
    stop_sequence: str | None = None
    usage: dict[str, Any] | None = None

    # Ollama style metadata
    created_at: str | None = None
    done: bool | None = None
    done_reason: str | None = None
    total_duration: int | None = None
    load_duration: int | None = None
    prompt_eval_count: int | None = None
    prompt_eval_duration: int | None = None
    eval_count: int | None = None
    eval_duration: int | None = None

    # provider-specific payload kept for debugging or advanced use
    raw: dict[str, Any] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        """Concatenated text of all text items."""
        return "".join(item.text for item in self.content if isinstance(item, TextItem))

    @property
    def tool_uses(self) -> list[ToolUseItem]:
        return [item for item in self.content if isinstance(item, ToolUseItem)]

    @property
    def tool_calls(self) -> list[ToolCall]:
        return list(self.message.tool_calls) if self.message is not None else []


class ErrorResponse(_Frozen):
    """Normalized error body of a failed request."""

    message: str
    error_type: str | None = None
    type: str | None = None
    status_code: int | None = None
    raw: Any = None
