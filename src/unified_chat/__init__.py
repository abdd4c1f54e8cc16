"""Provider-agnostic chat completion client."""

from unified_chat.client import ChatClient
from unified_chat.config import ClientConfig, ClientSettings
from unified_chat.errors import (
    APIError,
    ConfigurationError,
    MalformedResponse,
    TransportFailure,
    TransportTimeout,
    UnifiedChatError,
    UnsupportedProviderError,
)
from unified_chat.tools import ToolDef
from unified_chat.types import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    TextItem,
    ToolCall,
    ToolUseItem,
    TurnItem,
    UnknownItem,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "ChatClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ClientConfig",
    "ClientSettings",
    "ConfigurationError",
    "ErrorResponse",
    "MalformedResponse",
    "TextItem",
    "ToolCall",
    "ToolDef",
    "ToolUseItem",
    "TransportFailure",
    "TransportTimeout",
    "TurnItem",
    "UnifiedChatError",
    "UnknownItem",
    "UnsupportedProviderError",
]
