"""Package specific exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unified_chat.types import ErrorResponse


class UnifiedChatError(Exception):
    """Base exception for unified_chat package."""


class UnsupportedProviderError(UnifiedChatError):
    """Raised when a provider tag has not been registered."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Provider '{provider}' is not available.")
        self.provider = provider


class ConfigurationError(UnifiedChatError):
    """Raised when a client configuration cannot be used."""


class ToolDefinitionError(UnifiedChatError, ValueError):
    """Raised when a tool definition is invalid."""


class TransportFailure(UnifiedChatError):
    """Raised when no HTTP response could be obtained (connection, DNS, TLS...)."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TransportTimeout(TransportFailure):
    """Raised when the transport gave up waiting for the provider."""


class MalformedResponse(UnifiedChatError):
    """Raised when a provider response violates its documented contract."""

    def __init__(
        self,
        provider: str,
        detail: str,
        *,
        body: Any = None,
        status_code: int | None = None,
    ) -> None:
        suffix = f" (status {status_code})" if status_code is not None else ""
        super().__init__(f"{provider}: malformed response: {detail}{suffix}")
        self.provider = provider
        self.detail = detail
        self.body = body
        self.status_code = status_code


class APIError(UnifiedChatError):
    """Represents a non-success HTTP response from a provider.

    The normalized :class:`~unified_chat.types.ErrorResponse` is available as
    ``error_response``; ``str(exc)`` includes the provider's own message.
    """

    def __init__(self, message: str, error_response: ErrorResponse) -> None:
        super().__init__(message)
        self.error_response = error_response

    @classmethod
    def from_error_response(cls, error_response: ErrorResponse) -> APIError:
        return cls(f"API request failed: {error_response.message}", error_response)

    @property
    def status_code(self) -> int | None:
        return self.error_response.status_code
