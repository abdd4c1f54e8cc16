"""Provider definitions for unified_chat."""

from unified_chat.errors import UnsupportedProviderError

from .anthropic import ANTHROPIC
from .base import ProviderSpec
from .ollama import OLLAMA

_PROVIDERS: dict[str, ProviderSpec] = {spec.name: spec for spec in (ANTHROPIC, OLLAMA)}


def register_provider(spec: ProviderSpec) -> None:
    """Register (or replace) a provider description under its tag."""
    _PROVIDERS[spec.name] = spec


def get_provider(name: str) -> ProviderSpec:
    """Return a provider description by its tag."""
    try:
        return _PROVIDERS[name]
    except KeyError as exc:
        raise UnsupportedProviderError(name) from exc


def provider_names() -> tuple[str, ...]:
    return tuple(_PROVIDERS)


__all__ = [
    "ANTHROPIC",
    "OLLAMA",
    "ProviderSpec",
    "get_provider",
    "provider_names",
    "register_provider",
]
