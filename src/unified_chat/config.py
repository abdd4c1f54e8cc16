"""Client configuration, passed explicitly to the chat client."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unified_chat.errors import ConfigurationError
from unified_chat.providers import ProviderSpec, get_provider


class ClientConfig(BaseModel):
    """Everything a ChatClient needs to reach one provider."""

    model_config = ConfigDict(frozen=True)

    provider: str
    api_key: str | None = None
    base_url: str | None = None
    api_version: str | None = None
    model: str | None = None
    max_tokens: int | None = None
    timeout_s: float = 60.0
    extra_headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("provider")
    @classmethod
    def _known_provider(cls, value: str) -> str:
        get_provider(value)
        return value

    @property
    def spec(self) -> ProviderSpec:
        return get_provider(self.provider)

    def resolved_base_url(self) -> str:
        return self.base_url or self.spec.default_base_url

    def resolved_model(self, model: str | None = None) -> str:
        return model or self.model or self.spec.default_model

    def headers(self) -> dict[str, str]:
        """Provider headers with ``extra_headers`` merged last."""
        spec = self.spec
        if spec.requires_api_key and not self.api_key:
            raise ConfigurationError(f"provider '{spec.name}' requires an api_key")
        headers = spec.build_headers(self)
        headers.update(self.extra_headers)
        return headers


class ClientSettings(BaseSettings):
    """Environment backed settings (``UNIFIED_CHAT_*`` variables, optional .env)."""

    model_config = SettingsConfigDict(env_prefix="UNIFIED_CHAT_", env_file=".env", extra="ignore")

    provider: str = "anthropic"
    api_key: str | None = None
    base_url: str | None = None
    api_version: str | None = None
    model: str | None = None
    max_tokens: int | None = None
    timeout_s: float = 60.0

    def to_config(self) -> ClientConfig:
        return ClientConfig(**self.model_dump())
