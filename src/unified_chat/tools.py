"""Provider-neutral tool definitions and their per-provider wire shapes."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unified_chat.errors import ToolDefinitionError, UnsupportedProviderError

_JSON_SCALARS = (str, int, float, bool, type(None))


def _check_json_tree(value: Any, where: str = "json_schema") -> None:
    if isinstance(value, _JSON_SCALARS):
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ToolDefinitionError(f"{where}: object keys must be strings, got {key!r}")
            _check_json_tree(item, f"{where}.{key}")
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _check_json_tree(item, f"{where}[{index}]")
        return
    raise ToolDefinitionError(f"{where}: {type(value).__name__} is not JSON compatible")


class ToolDef(BaseModel):
    """JSON-schema tool definition shared by all providers.

    The schema is opaque: it is only checked to be a JSON-compatible tree and
    is handed to the provider untouched. It is copied on the way in and on
    every read, so neither the caller's object nor a returned value can
    change the definition.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    schema_tree: Any = Field(default_factory=dict, alias="json_schema")

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ToolDefinitionError("tool name must not be empty")
        return value

    @field_validator("schema_tree")
    @classmethod
    def _schema_is_json(cls, value: Any) -> Any:
        _check_json_tree(value)
        return copy.deepcopy(value)

    @property
    def json_schema(self) -> Any:
        return copy.deepcopy(self.schema_tree)

    def to_provider_shape(self, provider: str) -> dict[str, Any]:
        """Return the wire shape of this tool for ``provider``."""
        return get_tool_shape(provider).serialize(self)


@dataclass(frozen=True)
class ToolShape:
    """Pair of pure functions converting a ToolDef to and from a wire shape."""

    serialize: Callable[[ToolDef], dict[str, Any]]
    parse: Callable[[Mapping[str, Any]], ToolDef]


def _flat_shape(tool: ToolDef) -> dict[str, Any]:
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": tool.json_schema,
    }


def _parse_flat_shape(data: Mapping[str, Any]) -> ToolDef:
    return ToolDef(
        name=data["name"],
        description=data.get("description", ""),
        json_schema=data.get("input_schema", {}),
    )


def _function_shape(tool: ToolDef) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.json_schema,
        },
    }


def _parse_function_shape(data: Mapping[str, Any]) -> ToolDef:
    function = data["function"]
    return ToolDef(
        name=function["name"],
        description=function.get("description", ""),
        json_schema=function.get("parameters", {}),
    )


FLAT = ToolShape(serialize=_flat_shape, parse=_parse_flat_shape)
FUNCTION = ToolShape(serialize=_function_shape, parse=_parse_function_shape)

# provider tag -> wire shape
_TOOL_SHAPES: dict[str, ToolShape] = {
    "anthropic": FLAT,
    "ollama": FUNCTION,
}


def register_tool_shape(provider: str, shape: ToolShape) -> None:
    """Register (or replace) the tool wire shape used for ``provider``."""
    _TOOL_SHAPES[provider] = shape


def unregister_tool_shape(provider: str) -> None:
    _TOOL_SHAPES.pop(provider, None)


def get_tool_shape(provider: str) -> ToolShape:
    try:
        return _TOOL_SHAPES[provider]
    except KeyError as exc:
        raise UnsupportedProviderError(provider) from exc


def serialize_tool(tool: ToolDef | Mapping[str, Any], provider: str) -> dict[str, Any]:
    """Shape one tool entry for ``provider``.

    Plain mappings are assumed to be shaped by the caller already and are
    passed through as a copy.
    """
    if isinstance(tool, ToolDef):
        return tool.to_provider_shape(provider)
    if isinstance(tool, Mapping):
        return copy.deepcopy(dict(tool))
    raise ToolDefinitionError(f"unsupported tool entry of type {type(tool).__name__}")


def parse_tool(data: Mapping[str, Any], provider: str) -> ToolDef:
    """Recover a ToolDef from a provider wire shape."""
    return get_tool_shape(provider).parse(data)
