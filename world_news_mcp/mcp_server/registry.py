"""
Tool Schema Registry
====================
Each tool is declared once as a ToolSpec: a name, a description, the
upstream endpoint it is bound to and its parameters. From that single
declaration the registry derives

  * the JSON schema advertised by tools/list, and
  * a strict pydantic model used to validate tools/call arguments,

so the advertised schema, the validator and the endpoint can never drift.
"""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Literal

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from world_news_mcp.shared.errors import GatewayError

ParamType = Literal["string", "number", "boolean"]

_PYTHON_TYPES: dict[str, type] = {
    "string": str,
    "number": float,
    "boolean": bool,
}


class ArgumentsError(GatewayError):
    """Tool arguments failed validation. `errors` lists every violation."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]):
        first = errors[0]
        message = f"Invalid arguments for {tool_name}: {first['field']}: {first['message']}"
        if first.get("received") is not None:
            message += f" (received {json.dumps(first['received'], default=str)})"
        super().__init__(message)
        self.tool_name = tool_name
        self.errors = errors


@dataclass(frozen=True)
class Param:
    name: str
    type: ParamType
    description: str
    required: bool = False
    default: Any = None
    # Advertised defaults the upstream already applies are not sent.
    forward_default: bool = True
    min_length: int | None = None
    max_length: int | None = None
    # Exact length is enforced but advertised as maxLength only, as clients already expect.
    length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    enum: tuple[str, ...] | None = None

    @property
    def attr_name(self) -> str:
        return self.name.replace("-", "_")

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.min_length is not None:
            schema["minLength"] = self.min_length
        if self.length is not None:
            schema["maxLength"] = self.length
        elif self.max_length is not None:
            schema["maxLength"] = self.max_length
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def field_definition(self) -> tuple[Any, Any]:
        annotation: Any = Literal[self.enum] if self.enum else _PYTHON_TYPES[self.type]

        if self.required:
            default: Any = ...
        elif self.forward_default:
            default = self.default
        else:
            default = None

        constraints = {
            "min_length": self.length if self.length is not None else self.min_length,
            "max_length": self.length if self.length is not None else self.max_length,
            "ge": self.minimum,
            "le": self.maximum,
        }
        kwargs = {k: v for k, v in constraints.items() if v is not None}
        return annotation, Field(default, alias=self.name, description=self.description, **kwargs)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    endpoint: str
    params: tuple[Param, ...] = ()

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }

    def arguments_model(self) -> type[BaseModel]:
        model_name = "".join(part.capitalize() for part in self.name.split("_")) + "Arguments"
        fields = {p.attr_name: p.field_definition() for p in self.params}
        return create_model(
            model_name,
            __config__=ConfigDict(strict=True, extra="ignore"),
            **fields,
        )


def _describe_errors(exc: ValidationError) -> list[dict[str, Any]]:
    errors = []
    for err in exc.errors(include_url=False):
        errors.append(
            {
                "field": ".".join(str(part) for part in err["loc"]) or "arguments",
                "message": err["msg"],
                "received": None if err["type"] == "missing" else err.get("input"),
            }
        )
    return errors


class RegisteredTool:
    def __init__(self, spec: ToolSpec):
        self.spec = spec
        self.name = spec.name
        self.endpoint = spec.endpoint
        self.tool = Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
        self.model = spec.arguments_model()

    def descriptor(self) -> dict[str, Any]:
        return self.tool.model_dump(by_alias=True, exclude_none=True)

    def validate(self, raw_args: Any) -> dict[str, Any]:
        """Return wire-named arguments with defaults applied, or raise ArgumentsError."""
        if raw_args is None:
            raw_args = {}
        if not isinstance(raw_args, dict):
            raise ArgumentsError(
                self.name,
                [{"field": "arguments", "message": "Input should be an object", "received": raw_args}],
            )
        try:
            parsed = self.model.model_validate(raw_args)
        except ValidationError as exc:
            raise ArgumentsError(self.name, _describe_errors(exc)) from exc
        return parsed.model_dump(by_alias=True, exclude_none=True)


class ToolRegistry:
    """Read-only mapping of tool name to RegisteredTool, in catalog order."""

    def __init__(self, specs: Iterable[ToolSpec]):
        tools: dict[str, RegisteredTool] = {}
        for spec in specs:
            if spec.name in tools:
                raise ValueError(f"duplicate tool name: {spec.name}")
            tools[spec.name] = RegisteredTool(spec)
        self._tools = MappingProxyType(tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> RegisteredTool | None:
        return self._tools.get(name)

    def descriptors(self) -> list[dict[str, Any]]:
        return [tool.descriptor() for tool in self]
