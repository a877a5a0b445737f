"""ToolContract: what an agent is told about a tool and how to call it.

A contract carries the tool's name, description and, for structured tools,
a ToolArgumentSchema. Untyped tools (no schema) accept one free-form string.
The description is configuration only; it has no runtime behavior.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

_JSON_TYPES = {"string": "string", "integer": "integer", "number": "number", "boolean": "boolean"}


class ToolArgument(BaseModel):
    """One argument accepted by a structured tool."""

    model_config = ConfigDict(frozen=True)

    type: Literal["string", "integer", "number", "boolean"]
    description: str = ""
    required: bool = False
    default: Any = None
    minimum: float | None = None
    maximum: float | None = None
    bounds: Literal["clamp", "reject"] = "reject"  # What to do with out-of-range numbers

    @model_validator(mode="after")
    def _check_bounds(self) -> "ToolArgument":
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(f"minimum {self.minimum} is greater than maximum {self.maximum}")
        return self

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": _JSON_TYPES[self.type]}
        if self.description:
            schema["description"] = self.description
        if self.default is not None:
            schema["default"] = self.default
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        return schema


class ToolArgumentSchema(BaseModel):
    """Declarative argument contract of a structured tool."""

    model_config = ConfigDict(frozen=True)

    arguments: dict[str, ToolArgument]

    def required_fields(self) -> list[str]:
        return [name for name, argument in self.arguments.items() if argument.required]

    def to_json_schema(self) -> dict[str, Any]:
        """Render as a Draft 7 JSON Schema object."""
        return {
            "type": "object",
            "properties": {name: argument.to_json_schema() for name, argument in self.arguments.items()},
            "required": self.required_fields(),
            "additionalProperties": False,
        }


# Schema shown to agents for untyped tools
UNTYPED_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {"input": {"type": "string"}},
    "required": ["input"],
}


class ToolContract(BaseModel):
    """Tool specification exposed to the agent runtime."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = "1"
    description: str
    argument_schema: ToolArgumentSchema | None = None  # None: untyped, raw string input

    @property
    def is_structured(self) -> bool:
        return self.argument_schema is not None

    def input_schema(self) -> dict[str, Any]:
        if not self.is_structured:
            return UNTYPED_INPUT_SCHEMA
        return self.argument_schema.to_json_schema()

    def to_function_spec(self) -> dict[str, Any]:
        """Build an OpenAI-style function spec."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema(),
            },
        }
