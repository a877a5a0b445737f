"""Declared unit parameters and per-record parameter reading.

A ParameterSet is declared once per unit and read for every record (or tool
supply). Values come from the host and are coerced to the declared type;
the declarations themselves are never mutated.
"""

from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, model_validator

from apinodes.kernel.errors import ConfigurationError, MalformedPayloadError

ParameterType = Literal["string", "number", "options", "boolean"]

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


class ParameterReader(Protocol):
    """The part of the host boundary that yields parameter values."""

    def get_node_parameter(self, name: str, index: int, default: Any = None) -> Any: ...


class ParameterDeclaration(BaseModel):
    """One declared parameter of a unit."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ParameterType
    default: Any = None
    description: str = ""
    required: bool = False  # Display hint; enforcement lives in the resolver
    options: tuple[str, ...] = ()
    show_for: tuple[str, ...] | None = None  # Operations this parameter applies to

    @model_validator(mode="after")
    def _check_options(self) -> "ParameterDeclaration":
        if self.type == "options":
            if not self.options:
                raise ValueError(f"Parameter '{self.name}' declares no options")
            if self.default is not None and self.default not in self.options:
                raise ValueError(
                    f"Default '{self.default}' of parameter '{self.name}' is not one of {self.options}"
                )
        return self

    def applies_to(self, operation: str | None) -> bool:
        return self.show_for is None or operation in self.show_for

    def coerce(self, value: Any) -> Any:
        """Coerce a host-supplied value to the declared type.

        Raises:
            ConfigurationError: If an options value is not a declared option
            MalformedPayloadError: If a number or boolean cannot be parsed
        """
        if self.type == "string":
            if value is None:
                return ""
            return value if isinstance(value, str) else str(value)

        if self.type == "number":
            return _coerce_number(self.name, value)

        if self.type == "boolean":
            if isinstance(value, bool):
                return value
            if value is None:
                return False
            text = str(value).strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
            raise MalformedPayloadError(f"Parameter '{self.name}' must be a boolean, got {value!r}")

        # options
        if value not in self.options:
            raise ConfigurationError(
                f"Parameter '{self.name}' must be one of {list(self.options)}, got {value!r}"
            )
        return value


def _coerce_number(name: str, value: Any) -> int | float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise MalformedPayloadError(f"Parameter '{name}' must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            raise MalformedPayloadError(f"Parameter '{name}' must be a number, got {value!r}")
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


class ParameterSet(BaseModel):
    """Immutable collection of parameter declarations for one unit."""

    model_config = ConfigDict(frozen=True)

    declarations: tuple[ParameterDeclaration, ...]
    operation_parameter: str = "operation"

    @model_validator(mode="after")
    def _check_unique(self) -> "ParameterSet":
        seen: set[str] = set()
        for declaration in self.declarations:
            if declaration.name in seen:
                raise ValueError(f"Parameter '{declaration.name}' declared twice")
            seen.add(declaration.name)
        return self

    def get(self, name: str) -> ParameterDeclaration:
        for declaration in self.declarations:
            if declaration.name == name:
                return declaration
        raise KeyError(name)

    def has_operations(self) -> bool:
        return any(d.name == self.operation_parameter for d in self.declarations)

    def select_applicable_fields(self, operation: str | None = None) -> frozenset[str]:
        """Names of the parameters that apply to the given operation.

        Parameters without a ``show_for`` restriction apply to every operation.
        """
        return frozenset(d.name for d in self.declarations if d.applies_to(operation))

    def read(self, reader: ParameterReader, index: int) -> dict[str, Any]:
        """Read and coerce every applicable parameter for one record.

        Args:
            reader: Host boundary supplying raw parameter values
            index: Position of the record in the current batch

        Returns:
            Mapping of parameter name to coerced value
        """
        operation = None
        values: dict[str, Any] = {}
        if self.has_operations():
            declaration = self.get(self.operation_parameter)
            operation = declaration.coerce(
                reader.get_node_parameter(declaration.name, index, declaration.default)
            )
            values[declaration.name] = operation

        applicable = self.select_applicable_fields(operation)
        for declaration in self.declarations:
            if declaration.name in values or declaration.name not in applicable:
                continue
            raw = reader.get_node_parameter(declaration.name, index, declaration.default)
            values[declaration.name] = declaration.coerce(raw)
        return values
