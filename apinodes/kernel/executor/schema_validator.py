"""SchemaValidator: JSON Schema validation for tool arguments.

Structured tools validate their arguments before any request is built.
``apply`` prepares raw agent arguments against a ToolArgumentSchema
(unknown keys dropped, defaults substituted, numeric strings coerced,
clamp-mode bounds applied) and then validates the result with Draft 7.
"""

import math
from collections.abc import Mapping
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

from apinodes.kernel.errors import AdapterErrorCode, SchemaValidationError
from apinodes.kernel.executor.tool_contract import ToolArgument, ToolArgumentSchema


class SchemaValidator:
    """Validates data against JSON Schema.

    Uses Draft 7 JSON Schema specification.
    """

    def validate(self, data: Any, schema: dict[str, Any]) -> None:
        """Validate data against JSON Schema.

        Args:
            data: Data to validate (typically dict)
            schema: JSON Schema to validate against

        Raises:
            SchemaValidationError: If validation fails with code SCHEMA_INVALID,
                or SCHEMA_MALFORMED if the schema itself is invalid
        """
        try:
            Draft7Validator.check_schema(schema)
            validator = Draft7Validator(schema)

            # Report the first error only
            errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
            if errors:
                first_error = errors[0]

                path_parts = [str(p) for p in first_error.path]
                path = ".".join(path_parts) if path_parts else ""

                schema_path_parts = [str(p) for p in first_error.schema_path]
                schema_path = ".".join(schema_path_parts) if schema_path_parts else ""

                raise SchemaValidationError(
                    code=AdapterErrorCode.SCHEMA_INVALID,
                    message=first_error.message,
                    path=path,
                    schema_path=schema_path,
                )

        except jsonschema.exceptions.SchemaError as e:
            raise SchemaValidationError(
                code=AdapterErrorCode.SCHEMA_MALFORMED,
                message=f"Schema is malformed: {e.message}",
            )

    def apply(self, data: Any, schema: ToolArgumentSchema) -> dict[str, Any]:
        """Prepare and validate tool arguments.

        Args:
            data: Arguments as sent by the agent
            schema: The tool's argument schema

        Returns:
            Validated arguments with defaults substituted and clamp-mode
            bounds applied

        Raises:
            SchemaValidationError: If the arguments are not an object, a
                required field is missing, a type is wrong, or a reject-mode
                bound is violated
        """
        if not isinstance(data, Mapping):
            raise SchemaValidationError(
                code=AdapterErrorCode.SCHEMA_INVALID,
                message=f"Tool arguments must be an object, got {type(data).__name__}",
            )

        prepared: dict[str, Any] = {}
        for name, argument in schema.arguments.items():
            value = data.get(name)
            if value is None:
                value = argument.default
            if value is None:
                continue
            value = _coerce(argument, value)
            if argument.bounds == "clamp":
                value = _clamp(argument, value)
            prepared[name] = value

        self.validate(prepared, schema.to_json_schema())
        return prepared


def _coerce(argument: ToolArgument, value: Any) -> Any:
    """Best-effort conversion of numeric strings; anything else is left for validation."""
    if argument.type in ("integer", "number") and isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return value
        if argument.type == "integer" and number.is_integer():
            return int(number)
        return number
    if argument.type == "integer" and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _clamp(argument: ToolArgument, value: Any) -> Any:
    """Pull an in-type value into bounds; wrong types are left for validation."""
    if isinstance(value, bool):
        return value
    if argument.type == "integer":
        if not isinstance(value, int):
            return value
        if argument.minimum is not None and value < argument.minimum:
            value = math.ceil(argument.minimum)
        if argument.maximum is not None and value > argument.maximum:
            value = math.floor(argument.maximum)
        return value
    if not isinstance(value, (int, float)):
        return value
    if argument.minimum is not None and value < argument.minimum:
        value = argument.minimum
    if argument.maximum is not None and value > argument.maximum:
        value = argument.maximum
    return value
