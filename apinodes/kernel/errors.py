"""Error kinds raised by resolvers, transports and adapters.

Every error carries a standardized code and a human-readable message.
Batch execution contains or re-raises them per record; tool execution
renders them into the error envelope returned to the agent.
"""

from enum import Enum
from typing import Any


class AdapterErrorCode(str, Enum):
    """Standardized adapter error codes."""

    CONFIGURATION = "CONFIGURATION"  # Unit cannot function (e.g. empty URL)
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"  # Body or argument could not be parsed
    ARGUMENT_EXTRACTION = "ARGUMENT_EXTRACTION"  # No usable value in tool input
    TRANSPORT = "TRANSPORT"  # Non-2xx response or network failure
    SCHEMA_INVALID = "SCHEMA_INVALID"  # Tool arguments violate their schema
    SCHEMA_MALFORMED = "SCHEMA_MALFORMED"  # Schema itself is invalid
    ITEM_FAILED = "ITEM_FAILED"  # Batch aborted on a failing record
    INTERNAL = "INTERNAL"  # Anything not raised by this package


class AdapterError(Exception):
    """Base class for all adapter errors.

    Attributes:
        code: Standardized error code
        message: Human-readable error description
    """

    code: AdapterErrorCode = AdapterErrorCode.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(AdapterError):
    """Static setup is missing or invalid. Always fatal."""

    code = AdapterErrorCode.CONFIGURATION


class MalformedPayloadError(AdapterError):
    """A body or argument was supplied but could not be parsed."""

    code = AdapterErrorCode.MALFORMED_PAYLOAD


class ArgumentExtractionError(AdapterError):
    """No usable argument value could be extracted from tool input."""

    code = AdapterErrorCode.ARGUMENT_EXTRACTION


class TransportError(AdapterError):
    """The upstream call failed.

    Attributes:
        status_code: HTTP status of the upstream response, if any
        response: Parsed upstream body, if any
    """

    code = AdapterErrorCode.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class SchemaValidationError(AdapterError):
    """Raised when tool arguments fail schema validation.

    Attributes:
        code: SCHEMA_INVALID or SCHEMA_MALFORMED
        message: Human-readable error description
        path: Dotted path to the invalid field (if applicable)
        schema_path: Path within the schema that was violated
    """

    def __init__(
        self,
        code: AdapterErrorCode,
        message: str,
        path: str = "",
        schema_path: str = "",
    ) -> None:
        """Initialize validation error.

        Args:
            code: Standardized error code
            message: Human-readable error description
            path: Dotted path to the invalid field
            schema_path: Path within the schema that was violated
        """
        super().__init__(message)
        self.code = code
        self.path = path
        self.schema_path = schema_path


class BatchItemError(AdapterError):
    """A record failed while the batch was not allowed to continue.

    Attributes:
        item_index: Position of the failing record in the batch
        cause: The original error
    """

    code = AdapterErrorCode.ITEM_FAILED

    def __init__(self, item_index: int, cause: BaseException) -> None:
        super().__init__(f"Item {item_index} failed: {describe_error(cause)}")
        self.item_index = item_index
        self.cause = cause


def describe_error(error: BaseException) -> str:
    """Return the message carried by an error, falling back to str()."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or type(error).__name__


def error_code(error: BaseException) -> AdapterErrorCode:
    """Return the standardized code for any error."""
    if isinstance(error, AdapterError):
        return error.code
    return AdapterErrorCode.INTERNAL
