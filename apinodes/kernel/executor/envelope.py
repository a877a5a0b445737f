"""ResponseEnvelope: the canonical result shape of one call.

Tool calls return it to the agent as JSON text and write it to the trace
stream. Exactly one of ``response`` and ``error`` is present: ``success``
selects which key is rendered. A successful call whose upstream body was
empty (204, zero-length content) renders ``"response": null``; it never
carries an ``error`` key.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from apinodes.kernel.errors import describe_error, error_code


class ErrorPayload(BaseModel):
    """Structured description of a failed call."""

    model_config = ConfigDict(frozen=True)

    message: str
    code: str
    upstream: Any = None  # Upstream body carried by a TransportError


class ResponseEnvelope(BaseModel):
    """Result of one call: success with a response, or failure with an error."""

    model_config = ConfigDict(frozen=True)

    success: bool
    request: Any = None
    response: Any = None
    error: ErrorPayload | None = None
    status_code: int | None = None

    @model_validator(mode="after")
    def _exactly_one_payload(self) -> "ResponseEnvelope":
        if self.success and self.error is not None:
            raise ValueError("successful envelope cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("failed envelope must carry an error")
        if not self.success and self.response is not None:
            raise ValueError("failed envelope cannot carry a response")
        return self

    @classmethod
    def ok(cls, request: Any, response: Any) -> "ResponseEnvelope":
        return cls(success=True, request=request, response=response)

    @classmethod
    def from_error(cls, request: Any, error: BaseException) -> "ResponseEnvelope":
        """Build a failed envelope from any error, keeping upstream status/body."""
        status_code = getattr(error, "status_code", None)
        upstream = getattr(error, "response", None)
        return cls(
            success=False,
            request=request,
            error=ErrorPayload(
                message=describe_error(error),
                code=error_code(error).value,
                upstream=upstream,
            ),
            status_code=status_code if isinstance(status_code, int) else None,
        )

    def to_payload(self) -> dict[str, Any]:
        """Plain dict with exactly one of the ``response`` / ``error`` keys."""
        payload: dict[str, Any] = {"success": self.success, "request": self.request}
        if self.success:
            payload["response"] = self.response
        else:
            payload["error"] = self.error.model_dump(exclude_none=True)
            if self.status_code is not None:
                payload["statusCode"] = self.status_code
        return payload

    def render(self) -> str:
        """Serialize for the agent runtime."""
        return json.dumps(self.to_payload(), indent=2, ensure_ascii=False, default=str)
