"""Response shaping helpers shared by batch and tool execution."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.errors import describe_error


def merge_record(
    record: Mapping[str, Any],
    request: Any,
    response: Any,
    response_key: str = "response",
) -> dict[str, Any]:
    """Merge a record's fields with the request summary and upstream response.

    The request summary and response win on key collision, so the upstream
    payload is always found under ``response_key``.
    """
    merged = dict(record)
    merged["request"] = request
    merged[response_key] = response
    return merged


def error_record(record: Mapping[str, Any], error: BaseException) -> dict[str, Any]:
    """Output payload for a record whose call failed under continue-on-failure."""
    return {"error": describe_error(error), "input": dict(record)}


def page_contents(response: Any, field: str = "page_content") -> list[Any]:
    """Extract the text of each hit from a vector-search response.

    Non-list responses yield an empty list; hits without the field yield "".
    """
    if not isinstance(response, list):
        return []
    return [item.get(field, "") if isinstance(item, Mapping) else "" for item in response]
