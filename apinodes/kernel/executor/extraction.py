"""Argument extraction for untyped tools.

Agents sometimes call untyped tools with a bare value, a JSON object or a
sentence. Extraction runs an ordered chain of strategies; each returns a
definite Extraction, and the first candidate that coerces to the expected
kind wins.
"""

import json
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from apinodes.kernel.errors import ArgumentExtractionError

_INTEGER_PATTERN = re.compile(r"\d+")


class Extraction(BaseModel):
    """Outcome of one strategy: a candidate value, or nothing."""

    model_config = ConfigDict(frozen=True)

    found: bool
    value: Any = None


MISS = Extraction(found=False)

Strategy = Callable[[Any, str], Extraction]


def _as_mapping(raw: Any) -> Mapping[str, Any] | None:
    if isinstance(raw, Mapping):
        return raw
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            return None
        if isinstance(parsed, Mapping):
            return parsed
    return None


def strict_parse(raw: Any, field: str) -> Extraction:
    """Strict JSON parse of a string; non-string scalars pass through."""
    if isinstance(raw, Mapping) or raw is None:
        return MISS
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw.strip())
        except json.JSONDecodeError:
            return MISS
    else:
        parsed = raw
    if parsed is None or isinstance(parsed, (Mapping, list)):
        return MISS
    return Extraction(found=True, value=parsed)


def typed_field_lookup(raw: Any, field: str) -> Extraction:
    """Look the field up in a mapping, or in a string holding a JSON object."""
    mapping = _as_mapping(raw)
    if mapping is None or field not in mapping:
        return MISS
    return Extraction(found=True, value=mapping[field])


def first_integer(raw: Any, field: str) -> Extraction:
    """First run of digits in free text."""
    if not isinstance(raw, str):
        return MISS
    match = _INTEGER_PATTERN.search(raw)
    if match is None:
        return MISS
    return Extraction(found=True, value=match.group(0))


def quoted_text(raw: Any, field: str) -> Extraction:
    """A JSON string literal such as ``"reports"``, unquoted."""
    if not isinstance(raw, str):
        return MISS
    text = raw.strip()
    if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
        return MISS
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return MISS
    return Extraction(found=True, value=parsed)


def whole_text(raw: Any, field: str) -> Extraction:
    """The input itself, when it is non-blank text or a bare number.

    Text is passed through as written; "3.50" stays "3.50".
    """
    if isinstance(raw, str) and raw.strip():
        return Extraction(found=True, value=raw.strip())
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return Extraction(found=True, value=raw)
    return MISS


INTEGER_STRATEGIES: tuple[Strategy, ...] = (strict_parse, typed_field_lookup, first_integer)
TEXT_STRATEGIES: tuple[Strategy, ...] = (typed_field_lookup, quoted_text, whole_text)


class ArgumentExtractor:
    """Extracts one argument from raw tool input.

    Args:
        field: Argument name, used for field lookup and in the result
        kind: "integer" or "text"
        strategies: Ordered chain; defaults depend on kind
    """

    def __init__(
        self,
        field: str,
        kind: Literal["integer", "text"] = "integer",
        strategies: Sequence[Strategy] | None = None,
    ) -> None:
        self.field = field
        self.kind = kind
        if strategies is None:
            strategies = INTEGER_STRATEGIES if kind == "integer" else TEXT_STRATEGIES
        self.strategies = tuple(strategies)

    def extract(self, raw: Any) -> Any:
        """Return the first usable value produced by the chain.

        Raises:
            ArgumentExtractionError: If no strategy yields a usable value
        """
        for strategy in self.strategies:
            result = strategy(raw, self.field)
            if not result.found:
                continue
            value = self._coerce(result.value)
            if value is not None:
                return value
        expected = "a number" if self.kind == "integer" else "text"
        raise ArgumentExtractionError(f"No {self.field} found in the input; expected {expected}")

    def extract_arguments(self, raw: Any) -> dict[str, Any]:
        return {self.field: self.extract(raw)}

    def _coerce(self, value: Any) -> Any:
        if self.kind == "text":
            if isinstance(value, str):
                return value.strip() or None
            if isinstance(value, bool):
                return None
            return str(value) if isinstance(value, (int, float)) else None

        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value.strip())
        return None
