"""Append-only trace log of tool inputs and outputs.

Each tool call appends one input entry (which assigns the call's index) and
later one output entry under the same index. Entries are frozen once
written; an index can receive only one output.
"""

import threading
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class TraceEntry(BaseModel):
    """One write-once observation of a tool call."""

    model_config = ConfigDict(frozen=True)

    stream: str
    index: int
    kind: Literal["input", "output"]
    data: Any


class TraceLog:
    """Thread-safe trace stream shared by the tools of one execution context."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[TraceEntry] = []
        # Next index per stream; {(stream, index)} already holding an output
        self._next_index: dict[str, int] = {}
        self._completed: set[tuple[str, int]] = set()

    def add_input_data(self, stream: str, batch: Any) -> int:
        """Append an input entry and return the index assigned to it."""
        with self._lock:
            index = self._next_index.get(stream, 0)
            self._next_index[stream] = index + 1
            self._entries.append(TraceEntry(stream=stream, index=index, kind="input", data=batch))
            return index

    def add_output_data(self, stream: str, index: int, batch: Any) -> None:
        """Append the output entry for a previously assigned index.

        Raises:
            KeyError: If no input entry holds this index
            ValueError: If this index already has an output
        """
        with self._lock:
            if index >= self._next_index.get(stream, 0) or index < 0:
                raise KeyError(f"No input entry {index} on stream '{stream}'")
            if (stream, index) in self._completed:
                raise ValueError(f"Output for entry {index} on stream '{stream}' already written")
            self._completed.add((stream, index))
            self._entries.append(TraceEntry(stream=stream, index=index, kind="output", data=batch))

    def entries(self, stream: str | None = None, kind: str | None = None) -> list[TraceEntry]:
        with self._lock:
            return [
                entry
                for entry in self._entries
                if (stream is None or entry.stream == stream) and (kind is None or entry.kind == kind)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
