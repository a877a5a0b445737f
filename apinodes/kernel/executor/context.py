"""Host boundary: input records, parameter values and the trace stream.

HostContext is what adapters need from the workflow host. ExecutionContext
is an in-memory implementation for embedding hosts and tests.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from apinodes.kernel.executor.tracing import TraceLog


class InputRecord(BaseModel):
    """One record handed to a batch step. Never mutated by adapters."""

    model_config = ConfigDict(frozen=True)

    index: int
    payload: dict[str, Any] = Field(default_factory=dict)


class OutputRecord(BaseModel):
    """One record produced by a batch step."""

    model_config = ConfigDict(frozen=True)

    payload: dict[str, Any]
    paired_item: int
    failed: bool = False


class HostContext(Protocol):
    """What an adapter reads from (and traces into) its host."""

    def get_input_data(self) -> Sequence[InputRecord]: ...

    def get_node_parameter(self, name: str, index: int, default: Any = None) -> Any: ...

    def continue_on_fail(self) -> bool: ...

    def add_input_data(self, stream: str, batch: Any) -> int: ...

    def add_output_data(self, stream: str, index: int, batch: Any) -> None: ...


class ExecutionContext:
    """In-memory HostContext.

    Parameter values may be static or callables taking the InputRecord,
    which stand in for the host's per-record expressions.
    """

    def __init__(
        self,
        items: Sequence[Mapping[str, Any]] = (),
        parameters: Mapping[str, Any] | None = None,
        continue_on_fail: bool = False,
        trace: TraceLog | None = None,
    ) -> None:
        self._records = tuple(InputRecord(index=i, payload=dict(item)) for i, item in enumerate(items))
        self._parameters = dict(parameters or {})
        self._continue_on_fail = continue_on_fail
        self.trace = trace if trace is not None else TraceLog()

    def get_input_data(self) -> Sequence[InputRecord]:
        return self._records

    def get_node_parameter(self, name: str, index: int, default: Any = None) -> Any:
        if name not in self._parameters:
            return default
        value = self._parameters[name]
        if callable(value):
            record = self._records[index] if index < len(self._records) else InputRecord(index=index)
            return value(record)
        return value

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    def add_input_data(self, stream: str, batch: Any) -> int:
        return self.trace.add_input_data(stream, batch)

    def add_output_data(self, stream: str, index: int, batch: Any) -> None:
        self.trace.add_output_data(stream, index, batch)
