"""Executor module: batch execution, tool execution and tracing."""

from apinodes.kernel.executor.batch_adapter import BatchAdapter, BatchStep
from apinodes.kernel.executor.context import (
    ExecutionContext,
    HostContext,
    InputRecord,
    OutputRecord,
)
from apinodes.kernel.executor.envelope import ErrorPayload, ResponseEnvelope
from apinodes.kernel.executor.extraction import ArgumentExtractor, Extraction
from apinodes.kernel.executor.schema_validator import SchemaValidator
from apinodes.kernel.executor.tool_adapter import ToolAdapter
from apinodes.kernel.executor.tool_contract import ToolArgument, ToolArgumentSchema, ToolContract
from apinodes.kernel.executor.tool_registry import ToolNotFoundError, ToolRegistry
from apinodes.kernel.executor.tracing import TraceEntry, TraceLog
from apinodes.kernel.executor.transport import HttpTransport, RequestsTransport

__all__ = [
    "ArgumentExtractor",
    "BatchAdapter",
    "BatchStep",
    "ErrorPayload",
    "ExecutionContext",
    "Extraction",
    "HostContext",
    "HttpTransport",
    "InputRecord",
    "OutputRecord",
    "RequestsTransport",
    "ResponseEnvelope",
    "SchemaValidator",
    "ToolAdapter",
    "ToolArgument",
    "ToolArgumentSchema",
    "ToolContract",
    "ToolNotFoundError",
    "ToolRegistry",
    "TraceEntry",
    "TraceLog",
]
