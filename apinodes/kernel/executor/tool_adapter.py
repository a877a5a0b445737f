"""ToolAdapter: exposes one endpoint as a single-call agent tool.

A call parses the agent's input (schema-validated object, or free-form
string run through an extraction chain), records an input trace entry,
resolves and performs the request, records the output trace entry and
returns the JSON rendering of the ResponseEnvelope. Nothing is raised
across this boundary: every failure becomes an error envelope, and a trace
sink that fails is logged and skipped.
"""

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from apinodes.config import AI_TOOL_STREAM
from apinodes.kernel.errors import AdapterErrorCode, SchemaValidationError, describe_error
from apinodes.kernel.executor.envelope import ResponseEnvelope
from apinodes.kernel.executor.extraction import ArgumentExtractor
from apinodes.kernel.executor.schema_validator import SchemaValidator
from apinodes.kernel.executor.tool_contract import ToolContract
from apinodes.kernel.executor.transport import HttpTransport
from apinodes.kernel.resolver.request_spec import EndpointConfig, RequestSpec, resolve_request

logger = logging.getLogger(__name__)

ArgumentCheck = Callable[[dict[str, Any]], None]
ResponseShaper = Callable[[RequestSpec, Any], Any]


class TraceSink(Protocol):
    def add_input_data(self, stream: str, batch: Any) -> int: ...

    def add_output_data(self, stream: str, index: int, batch: Any) -> None: ...


class ToolAdapter:
    """Callable agent tool backed by the RequestSpec resolver.

    Args:
        contract: Name, description and (optional) argument schema
        endpoint: Static endpoint configuration
        transport: Performs the HTTP call
        trace: Where input/output trace entries are written
        extractor: Argument extraction for untyped tools
        checks: Extra argument checks run before the request is resolved
        shape_response: Turns the upstream body into the envelope's response
        validator: Schema validator for structured tools
    """

    def __init__(
        self,
        contract: ToolContract,
        endpoint: EndpointConfig,
        transport: HttpTransport,
        trace: TraceSink,
        extractor: ArgumentExtractor | None = None,
        checks: Sequence[ArgumentCheck] = (),
        shape_response: ResponseShaper | None = None,
        validator: SchemaValidator | None = None,
        stream: str = AI_TOOL_STREAM,
    ) -> None:
        self.contract = contract
        self.endpoint = endpoint
        self.transport = transport
        self.trace = trace
        self.extractor = extractor or ArgumentExtractor("input", kind="text")
        self.checks = tuple(checks)
        self.shape_response = shape_response
        self.validator = validator or SchemaValidator()
        self.stream = stream

    @property
    def name(self) -> str:
        return self.contract.name

    @property
    def description(self) -> str:
        return self.contract.description

    def __call__(self, tool_input: Any) -> str:
        """Run one tool call and return its result as text."""
        try:
            arguments = self.parse_arguments(tool_input)
        except Exception as e:
            logger.warning("%s: could not read arguments: %s", self.name, describe_error(e))
            index = self._trace_input({"input": tool_input})
            return self._finish(index, ResponseEnvelope.from_error(tool_input, e))

        index = self._trace_input(arguments)
        summary: Any = arguments
        try:
            for check in self.checks:
                check(arguments)
            request = resolve_request(self.endpoint, arguments)
            summary = request.summary
            response = self.transport(request)
            if self.shape_response is not None:
                response = self.shape_response(request, response)
            envelope = ResponseEnvelope.ok(summary, response)
        except Exception as e:
            logger.warning("%s: call failed: %s", self.name, describe_error(e))
            envelope = ResponseEnvelope.from_error(summary, e)
        return self._finish(index, envelope)

    def parse_arguments(self, tool_input: Any) -> dict[str, Any]:
        """Turn raw agent input into resolver arguments.

        Raises:
            SchemaValidationError: If a structured tool's arguments are invalid
            ArgumentExtractionError: If an untyped tool's input holds no value
        """
        if not self.contract.is_structured:
            if isinstance(tool_input, Mapping) and set(tool_input) == {"input"}:
                tool_input = tool_input["input"]
            return self.extractor.extract_arguments(tool_input)

        if isinstance(tool_input, str):
            try:
                tool_input = json.loads(tool_input)
            except json.JSONDecodeError:
                raise SchemaValidationError(
                    code=AdapterErrorCode.SCHEMA_INVALID,
                    message="Tool arguments must be a JSON object",
                )
        return self.validator.apply(tool_input, self.contract.argument_schema)

    def _trace_input(self, data: Any) -> int | None:
        try:
            return self.trace.add_input_data(self.stream, data)
        except Exception as e:
            logger.error("%s: trace sink rejected input entry: %s", self.name, describe_error(e))
            return None

    def _finish(self, index: int | None, envelope: ResponseEnvelope) -> str:
        if index is not None:
            try:
                self.trace.add_output_data(self.stream, index, envelope.to_payload())
            except Exception as e:
                logger.error("%s: trace sink rejected output entry: %s", self.name, describe_error(e))
        return envelope.render()
