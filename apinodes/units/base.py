"""HttpUnit: shared shape of every unit.

A unit is declarative configuration (definition, parameters, endpoint
factory) plus optional hooks for shaping output. The same parameter
declarations and endpoint feed both the batch path (``execute``) and the
tool path (``supply_tool``).
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from apinodes.kernel.errors import ConfigurationError
from apinodes.kernel.executor.batch_adapter import BatchAdapter
from apinodes.kernel.executor.context import HostContext, OutputRecord
from apinodes.kernel.executor.extraction import ArgumentExtractor
from apinodes.kernel.executor.shaping import merge_record
from apinodes.kernel.executor.tool_adapter import ArgumentCheck, ToolAdapter
from apinodes.kernel.executor.tool_contract import ToolContract
from apinodes.kernel.executor.transport import HttpTransport, RequestsTransport
from apinodes.kernel.resolver.parameters import ParameterSet
from apinodes.kernel.resolver.request_spec import EndpointConfig, RequestSpec


class UnitDefinition(BaseModel):
    """Identity of a unit as shown to the host."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    description: str
    version: int = 1
    batch: bool = True  # Runs as a pipeline step
    usable_as_tool: bool = False  # Can be supplied to an agent


class HttpUnit:
    """Base class for units performing one HTTP call per record or tool call."""

    definition: UnitDefinition
    parameters: ParameterSet

    @property
    def name(self) -> str:
        return self.definition.name

    # Batch path

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig | None:
        raise NotImplementedError

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return dict(params)

    def shape_output(
        self,
        record: Mapping[str, Any],
        request: RequestSpec,
        response: Any,
        params: Mapping[str, Any],
    ) -> dict[str, Any]:
        return merge_record(record, request.summary, response)

    def process_locally(self, record: Mapping[str, Any], params: Mapping[str, Any]) -> dict[str, Any]:
        raise ConfigurationError(f"{self.name} has no operation without an endpoint")

    def execute(self, context: HostContext, transport: HttpTransport | None = None) -> list[OutputRecord]:
        """Run the unit as a pipeline step over the host's records."""
        if not self.definition.batch:
            raise ConfigurationError(f"{self.name} can only be used as a tool")
        return BatchAdapter(self, transport or RequestsTransport()).run(context)

    # Tool path

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        raise ConfigurationError(f"{self.name} cannot be used as a tool")

    def tool_endpoint(self, params: Mapping[str, Any]) -> EndpointConfig | None:
        return self.endpoint(params)

    def tool_extractor(self, params: Mapping[str, Any]) -> ArgumentExtractor | None:
        return None

    def tool_checks(self, params: Mapping[str, Any]) -> Sequence[ArgumentCheck]:
        return ()

    def shape_tool_response(self, request: RequestSpec, response: Any) -> Any:
        return response

    def supply_tool(
        self,
        context: HostContext,
        transport: HttpTransport | None = None,
        item_index: int = 0,
    ) -> ToolAdapter:
        """Build the agent tool for this unit.

        Raises:
            ConfigurationError: If the unit is not usable as a tool or its
                endpoint URL is empty
        """
        if not self.definition.usable_as_tool:
            raise ConfigurationError(f"{self.name} cannot be used as a tool")

        params = self.parameters.read(context, item_index)
        endpoint = self.tool_endpoint(params)
        if endpoint is None:
            raise ConfigurationError(f"{self.name}: operation has no endpoint to expose as a tool")
        if not endpoint.url.strip():
            raise ConfigurationError("missing endpoint URL")

        return ToolAdapter(
            contract=self.tool_contract(params),
            endpoint=endpoint,
            transport=transport or RequestsTransport(),
            trace=context,
            extractor=self.tool_extractor(params),
            checks=self.tool_checks(params),
            shape_response=self.shape_tool_response,
        )


def positive_int(value: Any, fallback: int) -> int:
    """Parameter value as an integer >= 1, or ``fallback`` when unusable."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    return max(1, int(value))
