"""BatchAdapter: runs a unit as a pipeline step over many records.

Records are processed strictly in index order with one outstanding call at
a time. Each record yields exactly one output record. A failing record is
either contained as an error record (continue-on-failure) or aborts the
whole batch with its index attached. Configuration errors always abort.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from apinodes.kernel.errors import BatchItemError, ConfigurationError, describe_error
from apinodes.kernel.executor.context import HostContext, InputRecord, OutputRecord
from apinodes.kernel.executor.shaping import error_record
from apinodes.kernel.executor.transport import HttpTransport
from apinodes.kernel.resolver.parameters import ParameterSet
from apinodes.kernel.resolver.request_spec import EndpointConfig, RequestSpec, resolve_request

logger = logging.getLogger(__name__)


class BatchStep(Protocol):
    """Per-unit behavior plugged into the batch loop."""

    name: str
    parameters: ParameterSet

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig | None:
        """Endpoint for this record, or None for an operation without HTTP."""
        ...

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]: ...

    def shape_output(
        self,
        record: Mapping[str, Any],
        request: RequestSpec,
        response: Any,
        params: Mapping[str, Any],
    ) -> dict[str, Any]: ...

    def process_locally(self, record: Mapping[str, Any], params: Mapping[str, Any]) -> dict[str, Any]: ...


class BatchAdapter:
    """Executes a BatchStep over the records supplied by the host."""

    def __init__(self, step: BatchStep, transport: HttpTransport) -> None:
        self.step = step
        self.transport = transport

    def run(self, context: HostContext) -> list[OutputRecord]:
        """Process every input record.

        Args:
            context: Host boundary supplying records and parameters

        Returns:
            One OutputRecord per input record, in input order

        Raises:
            ConfigurationError: If the unit cannot function at all
            BatchItemError: If a record fails and continue-on-failure is off
        """
        records = context.get_input_data()
        outputs: list[OutputRecord] = []

        for position, record in enumerate(records):
            try:
                payload = self.process_record(context, record, position)
            except ConfigurationError:
                logger.error("%s: configuration error on item %d", self.step.name, position)
                raise
            except Exception as e:
                if context.continue_on_fail():
                    logger.warning("%s: item %d failed: %s", self.step.name, position, describe_error(e))
                    outputs.append(
                        OutputRecord(payload=error_record(record.payload, e), paired_item=position, failed=True)
                    )
                    continue
                logger.error("%s: aborting batch at item %d", self.step.name, position)
                raise BatchItemError(position, e) from e

            outputs.append(OutputRecord(payload=payload, paired_item=position))

        return outputs

    def process_record(self, context: HostContext, record: InputRecord, position: int) -> dict[str, Any]:
        """Resolve, call and shape a single record."""
        params = self.step.parameters.read(context, position)
        endpoint = self.step.endpoint(params)
        if endpoint is None:
            return self.step.process_locally(record.payload, params)

        request = resolve_request(endpoint, self.step.request_arguments(params))
        response = self.transport(request)
        return self.step.shape_output(record.payload, request, response, params)
