"""IVN8N: vector search or local text processing; search is also an agent tool."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.executor.shaping import merge_record, page_contents
from apinodes.kernel.executor.tool_contract import ToolArgument, ToolArgumentSchema, ToolContract
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig, LimitPolicy, RequestSpec
from apinodes.units.base import HttpUnit, UnitDefinition, positive_int

DEFAULT_MAX_LIMIT = 100
DEFAULT_LIMIT = 5


class IVN8N(HttpUnit):
    definition = UnitDefinition(
        name="ivn8n",
        display_name="IVN8N",
        description="IVN8N Node with multiple operations",
        usable_as_tool=True,
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="operation",
                type="options",
                options=("search", "process"),
                default="search",
            ),
            ParameterDeclaration(
                name="apiUrl",
                type="string",
                default="",
                required=True,
                show_for=("search",),
                description="API endpoint URL for search requests",
            ),
            ParameterDeclaration(
                name="query",
                type="string",
                default="",
                show_for=("search",),
                description="Text to search for",
            ),
            ParameterDeclaration(
                name="maxLimit",
                type="number",
                default=DEFAULT_MAX_LIMIT,
                show_for=("search",),
                description="Maximum number of results to return",
            ),
            ParameterDeclaration(
                name="limit",
                type="number",
                default=DEFAULT_LIMIT,
                show_for=("search",),
                description="Max number of results to return",
            ),
            ParameterDeclaration(
                name="inputData",
                type="string",
                default="",
                show_for=("process",),
                description="Data to process",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig | None:
        if params["operation"] != "search":
            return None
        return EndpointConfig(
            url=params["apiUrl"],
            method="GET",
            arguments=(
                ArgumentMapping(name="query"),
                ArgumentMapping(name="limit", query_name="k"),
            ),
            limit=LimitPolicy(
                argument="limit",
                default=DEFAULT_LIMIT,
                maximum=positive_int(params.get("maxLimit"), DEFAULT_MAX_LIMIT),
            ),
        )

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return {"query": params.get("query"), "limit": params.get("limit")}

    def shape_output(
        self,
        record: Mapping[str, Any],
        request: RequestSpec,
        response: Any,
        params: Mapping[str, Any],
    ) -> dict[str, Any]:
        return merge_record(record, request.summary, self.shape_tool_response(request, response))

    def process_locally(self, record: Mapping[str, Any], params: Mapping[str, Any]) -> dict[str, Any]:
        return {
            **record,
            "status": "ok",
            "operation": "process",
            "result": f"Processed: {params.get('inputData', '')}",
        }

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        maximum = positive_int(params.get("maxLimit"), DEFAULT_MAX_LIMIT)
        return ToolContract(
            name="ivn8n_search",
            description="Searches the IVN8N index and returns the matching text fragments",
            argument_schema=ToolArgumentSchema(
                arguments={
                    "query": ToolArgument(type="string", required=True, description="Search query"),
                    "limit": ToolArgument(
                        type="integer",
                        description="Number of results",
                        default=DEFAULT_LIMIT,
                        minimum=1,
                        maximum=maximum,
                        bounds="clamp",
                    ),
                }
            ),
        )

    def shape_tool_response(self, request: RequestSpec, response: Any) -> Any:
        return {
            "status": "ok",
            "query": request.summary.get("query"),
            "limit": request.summary.get("limit"),
            "results": page_contents(response),
        }
