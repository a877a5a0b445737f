"""Search Tool Schema: a structured search tool with a bounded result count."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.executor.shaping import page_contents
from apinodes.kernel.executor.tool_contract import ToolArgument, ToolArgumentSchema, ToolContract
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig, LimitPolicy, RequestSpec
from apinodes.units.base import HttpUnit, UnitDefinition, positive_int

DEFAULT_LIMIT = 4
DEFAULT_MAX_LIMIT = 100


class SearchToolSchema(HttpUnit):
    definition = UnitDefinition(
        name="searchToolShema",
        display_name="Search Tool Schema",
        description="Makes a request to API search",
        batch=False,
        usable_as_tool=True,
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="apiUrl",
                type="string",
                default="https://jsonplaceholder.typicode.com/posts",
                required=True,
                description="URL to make the HTTP request",
            ),
            ParameterDeclaration(
                name="defaultLimit",
                type="number",
                default=DEFAULT_LIMIT,
                description="Default number of results to return",
            ),
            ParameterDeclaration(
                name="maxLimit",
                type="number",
                default=DEFAULT_MAX_LIMIT,
                description="Max number of results to return",
            ),
            ParameterDeclaration(
                name="description",
                type="string",
                default="Makes a request to API",
                description="Tool description for the AI",
            ),
            ParameterDeclaration(
                name="queryDescription",
                type="string",
                default="Search query text",
                description="Description for the query field in the tool schema",
            ),
            ParameterDeclaration(
                name="limitDescription",
                type="string",
                default="Max number of results to return",
                description="Description for the limit field in the tool schema",
            ),
        )
    )

    def _limits(self, params: Mapping[str, Any]) -> tuple[int, int]:
        maximum = positive_int(params.get("maxLimit"), DEFAULT_MAX_LIMIT)
        default = min(positive_int(params.get("defaultLimit"), DEFAULT_LIMIT), maximum)
        return default, maximum

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        default, maximum = self._limits(params)
        return EndpointConfig(
            url=params["apiUrl"],
            method="GET",
            arguments=(
                ArgumentMapping(name="query", required=True),
                ArgumentMapping(name="limit", query_name="k"),
            ),
            limit=LimitPolicy(argument="limit", default=default, maximum=maximum),
        )

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        default, maximum = self._limits(params)
        return ToolContract(
            name="qdrant_search_tool",
            description=params.get("description") or "Searches in Qdrant vector database",
            argument_schema=ToolArgumentSchema(
                arguments={
                    "query": ToolArgument(
                        type="string",
                        required=True,
                        description=params.get("queryDescription") or "Search query text",
                    ),
                    "limit": ToolArgument(
                        type="integer",
                        description=params.get("limitDescription") or "Number of results to return",
                        default=default,
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
            "result": page_contents(response),
        }
