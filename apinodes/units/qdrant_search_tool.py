"""Qdrant Search Tool: an untyped agent tool sending free text as the query."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.executor.extraction import ArgumentExtractor
from apinodes.kernel.executor.tool_contract import ToolContract
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition

DEFAULT_DESCRIPTION = "Makes an HTTP request with the provided query string"


class QdrantSearchTool(HttpUnit):
    definition = UnitDefinition(
        name="qdrantSearchTool",
        display_name="Qdrant Search Tool",
        description=DEFAULT_DESCRIPTION,
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
                description="URL to make the HTTP request to",
            ),
            ParameterDeclaration(
                name="httpMethod",
                type="options",
                options=("GET", "POST"),
                default="POST",
                description="HTTP method for the request",
            ),
            ParameterDeclaration(
                name="description",
                type="string",
                default=DEFAULT_DESCRIPTION,
                description="Tool description for the AI",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        return EndpointConfig(
            url=params["apiUrl"],
            method=params["httpMethod"],
            arguments=(ArgumentMapping(name="query", required=True),),
        )

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        return ToolContract(
            name="Qdrant_http_request_tool",
            description=params.get("description") or DEFAULT_DESCRIPTION,
        )

    def tool_extractor(self, params: Mapping[str, Any]) -> ArgumentExtractor:
        return ArgumentExtractor("query", kind="text")
