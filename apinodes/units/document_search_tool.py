"""Document Search Tool: a structured tool looking documents up by name."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.executor.tool_contract import ToolArgument, ToolArgumentSchema, ToolContract
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition

DEFAULT_DESCRIPTION = (
    'Searches for documents by name. Example: find "Report 2023", 3 of them'
)

DOCUMENT_NAME_DESCRIPTION = (
    "EXACT user query. MUST include ALL original words in the exact same order. "
    "DO NOT modify, summarize or extract keywords. "
    "Examples: "
    "- For 'find 15 documents about CRM deals' return 'find 15 documents about CRM deals' "
    "- For 'show contracts with 1C integration' return 'show contracts with 1C integration'"
)

RESPONSE_COUNT_DESCRIPTION = (
    "Number of results to return. "
    "Extract from the query, for example: "
    "- 'find 15 documents' -> 15 "
    "- 'show 3 contracts' -> 3"
)


class DocumentSearchTool(HttpUnit):
    definition = UnitDefinition(
        name="documentSearchTool",
        display_name="Document Search Tool",
        description="Searches for documents by name",
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
                description="URL of the document search API",
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
            arguments=(
                ArgumentMapping(name="documentName", required=True),
                ArgumentMapping(name="responseCount"),
            ),
            headers={"Content-Type": "application/json"},
        )

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        return ToolContract(
            name="document_search",
            description=params.get("description") or DEFAULT_DESCRIPTION,
            argument_schema=ToolArgumentSchema(
                arguments={
                    "documentName": ToolArgument(
                        type="string", required=True, description=DOCUMENT_NAME_DESCRIPTION
                    ),
                    "responseCount": ToolArgument(type="number", description=RESPONSE_COUNT_DESCRIPTION),
                }
            ),
        )
