"""API Request: sends a document name (and optional count) to an endpoint."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition


class ApiRequest(HttpUnit):
    definition = UnitDefinition(
        name="apiRequest",
        display_name="API Request",
        description="Makes a request to a specified API endpoint",
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="httpMethod",
                type="options",
                options=("GET", "POST"),
                default="POST",
                description="HTTP method to use",
            ),
            ParameterDeclaration(
                name="apiUrl",
                type="string",
                default="https://jsonplaceholder.typicode.com/posts",
                required=True,
                description="The URL of the API endpoint",
            ),
            ParameterDeclaration(
                name="documentName",
                type="string",
                default="",
                required=True,
                description="Name of the document to process",
            ),
            ParameterDeclaration(
                name="responseCount",
                type="number",
                default=None,
                description="Number of responses to request (optional)",
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
        )

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        arguments = {"documentName": params["documentName"]}
        # A count of 0 means "not set"
        if params.get("responseCount"):
            arguments["responseCount"] = params["responseCount"]
        return arguments
