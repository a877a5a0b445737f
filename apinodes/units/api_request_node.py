"""API Request Node: forwards a JSON body given as a string."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition


class ApiRequestNode(HttpUnit):
    definition = UnitDefinition(
        name="apiRequestNode",
        display_name="API Request Node",
        description="Makes a request to a specified API endpoint with a JSON body",
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
                name="requestBody",
                type="string",
                default="{}",
                description="Request body as a JSON string",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        return EndpointConfig(
            url=params["apiUrl"],
            method=params["httpMethod"],
            raw_body_argument="requestBody",
        )

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return {"requestBody": params["requestBody"]}
