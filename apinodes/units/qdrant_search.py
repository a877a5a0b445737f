"""Qdrant Search: GETs an endpoint and stores the reply under a chosen key."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.executor.shaping import merge_record
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import EndpointConfig, RequestSpec
from apinodes.units.base import HttpUnit, UnitDefinition

DEFAULT_RESPONSE_PROPERTY = "apiResponse"


class QdrantSearch(HttpUnit):
    definition = UnitDefinition(
        name="qdrantSearch",
        display_name="Qdrant Search",
        description="Fetches data from an API endpoint and adds it to each item",
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="apiUrl",
                type="string",
                default="",
                required=True,
                description="URL of the API endpoint",
            ),
            ParameterDeclaration(
                name="responseProperty",
                type="string",
                default=DEFAULT_RESPONSE_PROPERTY,
                description="Name of the field the API response is stored in",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        return EndpointConfig(url=params["apiUrl"])

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return {}

    def shape_output(
        self,
        record: Mapping[str, Any],
        request: RequestSpec,
        response: Any,
        params: Mapping[str, Any],
    ) -> dict[str, Any]:
        key = params.get("responseProperty") or DEFAULT_RESPONSE_PROPERTY
        return merge_record(record, request.summary, response, response_key=key)
