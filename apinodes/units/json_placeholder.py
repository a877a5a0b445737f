"""JSONPlaceholder: fetches one post or all posts."""

from collections.abc import Mapping
from typing import Any

from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class JsonPlaceholder(HttpUnit):
    definition = UnitDefinition(
        name="jsonPlaceholder",
        display_name="JSONPlaceholder",
        description="Retrieves posts from the JSONPlaceholder API",
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="operation",
                type="options",
                options=("getPost", "getAllPosts"),
                default="getPost",
            ),
            ParameterDeclaration(
                name="baseUrl",
                type="string",
                default=DEFAULT_BASE_URL,
                description="Base URL of the JSONPlaceholder API",
            ),
            ParameterDeclaration(
                name="postId",
                type="number",
                default=1,
                show_for=("getPost",),
                description="The ID of the post to retrieve",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        if params["operation"] == "getPost":
            return EndpointConfig(
                url=params["baseUrl"],
                path="/posts/{postId}",
                arguments=(ArgumentMapping(name="postId", location="path"),),
            )
        return EndpointConfig(url=params["baseUrl"], path="/posts")

    def request_arguments(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return {"postId": params.get("postId")}
