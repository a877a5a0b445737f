"""JSONPlaceholder Post Fetcher: an untyped agent tool fetching a post by id."""

from collections.abc import Mapping, Sequence
from typing import Any

from apinodes.kernel.errors import MalformedPayloadError
from apinodes.kernel.executor.extraction import ArgumentExtractor
from apinodes.kernel.executor.tool_adapter import ArgumentCheck
from apinodes.kernel.executor.tool_contract import ToolContract
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet
from apinodes.kernel.resolver.request_spec import ArgumentMapping, EndpointConfig
from apinodes.units.base import HttpUnit, UnitDefinition

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_DESCRIPTION = (
    'Fetches a post from JSONPlaceholder API by post ID. Example: "Show me post number 1" or {"postId":1}'
)


def require_positive_post_id(arguments: dict[str, Any]) -> None:
    if arguments["postId"] < 1:
        raise MalformedPayloadError("Invalid post ID: post ID must be a positive number")


class PlaceholderRequest(HttpUnit):
    definition = UnitDefinition(
        name="jsonPlaceholderPostFetcher",
        display_name="JSONPlaceholder Post Fetcher",
        description="Fetches a post from JSONPlaceholder API by post ID",
        batch=False,
        usable_as_tool=True,
    )
    parameters = ParameterSet(
        declarations=(
            ParameterDeclaration(
                name="apiUrl",
                type="string",
                default=DEFAULT_BASE_URL,
                required=True,
                description="Base URL of the JSONPlaceholder API",
            ),
            ParameterDeclaration(
                name="description",
                type="string",
                default=DEFAULT_DESCRIPTION,
                description="Description of what this tool does",
            ),
        )
    )

    def endpoint(self, params: Mapping[str, Any]) -> EndpointConfig:
        return EndpointConfig(
            url=params["apiUrl"],
            path="/posts/{postId}",
            arguments=(ArgumentMapping(name="postId", location="path"),),
        )

    def tool_contract(self, params: Mapping[str, Any]) -> ToolContract:
        return ToolContract(
            name="placeholder_request",
            description=params.get("description") or DEFAULT_DESCRIPTION,
        )

    def tool_extractor(self, params: Mapping[str, Any]) -> ArgumentExtractor:
        return ArgumentExtractor("postId", kind="integer")

    def tool_checks(self, params: Mapping[str, Any]) -> Sequence[ArgumentCheck]:
        return (require_positive_post_id,)
