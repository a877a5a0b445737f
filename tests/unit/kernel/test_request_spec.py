"""RequestSpec resolution tests.

Test Coverage:
- Endpoint URL checked before anything else
- Result-count clamping into [1, maximum]
- Argument serialization for read-style and write-style methods
- Strict parsing of raw-string bodies
- Path arguments and static headers
"""

import pytest

from apinodes.kernel.errors import ConfigurationError, MalformedPayloadError
from apinodes.kernel.resolver.request_spec import (
    ArgumentMapping,
    EndpointConfig,
    LimitPolicy,
    clamp_limit,
    parse_json_body,
    resolve_request,
)

SEARCH_ARGUMENTS = (
    ArgumentMapping(name="query"),
    ArgumentMapping(name="limit", query_name="k"),
)


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestEndpointValidation:
    """Static configuration errors surface before any request exists."""

    @pytest.mark.parametrize("url", ["", "   "])
    def test_empty_url_raises_configuration_error(self, url: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_request(EndpointConfig(url=url), {"query": "x"})

        assert exc_info.value.message == "missing endpoint URL"

    def test_unsupported_method_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_request(EndpointConfig(url="https://api.test", method="TRACE"))

    def test_method_is_normalized(self) -> None:
        request = resolve_request(EndpointConfig(url="https://api.test", method="post"))

        assert request.method == "POST"

    def test_unmapped_path_placeholder_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_request(EndpointConfig(url="https://api.test", path="/posts/{postId}"))


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestClampLimit:
    """Result counts are clamped, never rejected."""

    def test_above_maximum_is_clamped(self) -> None:
        assert clamp_limit(500, maximum=100, default=5) == 100

    @pytest.mark.parametrize("value", [0, -1, -250])
    def test_below_one_is_clamped(self, value: int) -> None:
        assert clamp_limit(value, maximum=100, default=5) == 1

    def test_missing_value_uses_default(self) -> None:
        assert clamp_limit(None, maximum=100, default=5) == 5

    def test_default_is_clamped_too(self) -> None:
        assert clamp_limit(None, maximum=3, default=5) == 3

    def test_unparsable_value_uses_default(self) -> None:
        assert clamp_limit("many", maximum=100, default=7) == 7

    def test_numeric_string_is_parsed(self) -> None:
        assert clamp_limit("12", maximum=100, default=5) == 12

    @pytest.mark.parametrize("value", ["3.7", 3.7])
    def test_fractional_value_uses_default(self, value: object) -> None:
        assert clamp_limit(value, maximum=100, default=5) == 5

    def test_whole_float_is_accepted(self) -> None:
        assert clamp_limit(8.0, maximum=100, default=5) == 8

    def test_maximum_below_one_rejected_at_declaration(self) -> None:
        with pytest.raises(ValueError):
            LimitPolicy(maximum=0)


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestArgumentSerialization:
    """The same arguments reach the API whichever method is configured."""

    def test_get_sends_query_parameters(self) -> None:
        endpoint = EndpointConfig(
            url="https://api.test/search",
            arguments=SEARCH_ARGUMENTS,
            limit=LimitPolicy(maximum=10),
        )

        request = resolve_request(endpoint, {"query": "reports", "limit": 9999})

        assert request.method == "GET"
        assert request.query == {"query": "reports", "k": 10}
        assert request.body is None
        assert request.summary == {"query": "reports", "limit": 10}

    def test_post_sends_body_fields(self) -> None:
        endpoint = EndpointConfig(
            url="https://api.test/search",
            method="POST",
            arguments=SEARCH_ARGUMENTS,
            limit=LimitPolicy(maximum=10),
        )

        request = resolve_request(endpoint, {"query": "reports", "limit": 3})

        assert request.query == {}
        assert request.body == {"query": "reports", "limit": 3}

    def test_optional_missing_argument_is_omitted(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", method="POST", arguments=SEARCH_ARGUMENTS)

        request = resolve_request(endpoint, {"query": "reports"})

        assert request.body == {"query": "reports"}

    def test_required_missing_argument_raises(self) -> None:
        endpoint = EndpointConfig(
            url="https://api.test",
            arguments=(ArgumentMapping(name="documentName", required=True),),
        )

        with pytest.raises(MalformedPayloadError) as exc_info:
            resolve_request(endpoint, {"documentName": "  "})

        assert "documentName" in exc_info.value.message

    def test_path_argument_is_substituted(self) -> None:
        endpoint = EndpointConfig(
            url="https://api.test/",
            path="/posts/{postId}",
            arguments=(ArgumentMapping(name="postId", location="path"),),
        )

        request = resolve_request(endpoint, {"postId": 7})

        assert request.url == "https://api.test/posts/7"
        assert request.query == {}
        assert request.summary == {"postId": 7}

    def test_static_headers_are_merged(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", headers={"X-Api-Key": "k"})

        request = resolve_request(endpoint)

        assert request.headers == {"Accept": "application/json", "X-Api-Key": "k"}

    def test_arguments_are_not_mutated(self) -> None:
        arguments = {"query": "reports", "limit": 500}
        endpoint = EndpointConfig(url="https://api.test", arguments=SEARCH_ARGUMENTS, limit=LimitPolicy())

        resolve_request(endpoint, arguments)

        assert arguments == {"query": "reports", "limit": 500}


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestRawBody:
    """String bodies are parsed strictly and never sent raw."""

    def test_post_raw_body_is_parsed(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", method="POST", raw_body_argument="requestBody")

        request = resolve_request(endpoint, {"requestBody": '{"title": "foo", "userId": 1}'})

        assert request.body == {"title": "foo", "userId": 1}
        assert request.summary == {"title": "foo", "userId": 1}

    def test_post_malformed_raw_body_raises(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", method="POST", raw_body_argument="requestBody")

        with pytest.raises(MalformedPayloadError):
            resolve_request(endpoint, {"requestBody": "{title: foo"})

    def test_get_raw_body_becomes_query(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", raw_body_argument="requestBody")

        request = resolve_request(endpoint, {"requestBody": '{"userId": 1}'})

        assert request.query == {"userId": 1}
        assert request.body is None

    def test_get_non_object_raw_body_raises(self) -> None:
        endpoint = EndpointConfig(url="https://api.test", raw_body_argument="requestBody")

        with pytest.raises(MalformedPayloadError):
            resolve_request(endpoint, {"requestBody": "[1, 2]"})

    def test_empty_raw_body_means_no_body(self) -> None:
        assert parse_json_body("  ") is None

    def test_structured_body_passes_through(self) -> None:
        assert parse_json_body({"a": 1}) == {"a": 1}
