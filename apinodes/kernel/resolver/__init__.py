"""Resolver module: parameter declarations and RequestSpec resolution."""

from apinodes.kernel.resolver.parameters import (
    ParameterDeclaration,
    ParameterReader,
    ParameterSet,
)
from apinodes.kernel.resolver.request_spec import (
    ArgumentMapping,
    EndpointConfig,
    LimitPolicy,
    RequestSpec,
    clamp_limit,
    parse_json_body,
    resolve_request,
)

__all__ = [
    "ArgumentMapping",
    "EndpointConfig",
    "LimitPolicy",
    "ParameterDeclaration",
    "ParameterReader",
    "ParameterSet",
    "RequestSpec",
    "clamp_limit",
    "parse_json_body",
    "resolve_request",
]
