"""Units: declarative API adapters runnable as pipeline steps or agent tools."""

from apinodes.kernel.executor.context import HostContext
from apinodes.kernel.executor.tool_registry import ToolRegistry
from apinodes.kernel.executor.transport import HttpTransport, RequestsTransport
from apinodes.units.api_request import ApiRequest
from apinodes.units.api_request_node import ApiRequestNode
from apinodes.units.base import HttpUnit, UnitDefinition
from apinodes.units.document_search_tool import DocumentSearchTool
from apinodes.units.ivn8n import IVN8N
from apinodes.units.json_placeholder import JsonPlaceholder
from apinodes.units.placeholder_request import PlaceholderRequest
from apinodes.units.qdrant_search import QdrantSearch
from apinodes.units.qdrant_search_tool import QdrantSearchTool
from apinodes.units.search_tool_schema import SearchToolSchema

UNITS: dict[str, type[HttpUnit]] = {
    unit.definition.name: unit
    for unit in (
        ApiRequest,
        ApiRequestNode,
        DocumentSearchTool,
        IVN8N,
        JsonPlaceholder,
        PlaceholderRequest,
        QdrantSearch,
        QdrantSearchTool,
        SearchToolSchema,
    )
}


def get_unit(name: str) -> HttpUnit:
    """Instantiate a unit by its definition name.

    Raises:
        KeyError: If no unit has that name
    """
    if name not in UNITS:
        raise KeyError(f"Unknown unit '{name}'. Available units: {sorted(UNITS)}")
    return UNITS[name]()


def supply_tools(
    units: dict[str, HostContext],
    transport: HttpTransport | None = None,
) -> ToolRegistry:
    """Build a ToolRegistry from units and the contexts configuring them.

    Args:
        units: Unit name -> context holding that unit's parameters
        transport: Shared transport; a RequestsTransport by default

    Raises:
        ConfigurationError: If a unit is not usable as a tool or is misconfigured
        ValueError: If two units supply tools with the same name
    """
    transport = transport or RequestsTransport()
    registry = ToolRegistry()
    for name, context in units.items():
        registry.register(get_unit(name).supply_tool(context, transport))
    return registry


__all__ = [
    "ApiRequest",
    "ApiRequestNode",
    "DocumentSearchTool",
    "HttpUnit",
    "IVN8N",
    "JsonPlaceholder",
    "PlaceholderRequest",
    "QdrantSearch",
    "QdrantSearchTool",
    "SearchToolSchema",
    "UNITS",
    "UnitDefinition",
    "get_unit",
    "supply_tools",
]
