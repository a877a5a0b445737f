"""ToolRegistry: the set of tools offered to an agent.

Tools are registered by name and version. ``invoke`` routes one agent call
and, like the tools themselves, always answers with text.
"""

from typing import Any

from apinodes.kernel.executor.envelope import ResponseEnvelope
from apinodes.kernel.executor.tool_adapter import ToolAdapter


class ToolNotFoundError(Exception):
    """Raised when a requested tool is not found in the registry.

    Attributes:
        tool_name: Name of the tool that was not found
        version: Version of the tool that was not found
    """

    def __init__(self, tool_name: str, version: str) -> None:
        """Initialize tool not found error.

        Args:
            tool_name: Name of the tool that was not found
            version: Version of the tool that was not found
        """
        super().__init__(f"Tool '{tool_name}' version '{version}' not found in registry")
        self.tool_name = tool_name
        self.version = version
        self.message = str(self)


class ToolRegistry:
    """Central registry for agent tools.

    Provides:
    - Registration of tools with name and version
    - Lookup by name and version
    - Function specs for the agent runtime
    - Routing of calls, returning text even for unknown tools
    """

    def __init__(self) -> None:
        """Initialize tool registry."""
        # Storage: {(name, version): ToolAdapter}
        self._tools: dict[tuple[str, str], ToolAdapter] = {}

    def register(self, tool: ToolAdapter) -> None:
        """Register a tool in the registry.

        Args:
            tool: ToolAdapter to register

        Raises:
            ValueError: If tool with same name/version already registered
        """
        key = (tool.contract.name, tool.contract.version)

        if key in self._tools:
            raise ValueError(f"Tool '{key[0]}' version '{key[1]}' already registered")

        self._tools[key] = tool

    def lookup(self, name: str, version: str = "1") -> ToolAdapter:
        """Look up a tool by name and version.

        Raises:
            ToolNotFoundError: If tool not found in registry
        """
        key = (name, version)

        if key not in self._tools:
            raise ToolNotFoundError(name, version)

        return self._tools[key]

    def list_tools(self) -> dict[tuple[str, str], ToolAdapter]:
        """List all registered tools.

        Returns:
            Dictionary mapping (name, version) to ToolAdapter
        """
        return self._tools.copy()

    def function_specs(self) -> list[dict[str, Any]]:
        """Function specs of every registered tool, for the agent runtime."""
        return [tool.contract.to_function_spec() for tool in self._tools.values()]

    def invoke(self, name: str, tool_input: Any, version: str = "1") -> str:
        """Route one agent call to the named tool."""
        try:
            tool = self.lookup(name, version)
        except ToolNotFoundError as e:
            return ResponseEnvelope.from_error({"tool": name, "input": tool_input}, e).render()
        return tool(tool_input)
