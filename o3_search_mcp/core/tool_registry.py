# Holds the tools served by this process and mounts them on an MCP server.

from typing import Dict, Iterable, List
from mcp.server.fastmcp import FastMCP
from o3_search_mcp.tools.base_tool import BaseTool
from o3_search_mcp.utils.logger import console


class ToolRegistry:
    """
    A class to register and manage tools, and expose them through FastMCP.
    """
    def __init__(self, tools: Iterable[BaseTool] = ()):
        self.tools: Dict[str, BaseTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: BaseTool):
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered.")
        self.tools[tool.name] = tool
        console.info(f"Successfully registered tool: '{tool.name}'")

    def names(self) -> List[str]:
        return list(self.tools.keys())

    def mount(self, server: FastMCP):
        """Adds every registered tool to the given FastMCP server."""
        for tool in self.tools.values():
            # Tools return ready-made content blocks, so no output schema is derived.
            server.add_tool(tool.execute, name=tool.name, description=tool.description, structured_output=False)
        console.success(f"Tool registration complete. Serving {len(self.tools)} tools: {self.names()}")
