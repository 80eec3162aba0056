# The module provides the stdio entry point of the o3-search MCP server.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

import sys
from mcp.server.fastmcp import FastMCP
from o3_search_mcp.core.config import Settings, load_settings
from o3_search_mcp.core.tool_registry import ToolRegistry
from o3_search_mcp.services.llm_connector import O3SearchConnector
from o3_search_mcp.tools.o3_search_tool import O3SearchTool
from o3_search_mcp.utils.logger import console

SERVER_NAME = "o3-search-mcp"


def create_server(settings: Settings) -> FastMCP:
    """
    Builds the MCP server with the o3-search tool wired to a single shared
    OpenAI connector.
    """
    server = FastMCP(SERVER_NAME)
    connector = O3SearchConnector(settings)
    registry = ToolRegistry([O3SearchTool(connector)])
    registry.mount(server)
    return server


def main():
    try:
        settings = load_settings()
        console.set_level(settings.LOG_LEVEL)
        console.rule(SERVER_NAME)
        console.display_data_as_table(settings.summary(), title="Configuration")

        server = create_server(settings)
        console.info("o3-search MCP server running on stdio")
        server.run(transport="stdio")
    except Exception:
        console.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
