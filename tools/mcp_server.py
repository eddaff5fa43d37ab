# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes every entry of the tool catalog (core/catalog.py) on a FastMCP
#   server.  Each published tool is a thin CatalogTool that forwards the call
#   to the Dispatcher and converts its ToolResult into the MCP envelope.
#
# HOW IT WORKS (the flow):
#   1. The MCP client sends tools/list  → FastMCP answers from the CatalogTools
#      registered below, in catalog order, with the catalog's JSON schemas
#   2. The MCP client sends tools/call  → FastMCP routes to CatalogTool.run()
#   3. run() awaits Dispatcher.dispatch(name, arguments)
#   4. The text comes back as a single TextContent block; results the
#      dispatcher flagged as errors are raised as ToolError, which FastMCP
#      reports with isError=true
#
# RUNNING THIS SERVER:
#   python main.py   (or the `streamersonglist-mcp` console script)
#   The client connects via stdio transport.
# =============================================================================

from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from core.config import ServerConfig
from core.models import ToolDefinition
from tools.dispatcher import Dispatcher


class CatalogTool(Tool):
    """A catalog entry exposed over MCP, backed by the Dispatcher."""

    _dispatcher: Dispatcher = PrivateAttr()

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: Dispatcher) -> "CatalogTool":
        tool = cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        result = await self._dispatcher.dispatch(self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return MCPToolResult(content=[TextContent(type="text", text=result.text)])


def create_server(config: ServerConfig, dispatcher: Optional[Dispatcher] = None) -> FastMCP:
    """Build a FastMCP server publishing the whole tool catalog.

    Args:
        config: The process configuration; supplies the server name and the
            upstream client settings.
        dispatcher: Optional pre-built dispatcher (tests inject one with a
            stub client).

    Returns:
        A FastMCP instance ready for ``run()``.
    """
    dispatcher = dispatcher or Dispatcher(config)
    mcp = FastMCP(config.server_name)
    for definition in dispatcher.list_tools():
        mcp.add_tool(CatalogTool.from_definition(definition, dispatcher))
    return mcp
