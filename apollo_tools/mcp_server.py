# =============================================================================
# apollo_tools/mcp_server.py  -  FastMCP Tool Server (all Apollo tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers one CatalogTool per entry in
#   adapter.TOOL_CATALOG.  A CatalogTool advertises the catalog's input schema
#   as-is and hands the caller's raw arguments to ApolloToolAdapter.invoke(),
#   so the adapter's pydantic models are the only validation layer.
#
# HOW IT WORKS (the flow):
#   1. The MCP client lists tools and picks one (e.g. "apollo_search_people")
#   2. FastMCP routes the call to that tool's CatalogTool.run()
#   3. run() forwards the arguments dict unchanged to the adapter
#   4. The adapter validates, calls Apollo once, and formats the text reply
#   5. Errors surface as ToolError subclasses, which FastMCP reports as
#      tool-call errors with the message intact
#
# RUNNING THIS SERVER:
#   main.py builds the config and client, calls create_server(), then
#   server.run() on the stdio transport.
# =============================================================================

import logging
from typing import Any

from anyio import to_thread
from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from apollo_tools.adapter import ApolloToolAdapter, ToolDefinition

SERVER_NAME = "apollo-io-mcp"

logger = logging.getLogger(__name__)

# =============================================================================
# Logging helpers
# =============================================================================
# Logs go to STDERR (configured in main.py): stdout is the MCP transport and
# anything else written there corrupts the protocol stream.
#
#   CYAN    incoming tool calls with their arguments
#   YELLOW  status and failures
#   GREEN   response sizes
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    first_line = text.split("\n", 1)[0]
    logger.info(f"{_GREEN}  ← {tool_name}: {first_line} ({len(text)} chars){_RESET}")
    return text


def call_tool(adapter: ApolloToolAdapter, tool_name: str, arguments: dict[str, Any]) -> str:
    """Forward one MCP tool call to the adapter with its arguments untouched."""
    _log_request(tool_name, arguments)
    try:
        text = adapter.invoke(tool_name, arguments)
    except Exception as exc:
        _log_status(f"{tool_name} failed: {exc}")
        raise
    return _log_response(tool_name, text)


# =============================================================================
# Catalog-backed tool
# =============================================================================
class CatalogTool(Tool):
    """A FastMCP tool whose schema and behaviour come from a ToolDefinition."""

    _adapter: ApolloToolAdapter = PrivateAttr()

    @classmethod
    def from_definition(
        cls, definition: ToolDefinition, adapter: ApolloToolAdapter
    ) -> "CatalogTool":
        tool = cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema,
        )
        tool._adapter = adapter
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        # The adapter and its httpx client are synchronous
        text = await to_thread.run_sync(call_tool, self._adapter, self.name, arguments)
        return ToolResult(content=[TextContent(type="text", text=text)])


# =============================================================================
# Server factory
# =============================================================================
def create_server(adapter: ApolloToolAdapter) -> FastMCP:
    """Create the FastMCP server with every Apollo tool registered.

    Tools are added in catalog order, which is the order clients list them.
    """
    mcp = FastMCP(SERVER_NAME)
    for definition in adapter.list_tools():
        mcp.add_tool(CatalogTool.from_definition(definition, adapter))
    return mcp
