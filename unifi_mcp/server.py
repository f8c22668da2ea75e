"""MCP stdio server exposing the UniFi tool catalogue.

stdout carries the MCP JSON-RPC stream, so all logging goes to stderr.
"""
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .client import UnifiClient
from .config import Settings, load_settings
from .tools import ToolRegistry, ToolResult, execute_tool, tool_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "unifi-network-mcp"


def list_tool_specs(registry: ToolRegistry = tool_registry) -> List[types.Tool]:
    return [
        types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())
        for tool in registry
    ]


def to_call_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.to_text())],
        isError=result.is_error,
    )


def build_server(client: UnifiClient, registry: ToolRegistry = tool_registry) -> Server:
    """Create the MCP server bound to one UniFi client."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_tool_specs(registry)

    # Input validation stays with the binder so error text is consistent
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        result = await execute_tool(name, arguments, client, registry=registry)
        return to_call_result(result)

    return server


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


async def serve(settings: Settings) -> None:
    async with UnifiClient(settings) as client:
        server = build_server(client)
        groups = tool_registry.by_category()
        logger.info(f"Serving {len(tool_registry)} tools in {len(groups)} groups: {', '.join(sorted(groups))}")
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"UniFi Network MCP server running on stdio (v{__version__})")
            await server.run(read_stream, write_stream, server.create_initialization_options())


async def main() -> None:
    configure_logging()
    settings = load_settings()
    logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))
    await serve(settings)


def run() -> None:
    """Console entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
