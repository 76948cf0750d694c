"""
World News MCP Server (stdio)
=============================
Serves the tool catalog over the MCP stdio transport. The SDK session owns
framing, the initialize handshake and notifications; tool calls go through
the same Dispatcher as the HTTP transport and failures surface as JSON-RPC
errors with the same codes.

Start manually:
    python -m world_news_mcp.mcp_server.server
"""

import logging
import sys

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from world_news_mcp import __version__
from world_news_mcp.mcp_server.dispatcher import Dispatcher
from world_news_mcp.mcp_server.protocol import FAILURE_CODES, SERVER_NAME, text_content
from world_news_mcp.shared.models import Failure

logger = logging.getLogger("world-news-mcp")


def create_server(dispatcher: Dispatcher) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        logger.info("tools/list requested")
        return [types.Tool.model_validate(d) for d in dispatcher.list_tools()]

    # Registered directly rather than through @server.call_tool(), which
    # reports failures as isError results instead of JSON-RPC errors.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        logger.info("tools/call requested for tool: %s", name)
        result = await dispatcher.dispatch(name, request.params.arguments)

        if isinstance(result, Failure):
            raise McpError(
                types.ErrorData(code=FAILURE_CODES[result.kind], message=result.message, data=result.data or None)
            )
        return types.ServerResult(types.CallToolResult.model_validate(text_content(result.payload)))

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(dispatcher: Dispatcher) -> None:
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("World News API MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    from world_news_mcp.main import main

    sys.exit(main(["stdio"]))
