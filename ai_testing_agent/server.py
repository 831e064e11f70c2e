"""
ai-testing-agent MCP server.

Serves the scan / generate / run tools over stdio. Tool logic lives in
``handlers``; this module only lists the tools and dispatches calls.

Run with ``python -m ai_testing_agent.server``.
"""

from __future__ import annotations

import asyncio
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from .handlers.core import HANDLERS, TOOLS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

server = Server("ai-testing-agent")


@server.list_tools()
async def list_tools():
    return TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Dispatch a tool call by name."""
    logger.info(f"Tool called: {name}")

    handler = HANDLERS.get(name)
    if handler is None:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    return await handler(arguments or {})


async def run_server():
    logger.info(f"Starting AI Testing Agent MCP server with tools: {', '.join(t.name for t in TOOLS)}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
