# main.py
import sys
import asyncio

from mcp.server.fastmcp import FastMCP
from mcp.server.stdio import stdio_server

from routes.code_execution import register_tools
from utils.util import log

SERVER_NAME = "rapidapi-code-execution"


def create_server() -> FastMCP:
    server = FastMCP(SERVER_NAME)
    register_tools(server)
    return server


async def main():
    server = create_server()
    # FastMCP.run_stdio_async, with the startup line once the transport is up
    lowlevel = server._mcp_server
    async with stdio_server() as (read_stream, write_stream):
        log("RapidAPI Code Execution MCP Server running on stdio")
        await lowlevel.run(read_stream, write_stream, lowlevel.create_initialization_options())


def run():
    try:
        asyncio.run(main())
    except Exception as e:
        log(f"Fatal error in main: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
