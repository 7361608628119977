# code_execution.py
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from schemas.models import Language
from utils.judge import execute

TOOL_NAME = "code_execution"
TOOL_DESCRIPTION = "Run code in various programming languages"


async def code_execution(
    source_code: Annotated[str, Field(description="A source code snippet")],
    language: Annotated[Language, Field(description="A name of the programming language")],
) -> str:
    return await execute(source_code, language)


def register_tools(server: FastMCP):
    server.add_tool(code_execution, name=TOOL_NAME, description=TOOL_DESCRIPTION)
