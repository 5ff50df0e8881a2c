"""Clock provider tools - reads the wall clock."""

import sys

from src.mcp.models import NoArguments, TextContent
from src.mcp.registry import ToolRegistry
from src.tools.base import register_module_tools, tool
from src.tools.clock.client import get_client


@tool(
    name="getCurrentTime",
    description="Returns the current time in RFC3339 format",
    input_schema={
        "type": "object",
        "properties": {},
        "required": [],
    },
    arguments=NoArguments,
)
def get_current_time_handler(args: NoArguments) -> list[TextContent]:
    """Handle the getCurrentTime tool call."""
    return [TextContent(text=get_client().now_rfc3339())]


def register_tools(registry: ToolRegistry) -> None:
    """Register all clock provider tools with the registry."""
    register_module_tools(registry, sys.modules[__name__])
