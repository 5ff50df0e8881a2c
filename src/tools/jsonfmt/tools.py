"""JSON formatting provider tools."""

import json
import sys

from src.mcp.errors import InvalidParamsError
from src.mcp.jsonrpc import loads_strict
from src.mcp.models import TextContent, ToolArguments
from src.mcp.registry import ToolRegistry
from src.tools.base import register_module_tools, tool


class FormatJsonArguments(ToolArguments):
    data: str


@tool(
    name="formatJSON",
    description="Formats and validates JSON data",
    input_schema={
        "type": "object",
        "properties": {
            "data": {
                "type": "string",
                "description": "JSON string to format",
            },
        },
        "required": ["data"],
    },
    arguments=FormatJsonArguments,
)
def format_json_handler(args: FormatJsonArguments) -> list[TextContent]:
    """Handle the formatJSON tool call."""
    try:
        parsed = loads_strict(args.data)
        # Out-of-range numbers decode to inf and cannot be written back
        formatted = json.dumps(
            parsed, indent=2, sort_keys=True, ensure_ascii=False, allow_nan=False
        )
    except (ValueError, RecursionError) as e:
        raise InvalidParamsError("Invalid JSON", data=str(e)) from e
    return [TextContent(text=formatted)]


def register_tools(registry: ToolRegistry) -> None:
    """Register all JSON formatting tools with the registry."""
    register_module_tools(registry, sys.modules[__name__])
