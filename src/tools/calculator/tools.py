"""Calculator provider tools."""

import sys

from src.mcp.models import TextContent, ToolArguments
from src.mcp.registry import ToolRegistry
from src.tools.base import register_module_tools, tool


class AddArguments(ToolArguments):
    a: float
    b: float


@tool(
    name="add",
    description="Adds two numbers together",
    input_schema={
        "type": "object",
        "properties": {
            "a": {
                "type": "number",
                "description": "First number to add",
            },
            "b": {
                "type": "number",
                "description": "Second number to add",
            },
        },
        "required": ["a", "b"],
    },
    arguments=AddArguments,
)
def add_handler(args: AddArguments) -> list[TextContent]:
    """Handle the add tool call."""
    total = args.a + args.b
    return [TextContent(text=f"{args.a:.2f} + {args.b:.2f} = {total:.2f}")]


def register_tools(registry: ToolRegistry) -> None:
    """Register all calculator provider tools with the registry."""
    register_module_tools(registry, sys.modules[__name__])
