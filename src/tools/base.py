"""Tool decorator and registration helper for provider modules."""

from types import ModuleType
from typing import Any, Callable, TypeVar
import functools

from src.mcp.models import TextContent, ToolArguments
from src.mcp.registry import ToolRegistry

A = TypeVar("A", bound=ToolArguments)


def tool(
    name: str,
    description: str,
    input_schema: dict[str, Any],
    arguments: type[A],
) -> Callable[[Callable[[A], list[TextContent]]], Callable[[A], list[TextContent]]]:
    """
    Decorator to mark a function as an MCP tool.

    Usage:
        class EchoArguments(ToolArguments):
            message: str

        @tool(
            name="echo",
            description="Echoes the message",
            input_schema={
                "type": "object",
                "properties": {"message": {"type": "string"}},
                "required": ["message"],
            },
            arguments=EchoArguments,
        )
        def echo(args: EchoArguments) -> list[TextContent]:
            return [TextContent(text=args.message)]

    ``input_schema`` is what tools/list advertises; ``arguments`` is the
    model incoming arguments are validated against before the call.
    The decorated function will have _tool_metadata attached.
    """
    def decorator(
        func: Callable[[A], list[TextContent]]
    ) -> Callable[[A], list[TextContent]]:
        @functools.wraps(func)
        def wrapper(args: A) -> list[TextContent]:
            return func(args)

        # Attach metadata for registration
        wrapper._tool_metadata = {  # type: ignore
            "name": name,
            "description": description,
            "input_schema": input_schema,
            "arguments_model": arguments,
        }
        return wrapper

    return decorator


def get_tool_metadata(
    func: Callable
) -> dict[str, Any] | None:
    """Get tool metadata from a decorated function."""
    return getattr(func, "_tool_metadata", None)


def register_module_tools(registry: ToolRegistry, module: ModuleType) -> int:
    """Register every @tool function defined in a module. Returns the count."""
    count = 0
    for value in vars(module).values():
        metadata = get_tool_metadata(value)
        if metadata is None:
            continue
        registry.register(handler=value, **metadata)
        count += 1
    return count
