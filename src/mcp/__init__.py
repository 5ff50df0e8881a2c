"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0."""

from src.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Method,
    Tool,
    TextContent,
    ToolArguments,
    ToolCallResult,
)
from src.mcp.registry import ToolRegistry, build_registry
from src.mcp.errors import (
    PARSE_ERROR,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
    McpError,
    InvalidParamsError,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Method",
    "Tool",
    "TextContent",
    "ToolArguments",
    "ToolCallResult",
    "ToolRegistry",
    "build_registry",
    "PARSE_ERROR",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "McpError",
    "InvalidParamsError",
]
