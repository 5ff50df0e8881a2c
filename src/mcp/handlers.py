"""MCP method handlers for JSON-RPC requests."""

import logging
from typing import Any, Callable

from pydantic import ValidationError

from src.mcp.models import (
    InitializeParams,
    InitializeResult,
    Method,
    ServerInfo,
    Capabilities,
    ToolsListResult,
    ToolCallParams,
)
from src.mcp.registry import ToolRegistry
from src.mcp.errors import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    InvalidParamsError,
    McpError,
    make_error_data,
)
from src.config.loader import Settings

logger = logging.getLogger(__name__)


class MCPHandlers:
    """Handlers for MCP protocol methods."""

    def __init__(self, registry: ToolRegistry, settings: Settings):
        self.registry = registry
        self.settings = settings
        self._handlers: dict[Method, Callable[[Any], dict[str, Any]]] = {
            Method.INITIALIZE: self.handle_initialize,
            Method.TOOLS_LIST: self.handle_tools_list,
            Method.TOOLS_CALL: self.handle_tools_call,
        }

    def handle_initialize(self, params: Any) -> dict[str, Any]:
        """Handle the initialize request."""
        if params is not None:
            try:
                init_params = InitializeParams.model_validate(params)
                logger.info(
                    f"Initialize from client {init_params.clientInfo.name} "
                    f"{init_params.clientInfo.version}"
                )
            except ValidationError as e:
                # Client params are informational only
                logger.debug(f"Ignoring unrecognised initialize params: {e}")

        result = InitializeResult(
            protocolVersion=self.settings.protocol_version,
            serverInfo=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
            capabilities=Capabilities(tools={}),
        )
        return result.model_dump()

    def handle_tools_list(self, params: Any) -> dict[str, Any]:
        """Handle the tools/list request."""
        tools = self.registry.list_tools()
        result = ToolsListResult(tools=tools)
        return result.model_dump()

    def handle_tools_call(self, params: Any) -> dict[str, Any]:
        """Handle the tools/call request."""
        try:
            call_params = ToolCallParams.model_validate(params)
        except ValidationError as e:
            logger.warning(f"Invalid tools/call params: {e}")
            raise InvalidParamsError(
                data=[err["msg"] for err in e.errors(include_url=False)]
            ) from e

        logger.info(f"Calling tool: {call_params.name}")
        result = self.registry.call_tool(call_params.name, call_params.arguments)
        return result.model_dump()

    def dispatch(
        self, method: str, params: Any
    ) -> tuple[Any | None, dict[str, Any] | None]:
        """
        Dispatch a method call to the appropriate handler.

        Returns (result, error) tuple. One will be None.
        """
        try:
            handler = self._handlers[Method(method)]
        except ValueError:
            return None, make_error_data(METHOD_NOT_FOUND, data={"method": method})

        try:
            return handler(params), None
        except McpError as e:
            return None, e.to_error_data()
        except Exception as e:
            logger.exception(f"Error handling method {method}")
            return None, make_error_data(
                INTERNAL_ERROR, f"Error processing request: {str(e)}"
            )
