"""Tool registry for managing MCP tools."""

import importlib
import logging
from typing import Any, Callable

from pydantic import ValidationError

from src.mcp.errors import InvalidParamsError, McpError
from src.mcp.models import Tool, TextContent, ToolArguments, ToolCallResult

logger = logging.getLogger(__name__)

# Type alias for tool handlers
ToolHandler = Callable[[Any], list[TextContent]]


class ToolDefinition:
    """A registered tool with its metadata and handler."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        arguments_model: type[ToolArguments],
        handler: ToolHandler,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.arguments_model = arguments_model
        self.handler = handler

    def to_mcp_tool(self) -> Tool:
        """Convert to MCP Tool model for protocol responses."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    def parse_arguments(self, arguments: dict[str, Any]) -> ToolArguments:
        """Check presence and type of every declared argument."""
        try:
            return self.arguments_model.model_validate(arguments)
        except ValidationError as e:
            details = [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors(include_url=False)
            ]
            raise InvalidParamsError(
                f"Invalid arguments for tool '{self.name}'", data=details
            ) from e


class ToolRegistry:
    """
    Name-keyed table of tools, built once and then sealed.

    Providers live in ``src/tools/<provider_name>/tools.py`` and expose a
    ``register_tools(registry)`` function.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._providers: set[str] = set()
        self._sealed = False

    def register(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        arguments_model: type[ToolArguments],
        handler: ToolHandler,
    ) -> None:
        """Register a tool with the registry. Last registration wins."""
        if self._sealed:
            raise RuntimeError(f"Registry is sealed, cannot register '{name}'")
        if name in self._tools:
            logger.warning(f"Tool '{name}' already registered, overwriting")
        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            arguments_model=arguments_model,
            handler=handler,
        )
        logger.info(f"Registered tool: {name}")

    def seal(self) -> None:
        """Freeze the registry; no tools can be added afterwards."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools as MCP Tool models."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """
        Call a tool by name with the given arguments.

        Raises InvalidParamsError for an unknown tool or bad arguments.
        Other handler failures come back as a result with isError set.
        """
        tool = self.get(name)
        if tool is None:
            raise InvalidParamsError(f"Unknown tool: {name}")

        parsed = tool.parse_arguments(arguments)
        try:
            content = tool.handler(parsed)
        except McpError:
            raise
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return ToolCallResult(
                content=[TextContent(text=f"Tool execution error: {str(e)}")],
                isError=True,
            )
        return ToolCallResult(content=content, isError=False)

    def load_provider(self, provider_name: str) -> bool:
        """
        Load a provider module and register its tools.

        Providers are expected to be in src/tools/<provider_name>/
        and have a register_tools(registry) function.
        """
        if provider_name in self._providers:
            logger.debug(f"Provider '{provider_name}' already loaded")
            return True

        module_path = f"src.tools.{provider_name}.tools"
        try:
            module = importlib.import_module(module_path)
            if hasattr(module, "register_tools"):
                module.register_tools(self)
                self._providers.add(provider_name)
                logger.info(f"Loaded provider: {provider_name}")
                return True
            else:
                logger.warning(
                    f"Provider '{provider_name}' has no register_tools function"
                )
                return False
        except ImportError as e:
            logger.warning(f"Could not import provider '{provider_name}': {e}")
            return False
        except Exception as e:
            logger.error(f"Error loading provider '{provider_name}': {e}")
            return False

    def load_providers(self, provider_names: list[str]) -> dict[str, bool]:
        """Load multiple providers, returning success status for each."""
        results = {}
        for name in provider_names:
            results[name] = self.load_provider(name)
        return results

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)

    @property
    def provider_count(self) -> int:
        """Return the number of loaded providers."""
        return len(self._providers)


def build_registry(provider_names: list[str]) -> ToolRegistry:
    """Create a registry, load the given providers and seal it."""
    registry = ToolRegistry()
    registry.load_providers(provider_names)
    registry.seal()
    return registry
