"""Embedded MCP server - host-facing entrypoint.

A host builds the server once with ``startup()`` and then passes request
strings to ``handle_request()``, receiving one response string per call.
``python -m src.main`` runs the same boundary over stdin/stdout, one JSON
request per line.
"""

import sys
import threading

from src.config.loader import Settings, get_settings, load_tools_config, get_enabled_providers
from src.mcp.registry import build_registry
from src.mcp.handlers import MCPHandlers
from src.mcp.jsonrpc import JsonRpcProcessor
from src.utils.logging import setup_logging, set_request_id, get_logger

# Set once startup() completes
server_ready = False

_processor: JsonRpcProcessor | None = None
# Calls are resolved one at a time
_lock = threading.Lock()


def create_processor(settings: Settings) -> JsonRpcProcessor:
    """Build the registry and the request processor for the given settings."""
    log = get_logger("startup")

    config = load_tools_config(settings.tools_config_path or None)
    enabled_providers = get_enabled_providers(config)
    log.info("Loading providers", providers=enabled_providers)

    registry = build_registry(enabled_providers)
    log.info(
        "Tool registry ready",
        tool_count=registry.tool_count,
        provider_count=registry.provider_count,
    )
    return JsonRpcProcessor(MCPHandlers(registry, settings))


def startup(settings: Settings | None = None) -> None:
    """Initialise logging, tools and the processor, then flag readiness."""
    global _processor, server_ready

    settings = settings or get_settings()
    setup_logging(settings)
    get_logger("startup").info(
        "Starting MCP server",
        server_name=settings.server_name,
        version=settings.server_version,
    )

    with _lock:
        _processor = create_processor(settings)
        server_ready = True
    get_logger("startup").info("MCP server initialized and ready")


def handle_request(request_json: str) -> str:
    """The single exported operation: one request string in, one response out."""
    if _processor is None:
        raise RuntimeError("MCP server is not initialized, call startup() first")

    with _lock:
        set_request_id()
        response = _processor.handle_request(request_json)
    get_logger("request").debug("Handled request", size=len(request_json))
    return response


def main() -> None:
    """Serve requests read line by line from stdin."""
    startup()
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        sys.stdout.write(handle_request(line) + "\n")
        sys.stdout.flush()
    get_logger("shutdown").info("Shutting down MCP server")


if __name__ == "__main__":
    main()
