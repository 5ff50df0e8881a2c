"""Pytest configuration and fixtures."""

import json

import pytest
import structlog

from src import main as server_main
from src.config.loader import Settings, DEFAULT_PROVIDERS
from src.mcp.handlers import MCPHandlers
from src.mcp.jsonrpc import JsonRpcProcessor
from src.mcp.registry import ToolRegistry, build_registry


@pytest.fixture
def settings():
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def registry():
    """A sealed registry with the built-in providers."""
    return build_registry(DEFAULT_PROVIDERS)


@pytest.fixture
def empty_registry():
    """A fresh, unsealed registry."""
    return ToolRegistry()


@pytest.fixture
def processor(registry, settings):
    """Request processor wired to the built-in tools."""
    return JsonRpcProcessor(MCPHandlers(registry, settings))


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict = None, id: int = 1):
        request = {
            "jsonrpc": "2.0",
            "id": id,
            "method": method,
        }
        if params is not None:
            request["params"] = params
        return request
    return _make_request


@pytest.fixture
def rpc(processor):
    """Send a request object through the processor and decode the reply."""
    def _send(request: dict) -> dict:
        return json.loads(processor.handle_request(json.dumps(request)))
    return _send


@pytest.fixture(autouse=True)
def reset_host_boundary():
    """Leave the module-level host state as it was before each test."""
    yield
    server_main._processor = None
    server_main.server_ready = False
    structlog.reset_defaults()
