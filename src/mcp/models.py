"""Pydantic models for MCP JSON-RPC 2.0 protocol."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator


# =============================================================================
# JSON-RPC 2.0 Base Models
# =============================================================================

# Echoed back verbatim, so no coercion between number and string
RequestId = StrictInt | StrictFloat | StrictStr | None


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object."""

    model_config = {"allow_inf_nan": False}

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId = None
    method: StrictStr
    params: Any = None


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Omit ``data`` when there is none."""
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            data["data"] = self.data
        return data


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId = None
    result: Any = None
    error: JsonRpcError | None = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Custom serialization to exclude None fields appropriately."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


class Method(str, Enum):
    """Top-level methods this server answers."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


# =============================================================================
# MCP Content Types
# =============================================================================


class TextContent(BaseModel):
    """Text content returned by tools."""

    type: Literal["text"] = "text"
    text: str


class ImageContent(BaseModel):
    """Image content returned by tools (base64 encoded)."""

    type: Literal["image"] = "image"
    data: str  # base64 encoded
    mimeType: str


Content = Annotated[TextContent | ImageContent, Field(discriminator="type")]


# =============================================================================
# MCP Tool Models
# =============================================================================


class Tool(BaseModel):
    """MCP tool definition."""

    name: str = Field(..., description="Tool name, the sole dispatch key")
    description: str = Field(..., description="Human-readable description")
    inputSchema: dict[str, Any] = Field(
        ..., description="JSON Schema for tool input"
    )


class ToolCallResult(BaseModel):
    """Result of a tool call."""

    content: list[Content]
    isError: bool = False


class ToolArguments(BaseModel):
    """Base for per-tool argument models; types are checked, never coerced."""

    model_config = {"strict": True, "extra": "ignore", "allow_inf_nan": False}


class NoArguments(ToolArguments):
    """Arguments of a tool that takes none."""


# =============================================================================
# MCP Protocol Models
# =============================================================================


class ClientInfo(BaseModel):
    """Client information sent during initialization."""

    name: str
    version: str


class ServerInfo(BaseModel):
    """Server information returned during initialization."""

    name: str
    version: str


class Capabilities(BaseModel):
    """Server capabilities."""

    tools: dict[str, Any] = Field(default_factory=dict)


class InitializeParams(BaseModel):
    """Parameters for initialize request."""

    protocolVersion: str
    capabilities: dict[str, Any] = Field(default_factory=dict)
    clientInfo: ClientInfo


class InitializeResult(BaseModel):
    """Result of initialize request."""

    protocolVersion: str
    serverInfo: ServerInfo
    capabilities: Capabilities


class ToolsListResult(BaseModel):
    """Result of tools/list request."""

    tools: list[Tool]


class ToolCallParams(BaseModel):
    """Parameters for tools/call request."""

    name: StrictStr
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def null_arguments_are_empty(cls, value: Any) -> Any:
        return {} if value is None else value
