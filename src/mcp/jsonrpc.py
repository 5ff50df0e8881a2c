"""JSON-RPC 2.0 message processing."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from src.mcp.models import JsonRpcRequest, JsonRpcResponse, JsonRpcError
from src.mcp.handlers import MCPHandlers
from src.mcp.errors import INTERNAL_ERROR, PARSE_ERROR, make_error_data

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(raw: str) -> Any:
    """Decode standard JSON only; NaN and Infinity literals are refused."""
    return json.loads(raw, parse_constant=_reject_constant)


class JsonRpcProcessor:
    """Process JSON-RPC 2.0 messages, one request string at a time."""

    def __init__(self, handlers: MCPHandlers):
        self.handlers = handlers

    def parse_request(
        self, raw_data: str | bytes
    ) -> tuple[JsonRpcRequest | None, dict[str, Any] | None]:
        """
        Parse a JSON-RPC request from raw data.

        Returns (request, error) tuple. One will be None. Anything that
        does not decode into a request object is a parse error.
        """
        try:
            if isinstance(raw_data, bytes):
                raw_data = raw_data.decode("utf-8")
            data = loads_strict(raw_data)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            return None, make_error_data(PARSE_ERROR, data=f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            return None, make_error_data(
                PARSE_ERROR, data=f"Expected a JSON object, got {type(data).__name__}"
            )

        try:
            return JsonRpcRequest.model_validate(data), None
        except ValidationError as e:
            return None, make_error_data(
                PARSE_ERROR,
                data=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in e.errors(include_url=False)
                ],
            )

    def process_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """
        Process a validated JSON-RPC request.

        Requests without an id are answered too; the caller always waits
        for a response string.
        """
        result, error = self.handlers.dispatch(request.method, request.params)

        if error is not None:
            logger.info(f"Method {request.method} failed with code {error['code']}")
            return JsonRpcResponse(
                id=request.id,
                error=JsonRpcError(**error),
            )
        return JsonRpcResponse(
            id=request.id,
            result=result,
        )

    def handle_message(self, raw_data: str | bytes) -> JsonRpcResponse:
        """Handle a raw JSON-RPC message end-to-end."""
        request, parse_error = self.parse_request(raw_data)

        if parse_error is not None:
            # The id is unrecoverable when the payload does not decode
            logger.warning(f"Rejected request: {parse_error.get('data')}")
            return JsonRpcResponse(
                id=None,
                error=JsonRpcError(**parse_error),
            )

        return self.process_request(request)  # type: ignore

    def serialize_response(self, response: JsonRpcResponse) -> str:
        """Serialize a JSON-RPC response to JSON string."""
        return json.dumps(response.model_dump(), allow_nan=False)

    def handle_request(self, raw_data: str | bytes) -> str:
        """Take one request string, return one response string."""
        response = self.handle_message(raw_data)
        try:
            return self.serialize_response(response)
        except (TypeError, ValueError) as e:
            logger.exception("Response could not be encoded as JSON")
            return self.serialize_response(
                JsonRpcResponse(
                    id=response.id,
                    error=JsonRpcError(**make_error_data(INTERNAL_ERROR, data=str(e))),
                )
            )
