"""Error types shared by the server and the bridge."""

from typing import Any

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class PredictionsError(Exception):
    """Base class for tool-level failures reported as ``isError`` results."""


class NotFound(PredictionsError):
    """The query was valid but matched no matchweek or no matches."""


class InvalidArguments(PredictionsError):
    """Tool arguments could not be turned into a query."""


class JsonRpcError(Exception):
    """Envelope-level failure carried as a JSON-RPC error object."""

    def __init__(self, code: int, message: str, request_id: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.request_id = request_id

    def to_response(self) -> dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": self.request_id,
            "error": {"code": self.code, "message": self.message},
        }


class BridgeError(Exception):
    """The remote endpoint could not serve a forwarded tool call."""
