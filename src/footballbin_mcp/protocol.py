"""JSON-RPC 2.0 envelope for the prediction tool.

Envelope problems become JSON-RPC error objects. Anything that goes wrong
while the tool itself runs is reported as a successful result flagged
with ``isError`` so agents can read the message.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from footballbin_mcp import errors
from footballbin_mcp.config import Settings, get_settings
from footballbin_mcp.errors import JsonRpcError, PredictionsError
from footballbin_mcp.formatter import build_tool_result
from footballbin_mcp.models import ToolCallInput
from footballbin_mcp.resolver import Store, resolve_matches

logger = logging.getLogger(__name__)

TOOL_NAME = "get_match_predictions"

TOOL_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "league": {
            "type": "string",
            "description": 'League to get predictions for. Accepts: "premier_league", "epl", "pl", "champions_league", "ucl", "cl"',
        },
        "matchweek": {
            "type": "number",
            "description": "Matchweek number (optional, defaults to current matchweek)",
        },
        "home_team": {
            "type": "string",
            "description": 'Filter by home team name (optional, e.g., "chelsea", "arsenal", "man_utd")',
        },
        "away_team": {
            "type": "string",
            "description": 'Filter by away team name (optional, e.g., "liverpool", "wolves")',
        },
    },
    "required": ["league"],
}

TOOLS: list[dict[str, Any]] = [
    {
        "name": TOOL_NAME,
        "title": "Get AI Match Predictions",
        "description": (
            "Get AI-powered predictions for Premier League and Champions League matches including "
            "half-time score, full-time score, next goal scorer, and corner predictions. "
            "Real-time predictions available in FootballBin iOS app."
        ),
        "inputSchema": TOOL_INPUT_SCHEMA,
    }
]


def success_response(request_id: Any, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def text_result(text: str, *, is_error: bool, structured: Any = None) -> dict[str, Any]:
    result: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if structured is not None:
        result["structuredContent"] = structured
    result["isError"] = is_error
    return result


def parse_request(body: str | bytes | None) -> dict[str, Any]:
    """Decode and validate the envelope, raising JsonRpcError on any defect."""
    try:
        request = json.loads(body or "{}")
    except (ValueError, UnicodeDecodeError):
        raise JsonRpcError(errors.PARSE_ERROR, "Parse error: Invalid JSON")

    if not isinstance(request, dict):
        raise JsonRpcError(errors.INVALID_REQUEST, "Invalid request: expected a JSON object")

    request_id = request.get("id")
    if request.get("jsonrpc") != "2.0":
        raise JsonRpcError(errors.INVALID_REQUEST, "Invalid JSON-RPC version", request_id)
    if request_id is None:
        raise JsonRpcError(errors.INVALID_REQUEST, "Missing request ID")
    if not request.get("method"):
        raise JsonRpcError(errors.INVALID_PARAMS, "Missing method", request_id)
    return request


async def call_tool(
    store: Store,
    arguments: Any,
    now: datetime,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Run the prediction pipeline and wrap the outcome as a tool result."""
    try:
        tool_input = ToolCallInput.from_arguments(arguments)
        resolution = await resolve_matches(store, tool_input)
        payload = build_tool_result(resolution, now, settings)
    except PredictionsError as e:
        logger.info(f"Tool returned no result: {e}")
        return text_result(str(e), is_error=True)
    except Exception as e:
        logger.error(f"Tool error: {e}", exc_info=True)
        return text_result(str(e) or "Tool execution failed", is_error=True)

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return text_result(text, is_error=False, structured=payload)


async def dispatch(
    request: dict[str, Any],
    store: Store,
    now: datetime,
    settings: Settings | None = None,
) -> dict[str, Any]:
    request_id = request["id"]
    method = request["method"]
    params = request.get("params") or {}

    if method == "tools/list":
        return success_response(request_id, {"tools": TOOLS})

    if method == "tools/call":
        name = params.get("name") if isinstance(params, dict) else None
        if name != TOOL_NAME:
            raise JsonRpcError(errors.INVALID_PARAMS, f"Unknown tool: {name}", request_id)
        arguments = params.get("arguments") or {}
        return success_response(request_id, await call_tool(store, arguments, now, settings))

    raise JsonRpcError(errors.METHOD_NOT_FOUND, f"Method not found: {method}", request_id)


async def handle_request(
    body: str | bytes | None,
    store: Store,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Map one raw request body to one JSON-RPC response object."""
    now = now or datetime.now(timezone.utc)
    settings = settings or get_settings()
    try:
        request = parse_request(body)
        logger.info(f"MCP request: method={request['method']} id={request['id']}")
        return await dispatch(request, store, now, settings)
    except JsonRpcError as e:
        logger.info(f"JSON-RPC error {e.code}: {e.message}")
        return e.to_response()
