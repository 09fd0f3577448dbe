"""Stdio MCP server that forwards tool calls to the remote FootballBin API."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any

import httpx
import mcp.server.stdio
from mcp.server import Server
from mcp.types import TextContent, Tool

from footballbin_mcp.config import get_settings
from footballbin_mcp.errors import BridgeError
from footballbin_mcp.protocol import TOOL_INPUT_SCHEMA, TOOL_NAME, TOOLS

# stdout carries the protocol; logging.basicConfig writes to stderr
logger = logging.getLogger(__name__)

server = Server("footballbin-mcp-server")


def extract_result(data: dict[str, Any]) -> Any:
    """Unwrap a JSON-RPC response into the tool payload."""
    if data.get("error"):
        raise BridgeError(data["error"].get("message") or "API error")

    result = data.get("result")
    if not isinstance(result, dict):
        return result

    if result.get("structuredContent"):
        return result["structuredContent"]

    content = result.get("content") or []
    if content and isinstance(content[0], dict) and content[0].get("text"):
        text = content[0]["text"]
        try:
            return json.loads(text)
        except ValueError:
            # isError results carry a plain-text message
            if result.get("isError"):
                raise BridgeError(text)
            raise BridgeError(f"Invalid tool result: {text[:200]}")

    return result


async def call_remote_api(
    arguments: dict[str, Any],
    client: httpx.AsyncClient | None = None,
    endpoint: str | None = None,
) -> Any:
    """Send one ``tools/call`` request and return the unwrapped result. No retries."""
    endpoint = endpoint or get_settings().api_endpoint
    payload = {
        "jsonrpc": "2.0",
        "method": "tools/call",
        "params": {"name": TOOL_NAME, "arguments": arguments},
        "id": int(time.time() * 1000),
    }

    async def _post(c: httpx.AsyncClient) -> httpx.Response:
        return await c.post(endpoint, json=payload, headers={"Content-Type": "application/json"})

    if client is None:
        async with httpx.AsyncClient() as c:
            response = await _post(c)
    else:
        response = await _post(client)

    if response.is_error:
        raise BridgeError(f"API request failed: {response.status_code} {response.reason_phrase}")

    return extract_result(response.json())


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(name=t["name"], description=t["description"], inputSchema=TOOL_INPUT_SCHEMA)
        for t in TOOLS
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    if name != TOOL_NAME:
        raise BridgeError(f"Unknown tool: {name}")
    try:
        result = await call_remote_api(arguments or {})
    except httpx.HTTPError as e:
        logger.error(f"Remote call failed: {e}")
        raise BridgeError(f"API request failed: {e}") from e
    return [TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]


async def run() -> None:
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("FootballBin MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    logging.basicConfig(level=get_settings().log_level)
    try:
        asyncio.run(run())
    except Exception:
        logger.critical("Fatal error", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
