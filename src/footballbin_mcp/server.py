"""HTTP binding for the FootballBin MCP endpoint.

Every JSON-RPC response, errors included, goes out with HTTP 200 so the
caller can always read the error object.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from footballbin_mcp import errors
from footballbin_mcp.config import Settings, get_settings
from footballbin_mcp.database import MatchStore, close_db, init_db
from footballbin_mcp.errors import JsonRpcError
from footballbin_mcp.protocol import TOOLS, handle_request
from footballbin_mcp.resolver import Store

logger = logging.getLogger(__name__)

SERVER_NAME = "footballbin-mcp-server"


def create_app(store: Store | None = None, settings: Settings | None = None) -> Starlette:
    """Build the app; without an explicit store the PostgreSQL pool is used."""
    settings = settings or get_settings()
    use_database = store is None
    store = store or MatchStore(settings)

    @asynccontextmanager
    async def lifespan(app: Starlette):
        logger.info(f"Starting {SERVER_NAME}...")
        if use_database:
            await init_db()
        try:
            yield
        finally:
            logger.info(f"Shutting down {SERVER_NAME}...")
            if use_database:
                await close_db()

    async def mcp_endpoint(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200)

        body = await request.body()
        now = datetime.now(timezone.utc)
        try:
            response = await handle_request(body, store, now=now, settings=settings)
        except Exception as e:
            logger.error(f"Unhandled request error: {e}", exc_info=True)
            response = JsonRpcError(errors.INTERNAL_ERROR, "Internal error").to_response()
        return JSONResponse(response, status_code=200)

    async def health(_: Request) -> Response:
        return JSONResponse({"status": "ok", "server": SERVER_NAME, "tools": len(TOOLS)})

    return Starlette(
        debug=False,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        ],
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/mcp", mcp_endpoint, methods=["POST", "OPTIONS"]),
        ],
        lifespan=lifespan,
    )


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
