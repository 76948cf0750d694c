"""
World News MCP HTTP transport (FastAPI)
=======================================
Endpoints:
    GET  /health   liveness
    POST /mcp      JSON-RPC 2.0 (tools/list, tools/call)

Every outcome, errors included, is returned with HTTP 200 and a JSON-RPC
body; the JSON-RPC `error.code` is the only failure signal.

Run:
    world-news-mcp http
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from world_news_mcp import __version__
from world_news_mcp.mcp_server.dispatcher import Dispatcher, build_dispatcher
from world_news_mcp.mcp_server.protocol import JsonRpcHandler
from world_news_mcp.shared.errors import INTERNAL_ERROR, PARSE_ERROR
from world_news_mcp.shared.models import HealthResponse, error_response
from world_news_mcp.shared.request_context import get_request_id, install_request_context, note_rpc_method

logger = logging.getLogger("world-news-http")


def create_app(dispatcher: Dispatcher | None = None) -> FastAPI:
    handler = JsonRpcHandler(dispatcher or build_dispatcher())

    app = FastAPI(
        title="World News API MCP",
        description="World News API tools exposed over JSON-RPC",
        version=__version__,
    )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse()

    @app.post("/mcp")
    async def mcp(request: Request):
        raw = await request.body()
        try:
            message = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("unparsable body request_id=%s", get_request_id())
            return JSONResponse(error_response(None, PARSE_ERROR, "Parse error"))

        method = message.get("method") if isinstance(message, dict) else None
        note_rpc_method(method if isinstance(method, str) else None)
        logger.info("Incoming MCP request method=%s request_id=%s", method, get_request_id())

        try:
            response = await handler.handle(message)
        except Exception as exc:
            logger.exception("Error handling MCP request")
            request_id = message.get("id") if isinstance(message, dict) else None
            response = error_response(request_id, INTERNAL_ERROR, str(exc) or exc.__class__.__name__)

        return JSONResponse(response)

    install_request_context(app, logger=logger)
    return app
