"""
JSON-RPC handler for the HTTP transport.

Routes tools/list and tools/call; any other method is "method not found".
Takes one decoded message and always returns a response envelope. The
failure-code mapping and result wrapping are shared with the stdio server.
"""

import json
import logging
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from world_news_mcp.mcp_server.dispatcher import Dispatcher
from world_news_mcp.shared.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
)
from world_news_mcp.shared.models import (
    CallToolParams,
    Failure,
    JsonRpcRequest,
    error_response,
    success_response,
)

logger = logging.getLogger("world-news-mcp")

SERVER_NAME = "world-news-api-mcp"

FAILURE_CODES = {
    "unknown_tool": METHOD_NOT_FOUND,
    "invalid_arguments": INVALID_PARAMS,
    "upstream_error": INTERNAL_ERROR,
    "configuration_error": INTERNAL_ERROR,
    "internal_error": INTERNAL_ERROR,
}


def text_content(payload: Any) -> dict[str, Any]:
    result = CallToolResult(
        content=[TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))],
        isError=False,
    )
    return result.model_dump(by_alias=True, exclude_none=True)


class JsonRpcHandler:
    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    async def handle(self, message: Any) -> dict[str, Any]:
        request_id = message.get("id") if isinstance(message, dict) else None

        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError:
            logger.warning("rejected envelope id=%s", request_id)
            return error_response(request_id, INVALID_REQUEST, "Invalid Request")

        try:
            return await self._route(request)
        except Exception as exc:
            logger.exception("error handling %s id=%s", request.method, request.id)
            return error_response(request.id, INTERNAL_ERROR, str(exc) or exc.__class__.__name__)

    async def _route(self, request: JsonRpcRequest) -> dict[str, Any]:
        if request.method == "tools/list":
            logger.info("tools/list requested")
            return success_response(request.id, {"tools": self.dispatcher.list_tools()})

        if request.method == "tools/call":
            return await self._call_tool(request.id, request.params or {})

        logger.warning("Unknown method: %s", request.method)
        return error_response(request.id, METHOD_NOT_FOUND, f"Unknown method: {request.method}")

    async def _call_tool(self, request_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        try:
            call = CallToolParams.model_validate(params)
        except ValidationError:
            return error_response(request_id, INVALID_PARAMS, "Invalid params: tools/call requires a string 'name'")

        logger.info("tools/call requested for tool: %s", call.name)
        result = await self.dispatcher.dispatch(call.name, call.arguments)

        if isinstance(result, Failure):
            return error_response(request_id, FAILURE_CODES[result.kind], result.message, result.data or None)
        return success_response(request_id, text_content(result.payload))
