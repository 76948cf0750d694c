"""
Dispatcher
==========
The single chokepoint both transports go through to run a tool:
resolve the name, validate the arguments, call the upstream endpoint.
Always returns a DispatchResult, never raises.
"""

import logging
from typing import Any, Protocol

from world_news_mcp.mcp_server.registry import ArgumentsError, ToolRegistry
from world_news_mcp.shared.errors import ConfigurationError, UpstreamError
from world_news_mcp.shared.models import DispatchResult, Failure, Success

logger = logging.getLogger("world-news-dispatcher")


class UpstreamClient(Protocol):
    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any: ...


class Dispatcher:
    def __init__(self, registry: ToolRegistry, client: UpstreamClient):
        self.registry = registry
        self.client = client

    def list_tools(self) -> list[dict[str, Any]]:
        return self.registry.descriptors()

    async def dispatch(self, tool_name: str, raw_args: Any) -> DispatchResult:
        tool = self.registry.get(tool_name)
        if tool is None:
            logger.warning("tool_call unknown tool=%s", tool_name)
            return Failure("unknown_tool", f"Tool not found: {tool_name}")

        try:
            args = tool.validate(raw_args)
        except ArgumentsError as exc:
            logger.warning("tool_call invalid_arguments tool=%s error=%s", tool_name, exc)
            return Failure("invalid_arguments", str(exc), {"errors": exc.errors})

        logger.info("tool_call tool=%s endpoint=%s args=%s", tool_name, tool.endpoint, args)

        try:
            payload = await self.client.get(tool.endpoint, args)
        except UpstreamError as exc:
            logger.warning("tool_call upstream_error tool=%s error=%s", tool_name, exc)
            return Failure("upstream_error", f"World News API request failed: {exc}", exc.details())
        except ConfigurationError as exc:
            logger.error("tool_call configuration_error tool=%s error=%s", tool_name, exc)
            return Failure("configuration_error", str(exc))
        except Exception as exc:
            logger.exception("tool_call failed unexpectedly tool=%s", tool_name)
            return Failure("internal_error", str(exc) or exc.__class__.__name__)

        return Success(payload)


def build_dispatcher(client: UpstreamClient | None = None) -> Dispatcher:
    """Wire the default catalog to a World News client built from settings."""
    from world_news_mcp.mcp_server.tools import build_registry
    from world_news_mcp.shared.news_client import WorldNewsClient

    return Dispatcher(build_registry(), client or WorldNewsClient())
