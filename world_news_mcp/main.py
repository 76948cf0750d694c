"""
main.py: launcher
=================
Starts the gateway on one transport.

Usage:
    world-news-mcp            # stdio (default)
    world-news-mcp stdio
    world-news-mcp http       # listens on $PORT (default 8080)
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from world_news_mcp.api import create_app
from world_news_mcp.mcp_server.dispatcher import build_dispatcher
from world_news_mcp.mcp_server.server import run_stdio
from world_news_mcp.shared.config import settings
from world_news_mcp.shared.errors import ConfigurationError

logger = logging.getLogger("world-news-mcp")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="world-news-mcp", description="World News API MCP server")
    parser.add_argument("transport", nargs="?", choices=("stdio", "http"), default="stdio")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings.require_api_key()
        dispatcher = build_dispatcher()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    if args.transport == "http":
        logger.info("MCP HTTP server listening on %s:%s", args.host, args.port)
        uvicorn.run(create_app(dispatcher), host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())
        return 0

    try:
        asyncio.run(run_stdio(dispatcher))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
