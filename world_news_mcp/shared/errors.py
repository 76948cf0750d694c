"""
Error taxonomy shared by the upstream client, the dispatcher and both
transports. JSON-RPC codes follow the MCP type definitions.
"""

from typing import Any

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR

__all__ = [
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "GatewayError",
    "ConfigurationError",
    "UpstreamError",
    "UpstreamUnreachable",
    "UpstreamAuthError",
    "UpstreamHTTPError",
    "UpstreamMalformedResponse",
]


class GatewayError(RuntimeError):
    pass


class ConfigurationError(GatewayError):
    """Missing or invalid process configuration. Fatal at startup."""


class UpstreamError(GatewayError):
    """Any failure talking to the World News API."""

    status: int | None = None
    body: str | None = None

    def details(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.status is not None:
            data["status"] = self.status
        if self.body is not None:
            data["body"] = self.body
        return data


class UpstreamUnreachable(UpstreamError):
    pass


class UpstreamHTTPError(UpstreamError):
    def __init__(self, status: int, body: str):
        super().__init__(f"World News API error ({status}): {body}")
        self.status = status
        self.body = body


class UpstreamAuthError(UpstreamHTTPError):
    pass


class UpstreamMalformedResponse(UpstreamError):
    pass
