"""
Shared request/response models.
Used by the dispatcher, the JSON-RPC handler and the HTTP layer consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# ── Inbound envelope ────────────────────────────────────────────────────────

class JsonRpcRequest(BaseModel):
    """A single JSON-RPC 2.0 request or notification."""
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    id: str | int | None = None
    method: str = Field(..., min_length=1)
    params: dict[str, Any] | None = None


class CallToolParams(BaseModel):
    """`params` of a tools/call request."""
    model_config = ConfigDict(extra="ignore")

    name: str
    arguments: Any = None


# ── Outbound envelope ───────────────────────────────────────────────────────

def success_response(request_id: Any, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def error_response(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


# ── Dispatch outcome ────────────────────────────────────────────────────────

FailureKind = Literal[
    "unknown_tool",
    "invalid_arguments",
    "upstream_error",
    "configuration_error",
    "internal_error",
]


@dataclass(frozen=True)
class Success:
    payload: Any
    ok: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    ok: Literal[False] = False


DispatchResult = Success | Failure


# ── Health ──────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "MCP HTTP server running"
