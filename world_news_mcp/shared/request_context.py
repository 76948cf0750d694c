"""Per-request id and one access log line per HTTP request, tagged with the JSON-RPC method."""

import time
import uuid
from contextvars import ContextVar

from fastapi import FastAPI, Request

_request_id: ContextVar[str] = ContextVar("request_id", default="")
# Mutable so the endpoint, which runs in a child task, can report back to the middleware.
_access: ContextVar[dict | None] = ContextVar("access", default=None)


def get_request_id() -> str:
    return _request_id.get()


def note_rpc_method(method: str | None) -> None:
    access = _access.get()
    if access is not None and method:
        access["rpc_method"] = method


def install_request_context(app: FastAPI, *, logger) -> None:
    @app.middleware("http")
    async def request_context(request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        access = {"rpc_method": "-", "status": "?"}
        rid_token = _request_id.set(rid)
        access_token = _access.set(access)
        t0 = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = rid
            access["status"] = response.status_code
            return response
        finally:
            _request_id.reset(rid_token)
            _access.reset(access_token)
            logger.info(
                "http_request %s %s rpc_method=%s status=%s ms=%s request_id=%s",
                request.method,
                request.url.path,
                access["rpc_method"],
                access["status"],
                int((time.perf_counter() - t0) * 1000),
                rid,
            )
