"""Tests for the HTTP transport."""

import asyncio
import json
import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from world_news_mcp.api import create_app
from world_news_mcp.mcp_server.dispatcher import Dispatcher

from .fakes import FakeNewsClient


@pytest.fixture
def client(dispatcher):
    return TestClient(create_app(dispatcher))


def rpc(method, params=None, request_id=1, version="2.0"):
    body = {"jsonrpc": version, "id": request_id, "method": method}
    if params is not None:
        body["params"] = params
    return body


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "message": "MCP HTTP server running"}


def test_request_id_header(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"
    assert client.get("/health").headers["x-request-id"]


def test_tools_list(client):
    resp = client.post("/mcp", json=rpc("tools/list"))
    assert resp.status_code == 200
    body = resp.json()
    assert body["jsonrpc"] == "2.0"
    assert body["id"] == 1
    assert [t["name"] for t in body["result"]["tools"]][:2] == ["search_news", "get_top_news"]


def test_tools_call_end_to_end(registry):
    upstream = FakeNewsClient(responses={"/top-news": {"top_news": [{"news": [{"title": "Hello"}]}]}})
    client = TestClient(create_app(Dispatcher(registry, upstream)))

    resp = client.post(
        "/mcp",
        json=rpc("tools/call", {"name": "get_top_news", "arguments": {"source-country": "us", "language": "en"}}),
    )
    body = resp.json()

    assert resp.status_code == 200
    assert json.loads(body["result"]["content"][0]["text"]) == {"top_news": [{"news": [{"title": "Hello"}]}]}
    assert upstream.calls == [("/top-news", {"source-country": "us", "language": "en"})]


def test_invalid_request_version(client, fake_client):
    resp = client.post("/mcp", json=rpc("tools/list", version="1.0"))
    assert resp.status_code == 200
    assert resp.json() == {"jsonrpc": "2.0", "id": 1, "error": {"code": -32600, "message": "Invalid Request"}}
    assert fake_client.calls == []


def test_unknown_method(client):
    body = client.post("/mcp", json=rpc("prompts/list")).json()
    assert body["error"] == {"code": -32601, "message": "Unknown method: prompts/list"}


def test_unknown_tool(client):
    body = client.post("/mcp", json=rpc("tools/call", {"name": "nonexistent_tool", "arguments": {}})).json()
    assert body["error"] == {"code": -32601, "message": "Tool not found: nonexistent_tool"}


def test_invalid_arguments(client, fake_client):
    resp = client.post("/mcp", json=rpc("tools/call", {"name": "search_news", "arguments": {"number": 0}}))
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == -32602
    assert fake_client.calls == []


def test_unparsable_body(client):
    resp = client.post("/mcp", content=b"{oops", headers={"Content-Type": "application/json"})
    assert resp.status_code == 200
    assert resp.json() == {"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}}


def test_non_object_body(client):
    resp = client.post("/mcp", json=[1, 2, 3])
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == -32600


def test_notification_answered_with_http_200(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 200
    assert resp.json() == {
        "jsonrpc": "2.0",
        "id": None,
        "error": {"code": -32601, "message": "Unknown method: notifications/initialized"},
    }


def test_access_log_names_rpc_method(client, caplog):
    with caplog.at_level(logging.INFO, logger="world-news-http"):
        client.post("/mcp", json=rpc("tools/list"), headers={"X-Request-ID": "req-42"})

    access = [r.getMessage() for r in caplog.records if r.getMessage().startswith("http_request")]
    assert len(access) == 1
    assert "POST /mcp rpc_method=tools/list status=200" in access[0]
    assert access[0].endswith("request_id=req-42")


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(registry):
    upstream = FakeNewsClient(
        responses={"/search-news": {"news": ["slow"]}, "/geo-coordinates": {"latitude": 35.68, "longitude": 139.69}},
        delays={"/search-news": 0.2, "/geo-coordinates": 0.01},
    )
    app = create_app(Dispatcher(registry, upstream))
    finished = []

    async def post(http, body):
        resp = await http.post("/mcp", json=body)
        finished.append(body["id"])
        return resp.json()

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as http:
        slow, fast = await asyncio.gather(
            post(http, rpc("tools/call", {"name": "search_news", "arguments": {"text": "markets"}}, request_id="slow")),
            post(http, rpc("tools/call", {"name": "get_geo_coordinates", "arguments": {"location": "Tokyo"}}, request_id="fast")),
        )

    assert finished == ["fast", "slow"]
    assert slow["id"] == "slow"
    assert json.loads(slow["result"]["content"][0]["text"]) == {"news": ["slow"]}
    assert fast["id"] == "fast"
    assert json.loads(fast["result"]["content"][0]["text"]) == {"latitude": 35.68, "longitude": 139.69}
