import pytest

from world_news_mcp.mcp_server.dispatcher import Dispatcher
from world_news_mcp.mcp_server.protocol import JsonRpcHandler
from world_news_mcp.mcp_server.tools import build_registry

from .fakes import FakeNewsClient


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def fake_client():
    return FakeNewsClient()


@pytest.fixture
def dispatcher(registry, fake_client):
    return Dispatcher(registry, fake_client)


@pytest.fixture
def handler(dispatcher):
    return JsonRpcHandler(dispatcher)
