import asyncio
from typing import Any


class FakeNewsClient:
    """Records every upstream call and answers from a per-path table."""

    def __init__(self, responses: dict[str, Any] | None = None, delays: dict[str, float] | None = None):
        self.responses = responses or {}
        self.delays = delays or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append((path, dict(params or {})))
        if path in self.delays:
            await asyncio.sleep(self.delays[path])
        response = self.responses.get(path, {"path": path})
        if isinstance(response, Exception):
            raise response
        return response
