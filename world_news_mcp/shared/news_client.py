import logging
from typing import Any

import httpx

from world_news_mcp.shared.config import settings
from world_news_mcp.shared.errors import (
    ConfigurationError,
    UpstreamAuthError,
    UpstreamHTTPError,
    UpstreamMalformedResponse,
    UpstreamUnreachable,
)

logger = logging.getLogger("world-news-client")

API_KEY_PARAM = "api-key"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: dict[str, Any], api_key: str) -> list[tuple[str, str]]:
    """
    Render validated arguments as query pairs. Keys are passed through
    verbatim (the upstream API is case-sensitive), empty values are skipped
    and the credential always goes last.
    """
    query = [
        (key, _query_value(value))
        for key, value in params.items()
        if value is not None and value != ""
    ]
    query.append((API_KEY_PARAM, api_key))
    return query


class WorldNewsClient:
    """One GET per call against the World News API. No retries."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.WORLD_NEWS_API_KEY
        if not self.api_key:
            raise ConfigurationError("WORLD_NEWS_API_KEY environment variable is required")
        self.base_url = (base_url or settings.WORLD_NEWS_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.WORLD_NEWS_TIMEOUT_SECONDS
        self._transport = transport

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        query = build_query(params or {}, self.api_key)
        logger.debug("GET %s params=%s", path, [k for k, _ in query if k != API_KEY_PARAM])

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
                resp = await client.get(url, params=query, headers={"Accept": "application/json"})
        except httpx.RequestError as exc:
            raise UpstreamUnreachable(f"network error: {exc}") from exc

        if resp.status_code in (401, 403):
            raise UpstreamAuthError(resp.status_code, resp.text)

        if not resp.is_success:
            raise UpstreamHTTPError(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamMalformedResponse(f"invalid JSON in response from {path}") from exc
