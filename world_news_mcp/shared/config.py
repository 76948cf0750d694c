"""
Centralized configuration loaded from environment variables.
All services import from here; never import os.getenv directly.
"""

import os
from dotenv import load_dotenv

from world_news_mcp.shared.errors import ConfigurationError

load_dotenv()


class Settings:
    # ── World News API ──────────────────────────────────────
    WORLD_NEWS_API_KEY: str = os.getenv("WORLD_NEWS_API_KEY", "")
    WORLD_NEWS_API_BASE_URL: str = os.getenv("WORLD_NEWS_API_BASE_URL", "https://api.worldnewsapi.com")
    WORLD_NEWS_TIMEOUT_SECONDS: float = float(os.getenv("WORLD_NEWS_TIMEOUT_SECONDS", "30"))

    # ── HTTP transport ───────────────────────────────────────
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    # ── Logging ──────────────────────────────────────────────
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def require_api_key(self) -> str:
        if not self.WORLD_NEWS_API_KEY:
            raise ConfigurationError("WORLD_NEWS_API_KEY environment variable is required")
        return self.WORLD_NEWS_API_KEY


settings = Settings()
