"""Parameters shared by several tools."""

from world_news_mcp.mcp_server.registry import Param


def source_country(description: str = "ISO 3166 country code (e.g., us, gb, de)", required: bool = False) -> Param:
    return Param("source-country", "string", description, required=required, length=2)


def language(required: bool = False) -> Param:
    return Param(
        "language",
        "string",
        "ISO 6391 language code (e.g., en, es, fr)",
        required=required,
        length=2,
    )


def analyze(description: str) -> Param:
    return Param("analyze", "boolean", description, default=False, forward_default=False)
