from world_news_mcp.mcp_server.registry import Param, ToolSpec
from world_news_mcp.mcp_server.tools._common import language, source_country

SPEC = ToolSpec(
    name="get_top_news",
    description="Get the top news from a country in a language for a specific date",
    endpoint="/top-news",
    params=(
        source_country(required=True),
        language(required=True),
        Param(
            "date",
            "string",
            "Date for top news (YYYY-MM-DD). If not provided, current day is used",
            max_length=10,
        ),
        Param(
            "headlines-only",
            "boolean",
            "Return only basic information (id, title, url)",
            default=False,
            forward_default=False,
        ),
    ),
)
