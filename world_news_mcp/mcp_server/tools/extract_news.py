from world_news_mcp.mcp_server.registry import Param, ToolSpec
from world_news_mcp.mcp_server.tools._common import analyze

SPEC = ToolSpec(
    name="extract_news",
    description="Extract a news article from a website to a well-structured JSON object",
    endpoint="/extract-news",
    params=(
        Param("url", "string", "URL of the news article to extract", required=True, max_length=1000),
        analyze("Whether to analyze the extracted news (entities, sentiment, etc.)"),
    ),
)
