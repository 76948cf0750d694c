from world_news_mcp.mcp_server.registry import Param, ToolSpec
from world_news_mcp.mcp_server.tools._common import analyze

SPEC = ToolSpec(
    name="extract_news_links",
    description="Extract news links from a news website",
    endpoint="/extract-news-links",
    params=(
        Param("url", "string", "URL of the news website to extract links from", required=True, max_length=1000),
        analyze("Whether to analyze the extracted news"),
    ),
)
