from world_news_mcp.mcp_server.registry import Param, ToolSpec

SPEC = ToolSpec(
    name="search_news_sources",
    description="Search whether a news source is being monitored by the World News API",
    endpoint="/search-news-sources",
    params=(
        Param("name", "string", 'The (partial) name of the source (e.g., "bbc")', required=True, max_length=1000),
    ),
)
