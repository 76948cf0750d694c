from world_news_mcp.mcp_server.registry import Param, ToolSpec

SPEC = ToolSpec(
    name="retrieve_news_articles",
    description="Retrieve information about one or more news articles by their IDs",
    endpoint="/retrieve-news",
    params=(
        Param(
            "ids",
            "string",
            'Comma-separated list of news IDs (e.g., "2352,2354")',
            required=True,
            max_length=10000,
        ),
    ),
)
