from world_news_mcp.mcp_server.registry import Param, ToolSpec
from world_news_mcp.mcp_server.tools._common import language, source_country

SPEC = ToolSpec(
    name="search_news",
    description="Search and filter news by text, date, location, category, language, and more",
    endpoint="/search-news",
    params=(
        Param(
            "text",
            "string",
            "The text to match in the news content (at least 3 characters)",
            min_length=3,
            max_length=100,
        ),
        source_country(),
        language(),
        Param("min-sentiment", "number", "Minimal sentiment of the news in range [-1,1]", minimum=-1, maximum=1),
        Param("max-sentiment", "number", "Maximal sentiment of the news in range [-1,1]", minimum=-1, maximum=1),
        Param(
            "earliest-publish-date",
            "string",
            "The news must have been published after this date (YYYY-MM-DD HH:MM:SS)",
            max_length=19,
        ),
        Param(
            "latest-publish-date",
            "string",
            "The news must have been published before this date (YYYY-MM-DD HH:MM:SS)",
            max_length=19,
        ),
        Param(
            "news-sources",
            "string",
            "Comma-separated list of news sources (e.g., https://www.bbc.co.uk)",
            max_length=10000,
        ),
        Param("authors", "string", "Comma-separated list of author names", max_length=300),
        Param(
            "categories",
            "string",
            "Comma-separated list of categories (politics, sports, business, technology, etc.)",
            max_length=300,
        ),
        Param("entities", "string", "Filter by entities (e.g., ORG:Tesla,PER:Elon Musk)", max_length=10000),
        Param(
            "location-filter",
            "string",
            'Filter by radius around location: "latitude,longitude,radius_km"',
            max_length=100,
        ),
        Param("sort", "string", "Sorting criteria (publish-time)", max_length=100),
        Param(
            "sort-direction",
            "string",
            "Whether to sort ascending or descending (ASC or DESC)",
            enum=("ASC", "DESC"),
        ),
        Param("offset", "number", "Number of news to skip", minimum=0, maximum=10000),
        Param("number", "number", "Number of news to return", minimum=1, maximum=100, default=10),
    ),
)
