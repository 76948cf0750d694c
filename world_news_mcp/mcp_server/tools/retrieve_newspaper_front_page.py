from world_news_mcp.mcp_server.registry import Param, ToolSpec
from world_news_mcp.mcp_server.tools._common import source_country

SPEC = ToolSpec(
    name="retrieve_newspaper_front_page",
    description="Get the front pages of newspapers from around the world",
    endpoint="/retrieve-front-page",
    params=(
        source_country("ISO 3166 country code of the newspaper publication"),
        Param("source-name", "string", "Identifier of the publication (e.g., herald-sun)", max_length=100),
        Param("date", "string", "Date for front page (YYYY-MM-DD). Earliest date is 2024-07-09", max_length=10),
    ),
)
