from world_news_mcp.mcp_server.registry import Param, ToolSpec

SPEC = ToolSpec(
    name="get_geo_coordinates",
    description="Retrieve the latitude and longitude of a location name for use in location-filter",
    endpoint="/geo-coordinates",
    params=(
        Param(
            "location",
            "string",
            'The address or name of the location (e.g., "Tokyo, Japan")',
            required=True,
            max_length=1000,
        ),
    ),
)
