from world_news_mcp.mcp_server.registry import ToolRegistry

from .search_news import SPEC as search_news
from .get_top_news import SPEC as get_top_news
from .retrieve_newspaper_front_page import SPEC as retrieve_newspaper_front_page
from .retrieve_news_articles import SPEC as retrieve_news_articles
from .extract_news import SPEC as extract_news
from .extract_news_links import SPEC as extract_news_links
from .search_news_sources import SPEC as search_news_sources
from .get_geo_coordinates import SPEC as get_geo_coordinates

# Order is the order advertised by tools/list.
CATALOG = (
    search_news,
    get_top_news,
    retrieve_newspaper_front_page,
    retrieve_news_articles,
    extract_news,
    extract_news_links,
    search_news_sources,
    get_geo_coordinates,
)


def build_registry() -> ToolRegistry:
    return ToolRegistry(CATALOG)


__all__ = [
    "CATALOG",
    "build_registry",
    "search_news",
    "get_top_news",
    "retrieve_newspaper_front_page",
    "retrieve_news_articles",
    "extract_news",
    "extract_news_links",
    "search_news_sources",
    "get_geo_coordinates",
]
