"""Shared search engine and fetcher factories to avoid circular imports."""

from functools import lru_cache

from .config import get_settings
from .core.engine import SearchEngine
from .core.fetcher import PageFetcher
from .core.types import SearchConfig


@lru_cache()
def get_search_engine() -> SearchEngine:
    """Get the search engine configured from settings."""
    settings = get_settings()
    return SearchEngine(
        SearchConfig(
            fuzzy_distance=settings.fuzzy_distance,
            words_before=settings.count_before,
            words_after=settings.count_after,
        )
    )


@lru_cache()
def get_fetcher() -> PageFetcher:
    """Get the page fetcher configured from settings."""
    return PageFetcher.from_settings(get_settings())
