"""Core search engine functionality."""

from .context import ContextExtractor
from .engine import SearchEngine
from .exceptions import FetchError, InvalidConfigError, SearchError
from .fetcher import PageFetcher, is_valid_url
from .fuzzy_matcher import FuzzyMatcher
from .html import html_to_text
from .normalizer import TextNormalizer
from .types import MatchSpan, SearchConfig, SearchResult

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "TextNormalizer",
    "ContextExtractor",
    "PageFetcher",
    "is_valid_url",
    "html_to_text",
    "MatchSpan",
    "SearchConfig",
    "SearchResult",
    "SearchError",
    "InvalidConfigError",
    "FetchError",
]
