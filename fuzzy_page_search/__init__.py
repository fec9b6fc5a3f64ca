"""
Fuzzy Page Search - locate an approximate phrase in a web page.

This package fetches a page, converts it to plain text and finds the first
fuzzy occurrence of a phrase, returning it together with a configurable
number of surrounding words.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.types import SearchConfig, SearchResult

__all__ = [
    "SearchEngine",
    "SearchConfig",
    "SearchResult",
]
