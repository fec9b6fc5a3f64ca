"""Exceptions raised by the search engine and its collaborators."""

from typing import Optional


class SearchError(Exception):
    """Base class for all search related errors."""


class InvalidConfigError(SearchError, ValueError):
    """Raised when a search configuration value is out of range."""


class FetchError(SearchError):
    """Raised when a page could not be fetched directly or through the proxy."""

    def __init__(self, message: str, inner_error: Optional[str] = None) -> None:
        super().__init__(message)
        self.inner_error = inner_error
