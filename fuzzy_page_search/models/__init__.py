"""Data models for the fuzzy page search API."""

from .response import SearchResponse, ErrorResponse, HealthResponse
from .request import PageSearchRequest, TextSearchRequest

__all__ = [
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
    "PageSearchRequest",
    "TextSearchRequest",
]
