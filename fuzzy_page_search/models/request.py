"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PageSearchRequest(BaseModel):
    """
    Request model for searching a remote page.

    Accepted as a JSON body or as form fields. Missing or blank ``url`` and
    ``search`` values are reported by the endpoint as a 400, the same way
    the query string variant does.
    """

    url: Optional[str] = Field(None, description="Page to fetch and search (required)")
    search: Optional[str] = Field(None, description="Phrase to look for (required)")
    count_before: Optional[int] = Field(
        None, ge=0, description="Number of words to return before the match"
    )
    count_after: Optional[int] = Field(
        None, ge=0, description="Number of words to return after the match"
    )
    fuzzy_distance: Optional[int] = Field(
        None, ge=1, description="Maximum number of characters between matched symbols"
    )


class TextSearchRequest(BaseModel):
    """Request model for searching a supplied plain text."""

    search: str = Field(..., min_length=1, description="Phrase to look for")
    text: str = Field(..., description="Plain text to search in")
    count_before: Optional[int] = Field(None, ge=0)
    count_after: Optional[int] = Field(None, ge=0)
    fuzzy_distance: Optional[int] = Field(None, ge=1)

    @field_validator('search')
    @classmethod
    def validate_search(cls, v: str) -> str:
        """Reject phrases made only of whitespace."""
        if not v.strip():
            raise ValueError("Search phrase cannot be empty")
        return v
