"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import SearchResult


class SearchResponse(BaseModel):
    """Response for a phrase search."""

    model_config = ConfigDict(populate_by_name=True)

    search_request: str = Field(..., alias="searchRequest", description="Original search phrase")
    url: Optional[str] = Field(None, description="Searched page, if any")
    before: str = Field("", description="Words preceding the match")
    found_text: str = Field("", alias="foundText", description="Matched text, empty if not found")
    after: str = Field("", description="Words following the match")
    found: bool = Field(..., description="Whether the phrase was located")
    confidence: float = Field(0.0, ge=0.0, le=1.0, description="Similarity of the match (0-1)")
    execution_time_ms: float = Field(..., description="Search execution time in milliseconds")

    @classmethod
    def from_result(
        cls,
        result: SearchResult,
        execution_time_ms: float,
        url: Optional[str] = None
    ) -> "SearchResponse":
        """Build a response from an engine result."""
        return cls(
            search_request=result.query,
            url=url,
            before=result.before,
            found_text=result.matched_text,
            after=result.after,
            found=result.found,
            confidence=result.confidence,
            execution_time_ms=execution_time_ms,
        )


class ErrorResponse(BaseModel):
    """Error response model."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="Error type")
    message: Optional[str] = Field(None, description="Error message")
    inner_error: Optional[str] = Field(
        None, alias="innerError", description="Underlying error reported by a collaborator"
    )
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
