"""Main FastAPI application for the Fuzzy Page Search service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
import structlog

from .api import search_router, health_router
from .config import get_settings
from .models.response import ErrorResponse

settings = get_settings()

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

TEST_FORM = """<!DOCTYPE html><html><body>
<form action="/api/search" method="POST">
<input type="text" name="url" placeholder="url" size=100><br>
<input type="text" name="search" placeholder="string" size=100><br>
<input type="number" name="count_before" placeholder="count_before" size=100><br>
<input type="number" name="count_after" placeholder="count_after" size=100><br>
<input type="number" name="fuzzy_distance" placeholder="fuzzy_distance" size=100><br>
<input type="submit" value="Search">
</form>
</body></html>"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(
        "Starting Fuzzy Page Search service",
        version=settings.app_version,
        fuzzy_distance=settings.fuzzy_distance,
        proxy_enabled=bool(settings.proxy_url)
    )
    if settings.proxy_url and not settings.proxy_api_key:
        logger.warning("Proxy fallback configured without an API key")

    yield

    logger.info("Shutting down Fuzzy Page Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Fuzzy phrase search with word context for web pages",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy phrase search with word context for web pages",
        "docs_url": "/docs",
        "health_url": "/api/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/search?url=...&search=...",
            "search_text": "/api/search/text",
            "test_form": "/test",
            "health": "/api/health"
        },
        "parameters": {
            "url": "Page to fetch (required)",
            "search": "Phrase to look for (required)",
            "count_before": "Words of context before the match",
            "count_after": "Words of context after the match",
            "fuzzy_distance": "Maximum number of characters between matched symbols"
        },
        "defaults": {
            "fuzzy_distance": settings.fuzzy_distance,
            "count_before": settings.count_before,
            "count_after": settings.count_after,
            "max_query_length": settings.max_query_length
        }
    }


# Manual test form
@app.get("/test", response_class=HTMLResponse, include_in_schema=False)
async def manual_search_form() -> str:
    """Serve a small HTML form for trying out searches by hand."""
    return TEST_FORM


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "fuzzy_page_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
