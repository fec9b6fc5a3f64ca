"""Search API endpoints."""

import time
from typing import Optional, Union

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..core.engine import SearchEngine
from ..core.exceptions import FetchError, InvalidConfigError
from ..core.fetcher import PageFetcher, is_valid_url
from ..core.types import SearchConfig
from ..engine_instance import get_fetcher, get_search_engine
from ..models.request import PageSearchRequest, TextSearchRequest
from ..models.response import ErrorResponse, SearchResponse

router = APIRouter(prefix="/api", tags=["search"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
logger = structlog.get_logger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: Optional[str] = None,
    inner_error: Optional[str] = None
) -> JSONResponse:
    """Render an ErrorResponse with the given status code."""
    body = ErrorResponse(error=error, message=message, inner_error=inner_error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True)
    )


def build_config(
    engine: SearchEngine,
    count_before: Optional[int],
    count_after: Optional[int],
    fuzzy_distance: Optional[int]
) -> SearchConfig:
    """Merge request values over the engine defaults."""
    defaults = engine.config
    return SearchConfig(
        fuzzy_distance=defaults.fuzzy_distance if fuzzy_distance is None else fuzzy_distance,
        words_before=defaults.words_before if count_before is None else count_before,
        words_after=defaults.words_after if count_after is None else count_after,
    )


async def search_page(
    url: Optional[str],
    search: Optional[str],
    count_before: Optional[int],
    count_after: Optional[int],
    fuzzy_distance: Optional[int],
    engine: SearchEngine,
    fetcher: PageFetcher,
    settings: Settings
) -> Union[SearchResponse, JSONResponse]:
    """Fetch a page and search its text for a phrase."""
    if not url or not search or not search.strip():
        return error_response(400, "Missing required parameters")

    if not is_valid_url(url):
        return error_response(400, "Wrong URL format")

    if len(search) > settings.max_query_length:
        return error_response(
            400,
            "Query too long",
            f"Maximum length is {settings.max_query_length} characters"
        )

    try:
        config = build_config(engine, count_before, count_after, fuzzy_distance)
    except InvalidConfigError as e:
        return error_response(400, "Invalid search parameters", str(e))

    try:
        html = await fetcher.fetch(url)
    except FetchError as e:
        return error_response(404, str(e), inner_error=e.inner_error)

    start_time = time.time()
    result = engine.search_html(search, html, config)
    execution_time = (time.time() - start_time) * 1000

    logger.info(
        "Page searched",
        url=url,
        found=result.found,
        page_length=len(html),
        execution_time_ms=round(execution_time, 2)
    )

    return SearchResponse.from_result(result, execution_time, url=url)


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search a page",
    description="Fetch a page and locate a fuzzy occurrence of a phrase in its text"
)
async def search_get(
    url: Optional[str] = Query(None, description="Page to fetch (required)"),
    search: Optional[str] = Query(None, description="Phrase to look for (required)"),
    count_before: Optional[int] = Query(None, ge=0, description="Words to return before the match"),
    count_after: Optional[int] = Query(None, ge=0, description="Words to return after the match"),
    fuzzy_distance: Optional[int] = Query(
        None,
        ge=1,
        description="Maximum number of characters between matched symbols"
    ),
    engine: SearchEngine = Depends(get_search_engine),
    fetcher: PageFetcher = Depends(get_fetcher),
    settings: Settings = Depends(get_settings)
) -> Union[SearchResponse, JSONResponse]:
    """
    Search a remote page using query parameters.

    A phrase that cannot be located is not an error: the response is a 200
    with an empty ``foundText``.
    """
    return await search_page(
        url, search, count_before, count_after, fuzzy_distance, engine, fetcher, settings
    )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search a page with request body",
    description="Fetch a page and search it using a JSON body or form fields",
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": PageSearchRequest.model_json_schema()},
                "application/x-www-form-urlencoded": {"schema": PageSearchRequest.model_json_schema()},
            }
        }
    }
)
async def search_post(
    request: Request,
    engine: SearchEngine = Depends(get_search_engine),
    fetcher: PageFetcher = Depends(get_fetcher),
    settings: Settings = Depends(get_settings)
) -> Union[SearchResponse, JSONResponse]:
    """
    Search a remote page using a request body.

    Form-encoded bodies are accepted as well as JSON; empty form fields
    count as left out.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        data = {key: value for key, value in form.items() if value != ""}
    else:
        try:
            data = await request.json()
        except ValueError:
            return error_response(400, "Invalid request body")

    if not isinstance(data, dict):
        return error_response(400, "Invalid request body")

    try:
        body = PageSearchRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))

    return await search_page(
        body.url,
        body.search,
        body.count_before,
        body.count_after,
        body.fuzzy_distance,
        engine,
        fetcher,
        settings
    )


@router.post(
    "/search/text",
    response_model=SearchResponse,
    summary="Search plain text",
    description="Locate a fuzzy occurrence of a phrase in a supplied plain text"
)
async def search_text(
    request: TextSearchRequest,
    engine: SearchEngine = Depends(get_search_engine),
    settings: Settings = Depends(get_settings)
) -> Union[SearchResponse, JSONResponse]:
    """
    Search a plain text document without fetching anything.

    Useful when the caller already has the text, or for trying out
    fuzzy distances and context sizes.
    """
    if len(request.search) > settings.max_query_length:
        return error_response(
            400,
            "Query too long",
            f"Maximum length is {settings.max_query_length} characters"
        )

    config = build_config(
        engine, request.count_before, request.count_after, request.fuzzy_distance
    )

    start_time = time.time()
    result = engine.search(request.search, request.text, config)
    execution_time = (time.time() - start_time) * 1000

    return SearchResponse.from_result(result, execution_time)
