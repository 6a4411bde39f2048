"""Search proxy endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.api.schemas import ErrorResponse, SearchRequest, SearchResponse
from backend.tools.tavily_search import INTERNAL_ERROR, TavilySearchClient, search_scholarships

logger = logging.getLogger(__name__)

router = APIRouter()


def get_search_client() -> TavilySearchClient:
    """FastAPI dependency: provider client built from current settings."""
    return TavilySearchClient.from_settings()


@router.post(
    "",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(request: Request, client: TavilySearchClient = Depends(get_search_client)):
    """Forward a free-text query to the search provider."""
    try:
        body = await request.json()
        data = SearchRequest.model_validate(body)
    except Exception:
        logger.exception("Error in search API")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    result = await search_scholarships(data.query, client)
    return JSONResponse(status_code=result.status_code, content=result.body)
