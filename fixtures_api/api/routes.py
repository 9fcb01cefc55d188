from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from fixtures_api.core.logger import setup_logger
from fixtures_api.errors import ValidationError
from fixtures_api.fetch.scraper import HtmlFetcher
from fixtures_api.schemas import ErrorResponse, ScrapeResponse
from fixtures_api.services.scrape import process_league_request

logger = setup_logger(__name__)

router = APIRouter()

def get_fetcher(request: Request) -> HtmlFetcher:
    """Shared fetcher (and its cache) living on the application state"""
    fetcher = getattr(request.app.state, "fetcher", None)
    if fetcher is None:
        fetcher = HtmlFetcher()
        request.app.state.fetcher = fetcher
    return fetcher

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())

@router.get(
    "/scrape-fixtures",
    response_model=ScrapeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def scrape_fixtures(
    league_url: Optional[str] = Query(None, alias="leagueUrl", description="Absolute league URL or site-relative path"),
    fetcher: HtmlFetcher = Depends(get_fetcher),
):
    """
    Scrape upcoming fixtures and standings for a league page.

    Returns per-match W/D/L codes, goal ratios and home/away records.
    """
    try:
        result = await process_league_request(league_url or "", fetcher)
        return ScrapeResponse(**result)
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logger.exception("Scrape failed for %s", league_url)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

@router.get("/cache/stats")
async def cache_statistics(fetcher: HtmlFetcher = Depends(get_fetcher)):
    """Get cache statistics for debugging"""
    return fetcher.cache.stats()

@router.delete("/cache/clear")
async def clear_cache(fetcher: HtmlFetcher = Depends(get_fetcher)):
    """Clear all cache entries"""
    fetcher.cache.clear()
    return {"message": "Cache cleared successfully"}

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Fixtures Scraper"}
