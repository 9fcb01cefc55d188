from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from fixtures_api.api.routes import router
from fixtures_api.core.config import settings
from fixtures_api.core.logger import setup_logger
from fixtures_api.fetch.scraper import HtmlFetcher

logger = setup_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Create the shared fetcher and its page cache on startup.
    """
    logger.info("Initializing Fixtures Scraper...")
    app.state.fetcher = HtmlFetcher()
    logger.info("Page cache ready (ttl=%ss)", app.state.fetcher.cache.ttl_seconds)

    yield

    logger.info("Shutting down Fixtures Scraper...")

app = FastAPI(
    title="Fixtures Scraper",
    description="API for scraping league fixtures and standings and deriving match statistics",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Fixtures Scraper",
        "version": "1.0.0",
        "endpoints": {
            "scrape_fixtures": "GET /scrape-fixtures?leagueUrl=...",
            "health": "GET /health",
            "cache_stats": "GET /cache/stats",
            "cache_clear": "DELETE /cache/clear"
        }
    }

def run():
    logger.info("Server running on http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
