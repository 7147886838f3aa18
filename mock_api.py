"""Mock places data service.

Serves the seed document written by `python -m app.seed` at
GET /places, /reviews and /images with field filters and `_embed`.

Run with: python mock_api.py (listens on MOCK_API_PORT, default 3000)
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from app.config import Settings
from app.handlers import PlacesDataHandler
from app.middleware import PrometheusMiddleware
from app.routers import places_data_router, set_places_data_handler

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the seed document before serving."""
    settings = Settings()
    seed_path = settings.get_resource_path(settings.seed_output_file)
    logger.info(f"[MockAPI] Loading seed document from {seed_path}")
    set_places_data_handler(PlacesDataHandler.from_file(seed_path))
    yield
    logger.info("[MockAPI] Shutting down")


app = FastAPI(
    title="Places Data Service (mock)",
    description="Read-only places, reviews and images collections",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(PrometheusMiddleware)


# Registered before the data router so its /{collection} route does not shadow them
@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Prometheus metrics endpoint
@app.get("/metrics", response_class=PlainTextResponse)
def metrics():
    """Prometheus metrics endpoint for scraping."""
    return PlainTextResponse(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


app.include_router(places_data_router)


if __name__ == "__main__":
    import uvicorn

    settings = Settings()
    logger.info("[MockAPI] Starting mock places data service")
    uvicorn.run(
        "mock_api:app",
        host="0.0.0.0",
        port=settings.mock_api_port,
        log_level=settings.log_level.lower(),
    )
