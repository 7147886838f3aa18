"""Main entry point for the places-guide site server.

Startup sequence:
1. Initialize DI container (places repository, site handler)
2. Inject the site handler into the page router
3. Serve pages, static assets, health and metrics with FastAPI
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from app.config import Settings
from app.container import Container
from app.routers import site_router, set_site_handler
from app.middleware import PrometheusMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global container
container: Container = None


async def startup_sequence(settings: Settings):
    """Build the container and inject the handler into the router."""
    global container

    logger.info("[Main] Starting startup sequence")

    logger.info("[Main] Initializing DI container")
    container = Container(settings)

    logger.info("[Main] Injecting handler into router")
    set_site_handler(container.site_handler)

    logger.info("[Main] Startup sequence completed")


async def shutdown_sequence():
    """Clean up resources on shutdown."""
    global container

    logger.info("[Main] Starting shutdown sequence")

    if container:
        await container.shutdown()

    logger.info("[Main] Shutdown sequence completed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown."""
    await startup_sequence(Settings())
    yield
    await shutdown_sequence()


# Create FastAPI app
settings = Settings()
logging.getLogger().setLevel(settings.log_level.upper())

app = FastAPI(
    title="Places Guide",
    description="Tourist destinations catalog site",
    version="1.0.0",
    lifespan=lifespan,
)

# Add Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware)

# Register router at app creation time (before uvicorn starts)
app.include_router(site_router)

# Stylesheets, scripts and images referenced by the page templates
app.mount(
    "/assets",
    StaticFiles(directory=settings.public_dir / "assets", check_dir=False),
    name="assets",
)


# Health check endpoint
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


if __name__ == "__main__":
    import uvicorn

    logger.info("[Main] Starting Places Guide")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
