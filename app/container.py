"""Dependency injection container for application components."""
import logging

from app.config import Settings
from app.api import PlacesRepository
from app.handlers import SiteHandler

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Initializes and wires up all site dependencies. The places repository
    lives as long as the container and is closed by shutdown().
    """

    def __init__(self, settings: Settings):
        """Initialize container with all dependencies.

        Args:
            settings: Application settings
        """
        logger.info("[Container] Initializing container")
        self.settings = settings

        logger.info(
            f"[Container] Places data service at {settings.places_api_base_url}"
        )
        self.places_repository = PlacesRepository(
            base_url=settings.places_api_base_url,
            timeout=settings.places_api_timeout_seconds,
        )

        self.site_handler = SiteHandler(self.places_repository, settings)

        logger.info("[Container] Container initialized successfully")

    async def shutdown(self):
        """Clean up resources."""
        logger.info("[Container] Shutting down container")
        await self.places_repository.close()
        logger.info("[Container] Container shut down successfully")
