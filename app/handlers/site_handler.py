"""Site handler: renders page templates through the page controllers."""
import logging
import time
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

from app.api import PlacesRepository
from app.config import Settings
from app.metrics import PAGE_RENDERS_TOTAL
from app.pages import Navigator, PageDocument, PageMessages, initialize_app, page_for_path

logger = logging.getLogger(__name__)


class RenderedPage(BaseModel):
    """Outcome of a page load: either HTML or a redirect target."""

    html: Optional[str] = None
    redirect_to: Optional[str] = None


class SiteHandler:
    """Handler for page requests."""

    def __init__(self, repository: PlacesRepository, settings: Settings):
        """Initialize site handler.

        Args:
            repository: Places data service client
            settings: Application settings (template paths, messages)
        """
        self.repository = repository
        self.settings = settings
        self.messages = PageMessages.from_settings(settings)

    def template_for(self, path: str) -> Optional[Path]:
        """Template file served at `path`, None for unknown paths."""
        page = page_for_path(path)
        if page == "home":
            return self.settings.get_public_path(self.settings.home_template)
        if page == "detail":
            return self.settings.get_public_path(self.settings.detail_template)
        return None

    async def render_page(
        self, path: str, query: Optional[Mapping[str, str]] = None
    ) -> Optional[RenderedPage]:
        """Load the template for `path` and let the controllers populate it.

        Returns:
            RenderedPage, or None when no page is served at `path`
        """
        template = self.template_for(path)
        if template is None:
            return None

        page = page_for_path(path)
        logger.info(f"[SiteHandler] Rendering {page} page for {path} query={dict(query or {})}")
        start_time = time.perf_counter()

        document = PageDocument.from_file(template)
        navigator = Navigator(path=path, query=query)

        await initialize_app(self.repository, document, navigator, self.messages)

        duration = time.perf_counter() - start_time
        if navigator.redirected:
            PAGE_RENDERS_TOTAL.labels(page=page, status="redirect").inc()
            logger.info(f"[SiteHandler] {path} redirected to {navigator.redirect_to}")
            return RenderedPage(redirect_to=navigator.redirect_to)

        PAGE_RENDERS_TOTAL.labels(page=page, status="success").inc()
        logger.info(f"[SiteHandler] Rendered {path} in {duration:.3f}s")
        return RenderedPage(html=document.render())
