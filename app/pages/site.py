"""Dispatches a page load to the controller of the requested path."""
import logging
from typing import Optional

from app.api import PlacesRepository
from app.metrics import PAGE_SECTION_ERRORS_TOTAL
from app.pages.detail_page import DetailPage
from app.pages.document import Navigator, PageDocument
from app.pages.home_page import HomePage
from app.pages.messages import PageMessages
from app.render import DETAIL_PATH, error_banner

logger = logging.getLogger(__name__)

HOME_PATHS = ("/", "/index.html")


def page_for_path(path: str) -> Optional[str]:
    """Name of the page served at `path` ("home", "detail"), None otherwise."""
    if path in HOME_PATHS:
        return "home"
    if path == DETAIL_PATH:
        return "detail"
    return None


async def initialize_app(
    repository: PlacesRepository,
    document: PageDocument,
    navigator: Navigator,
    messages: Optional[PageMessages] = None,
):
    """Run the controller for the navigator's path against `document`.

    Paths that are neither home nor detail leave the document untouched.
    Failures escaping a controller replace `main` with the generic banner.
    """
    messages = messages or PageMessages()
    page = page_for_path(navigator.path)

    try:
        if page == "home":
            await HomePage(repository, messages).load(document)
        elif page == "detail":
            await DetailPage(repository, messages).load(document, navigator)
        else:
            logger.debug(f"[Site] No controller for path {navigator.path}")
    except Exception as e:
        logger.error(f"[Site] Error initializing application: {e}")
        PAGE_SECTION_ERRORS_TOTAL.labels(section="init").inc()
        document.replace_contents("main", error_banner(messages.init_error))
