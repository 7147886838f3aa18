"""FastAPI routes for the site pages."""
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.metrics import PAGE_RENDERS_TOTAL
from app.pages import page_for_path

logger = logging.getLogger(__name__)

# Create router at module level
router = APIRouter()

# Global handler reference - set during startup
_site_handler = None


def set_site_handler(handler):
    """Set the site handler instance (called during startup)."""
    global _site_handler
    _site_handler = handler
    logger.info("[SiteRouter] Handler injected successfully")


def first_values(query_params) -> dict[str, str]:
    """First value of each query parameter, in the order the keys appear."""
    query = {}
    for key, value in query_params.multi_items():
        query.setdefault(key, value)
    return query


def get_handler():
    """Get the site handler, raising error if not initialized."""
    if _site_handler is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _site_handler


@router.get("/", response_class=HTMLResponse, summary="Home page")
@router.get("/index.html", response_class=HTMLResponse, summary="Home page")
@router.get("/detalhe.html", response_class=HTMLResponse, summary="Place detail page")
async def get_page(request: Request):
    """Render the page served at the request path."""
    try:
        handler = get_handler()
        page = await handler.render_page(request.url.path, first_values(request.query_params))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[SiteRouter] Error rendering {request.url.path}: {e}")
        PAGE_RENDERS_TOTAL.labels(page=page_for_path(request.url.path), status="error").inc()
        raise HTTPException(status_code=500, detail="Internal server error")

    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    if page.redirect_to is not None:
        return RedirectResponse(url=page.redirect_to, status_code=302)
    return HTMLResponse(content=page.html)
