"""FastAPI routes of the mock places data service."""
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from app.handlers.places_data_handler import EMBED_PARAM, UnknownCollectionError

logger = logging.getLogger(__name__)

# Create router at module level
router = APIRouter()

# Global handler reference - set during startup
_data_handler = None


def set_places_data_handler(handler):
    """Set the data handler instance (called during startup)."""
    global _data_handler
    _data_handler = handler
    logger.info("[PlacesDataRouter] Handler injected successfully")


def get_handler():
    """Get the data handler, raising error if not initialized."""
    if _data_handler is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _data_handler


@router.get(
    "/{collection}",
    summary="List records",
    description="Records of a collection filtered by field equality, with optional _embed",
)
def list_records(collection: str, request: Request) -> list[dict[str, Any]]:
    handler = get_handler()
    try:
        return handler.list_records(collection, request.query_params.multi_items())
    except UnknownCollectionError:
        raise HTTPException(status_code=404, detail=f"Unknown collection: {collection}")


@router.get("/{collection}/{record_id}", summary="Get one record")
def get_record(collection: str, record_id: str, request: Request) -> dict[str, Any]:
    handler = get_handler()
    try:
        record = handler.get_record(
            collection, record_id, request.query_params.getlist(EMBED_PARAM)
        )
    except UnknownCollectionError:
        raise HTTPException(status_code=404, detail=f"Unknown collection: {collection}")

    if record is None:
        raise HTTPException(status_code=404, detail="Not found")
    return record
