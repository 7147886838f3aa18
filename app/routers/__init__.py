from app.routers.site_router import router as site_router, set_site_handler
from app.routers.places_data_router import (
    router as places_data_router,
    set_places_data_handler,
)

__all__ = [
    "site_router",
    "set_site_handler",
    "places_data_router",
    "set_places_data_handler",
]
