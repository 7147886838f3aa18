"""Request handlers."""
from app.handlers.site_handler import SiteHandler, RenderedPage
from app.handlers.places_data_handler import PlacesDataHandler, UnknownCollectionError

__all__ = ["SiteHandler", "RenderedPage", "PlacesDataHandler", "UnknownCollectionError"]
