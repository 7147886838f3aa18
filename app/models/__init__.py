"""Data models package for places-guide."""
from app.models.place import (
    Place,
    PlaceDetail,
    PlaceInfo,
    Location,
    Review,
    Image,
    SeedDocument,
)

__all__ = [
    # Place models
    "Place",
    "PlaceDetail",
    "PlaceInfo",
    "Location",
    # Child collections
    "Review",
    "Image",
    # Seed document
    "SeedDocument",
]
