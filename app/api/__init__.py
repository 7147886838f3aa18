"""HTTP clients for external services."""
from app.api.places_repository import PlacesRepository, PlacesRepositoryError

__all__ = ["PlacesRepository", "PlacesRepositoryError"]
