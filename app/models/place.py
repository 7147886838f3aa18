"""Place catalog data models using Pydantic.

Wire format is the camelCase JSON served by the places data service;
attributes are snake_case and both spellings are accepted on input.
"""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PlaceInfo(BaseModel):
    """Practical information block of a place."""

    opening_hours: str = Field(default="", alias="openingHours")
    address: str = ""
    contact: str = ""
    price_range: str = Field(default="", alias="priceRange")
    website: str = ""
    amenities: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class Location(BaseModel):
    """Latitude/longitude pair."""

    latitude: float
    longitude: float


class Review(BaseModel):
    """A visitor review of a place. Rating is on a 0-5 scale."""

    id: Optional[Union[int, str]] = None
    reviewer: str
    review: str = ""
    rating: float
    place_id: Optional[Union[int, str]] = Field(default=None, alias="placeId")

    model_config = ConfigDict(populate_by_name=True)


class Image(BaseModel):
    """A photo of a place."""

    id: Optional[Union[int, str]] = None
    src: str
    description: str = ""
    place_id: Optional[Union[int, str]] = Field(default=None, alias="placeId")

    model_config = ConfigDict(populate_by_name=True)


class Place(BaseModel):
    """A point of interest. `slug` is the public-facing stable key."""

    id: Union[int, str]
    slug: str
    name: str
    description: str = ""
    thumbnail: str = ""
    info: PlaceInfo = Field(default_factory=PlaceInfo)
    highlights: list[str] = Field(default_factory=list)
    location: Optional[Location] = None
    highlight: bool = False

    model_config = ConfigDict(populate_by_name=True)


class PlaceDetail(Place):
    """Place with its reviews and images embedded inline."""

    reviews: list[Review] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)


class SeedDocument(BaseModel):
    """Flat multi-collection document served by the mock data service."""

    places: list[dict] = Field(default_factory=list)
    reviews: list[dict] = Field(default_factory=list)
    images: list[dict] = Field(default_factory=list)

    def collection(self, name: str) -> Optional[list[dict]]:
        """Return the named collection, or None if it does not exist."""
        if name in ("places", "reviews", "images"):
            return getattr(self, name)
        return None
