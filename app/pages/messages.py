"""Localized texts shown by the page controllers."""
from pydantic import BaseModel

from app.config import Settings


def _default(field_name: str) -> str:
    """Default text of a `Settings` message field."""
    return Settings.model_fields[field_name].default


class PageMessages(BaseModel):
    """Error banners and placeholders (pt-BR by default)."""

    highlights_error: str = _default("highlights_error_message")
    places_error: str = _default("places_error_message")
    detail_error: str = _default("detail_error_message")
    init_error: str = _default("init_error_message")
    no_reviews: str = _default("no_reviews_message")

    @classmethod
    def from_settings(cls, settings: Settings) -> "PageMessages":
        return cls(
            highlights_error=settings.highlights_error_message,
            places_error=settings.places_error_message,
            detail_error=settings.detail_error_message,
            init_error=settings.init_error_message,
            no_reviews=settings.no_reviews_message,
        )
