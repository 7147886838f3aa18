"""Fragment builders for the site pages."""
from app.render.dom import div, img, iframe, google_embed_url
from app.render.components import (
    DETAIL_PATH,
    detail_href,
    truncate_description,
    create_map,
    create_rating_indicator,
    create_carousel_caption,
    create_carousel_indicator,
    create_carousel_item,
    create_place_card,
    create_review_card,
    error_banner,
)

__all__ = [
    "div",
    "img",
    "iframe",
    "google_embed_url",
    "DETAIL_PATH",
    "detail_href",
    "truncate_description",
    "create_map",
    "create_rating_indicator",
    "create_carousel_caption",
    "create_carousel_indicator",
    "create_carousel_item",
    "create_place_card",
    "create_review_card",
    "error_banner",
]
