"""Page components: map embeds, carousels, rating dots and cards."""
from typing import Optional
from urllib.parse import quote

from bs4 import Tag

from app.models import Place, Review
from app.render.dom import add_class, div, element, google_embed_url, iframe, img

DETAIL_PATH = "/detalhe.html"
CARD_DESCRIPTION_LIMIT = 100


def detail_href(slug: str) -> str:
    """Link to the detail view of a place."""
    return f"{DETAIL_PATH}?slug={quote(slug, safe='')}"


def truncate_description(description: str, limit: int = CARD_DESCRIPTION_LIMIT) -> str:
    """Cut at `limit` characters (not at a word boundary) and add an ellipsis.

    Descriptions within the limit are returned unchanged.
    """
    if len(description) <= limit:
        return description
    return description[:limit] + "..."


def create_map(
    lat: float, lng: float, width: Optional[int] = None, height: Optional[int] = None
) -> Tag:
    """Wrap an embedded Google map of the coordinates in a map container."""
    container = div("map-container")
    container.append(iframe(google_embed_url(lat, lng), width=width, height=height))
    return container


def create_rating_indicator(rating: float, max: int = 5) -> Tag:
    """Row of `max` dots; the dot at 1-indexed position p is filled iff round(p) <= rating.

    The rounding applies to the position, so a fractional rating fills the
    dots strictly below it (4.5 fills four dots).
    """
    row = div("d-flex gap-1")

    for i in range(max):
        circle = element(
            "span",
            "rounded-circle border border-primary",
            style="width: 1rem; height: 1rem;",
        )
        if round(i + 1) <= rating:
            add_class(circle, "bg-primary")
        row.append(circle)

    return row


def create_carousel_caption(name: str, description: str) -> Tag:
    caption = div("carousel-caption d-none d-md-block")
    caption.append(element("h3", text=name))
    caption.append(element("p", text=description))
    return caption


def create_carousel_indicator(carousel_id: str, index: int, label: str) -> Tag:
    """Indicator button wired to slide `index` of the carousel `carousel_id`."""
    button = element(
        "button",
        type="button",
        data_bs_target=carousel_id,
        data_bs_slide_to=index,
    )
    if index == 0:
        add_class(button, "active")
        button["aria-current"] = "true"
    button["aria-label"] = label or ""
    return button


def create_carousel_item(
    image: str,
    index: int,
    href: Optional[str] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
) -> Tag:
    """Carousel slide; the first slide is active.

    The caption is only rendered when both name and description are given.
    """
    item = div("carousel-item")
    if index == 0:
        add_class(item, "active")

    picture = img(image, name or "")
    add_class(picture, "d-block", "w-100")
    item.append(picture)

    if href:
        item.append(element("a", "stretched-link", href=href))

    if name and description:
        item.append(create_carousel_caption(name, description))

    return item


def create_place_card(place: Place) -> Tag:
    picture = img(place.thumbnail, place.name)
    add_class(picture, "card-img-top")

    body = div("card-body")
    body.append(element("h5", "card-title", text=place.name))
    body.append(element("p", "card-text", text=truncate_description(place.description)))
    body.append(element("a", text="Ver mais", href=detail_href(place.slug)))

    card = div("card")
    card.append(picture)
    card.append(body)
    return card


def create_review_card(review: Review) -> Tag:
    header = div("d-flex justify-content-between align-items-center")
    header.append(element("h5", "card-title", text=review.reviewer))
    header.append(create_rating_indicator(review.rating))

    body = div("card-body")
    body.append(header)
    body.append(element("p", "card-text", text=review.review))

    card = div("card mb-3")
    card.append(body)
    return card


def error_banner(message: str) -> Tag:
    """Static danger alert shown in place of a section that failed to load."""
    return element("div", "alert alert-danger", text=message)
