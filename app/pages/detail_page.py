"""Detail page of a single place, looked up by the `slug` query parameter."""
import logging
from typing import Optional

from app.api import PlacesRepository
from app.metrics import PAGE_SECTION_ERRORS_TOTAL
from app.models import Image, Location, PlaceDetail, Review
from app.pages.document import Navigator, PageDocument
from app.pages.messages import PageMessages
from app.render import (
    create_carousel_indicator,
    create_carousel_item,
    create_map,
    create_rating_indicator,
    create_review_card,
    div,
    error_banner,
)

logger = logging.getLogger(__name__)

HOME_HREF = "/"
PHOTOS_CAROUSEL = "#photos-carousel"


def average_rating(reviews: list[Review]) -> Optional[float]:
    """Arithmetic mean of the review ratings, None when there are no reviews."""
    if not reviews:
        return None
    return sum(review.rating for review in reviews) / len(reviews)


def format_rating(value: float) -> str:
    return f"{value:.1f}"


class DetailPage:
    """Populates the detail page, or sends the visitor home for unknown slugs."""

    def __init__(self, repository: PlacesRepository, messages: PageMessages):
        self.repository = repository
        self.messages = messages

    async def load(self, document: PageDocument, navigator: Navigator):
        try:
            slug = navigator.get_search_param("slug")
            place = await self.repository.get_place_by_slug(slug) if slug else None

            if place is None:
                logger.info(f"[DetailPage] Place not found for slug={slug!r}, going home")
                navigator.navigate(HOME_HREF)
                return

            self.update_basic_info(document, place)
            self.fill_list(document, "#place-highlights", place.highlights)
            self.fill_list(document, "#place-amenities", place.info.amenities)
            self.fill_list(document, "#place-activities", place.info.activities)
            if place.location is not None:
                self.load_location(document, place.location)
            self.load_photos(document, place.images)
            self.load_reviews(document, place.reviews)

            logger.info(
                f"[DetailPage] Rendered {place.slug}: {len(place.images)} images, "
                f"{len(place.reviews)} reviews"
            )
        except Exception as e:
            logger.error(f"[DetailPage] Error loading place details: {e}")
            PAGE_SECTION_ERRORS_TOTAL.labels(section="detail").inc()
            document.replace_contents("main", error_banner(self.messages.detail_error))

    def update_basic_info(self, document: PageDocument, place: PlaceDetail):
        document.set_text("#place-name", place.name)
        document.set_text("#place-description", place.description)
        document.set_attribute("#place-thumbnail", "src", place.thumbnail)
        document.set_text("#place-opening-hours", place.info.opening_hours)
        document.set_text("#place-address", place.info.address)
        document.set_text("#place-phone", place.info.contact)
        document.set_text("#place-price-range", place.info.price_range)
        document.set_text("#place-website", place.info.website)

    def fill_list(self, document: PageDocument, selector: str, entries: list[str]):
        for entry in entries:
            item = div("list-group-item")
            item.string = entry
            document.append(selector, item)

    def load_location(self, document: PageDocument, location: Location):
        document.append("#place-map", create_map(location.latitude, location.longitude))

    def load_photos(self, document: PageDocument, images: list[Image]):
        for index, photo in enumerate(images):
            item = create_carousel_item(image=photo.src, index=index, name=photo.description)
            document.append(f"{PHOTOS_CAROUSEL} .carousel-inner", item)

            indicator = create_carousel_indicator(
                carousel_id=PHOTOS_CAROUSEL, index=index, label=photo.description
            )
            document.append(f"{PHOTOS_CAROUSEL} .carousel-indicators", indicator)

    def load_reviews(self, document: PageDocument, reviews: list[Review]):
        average = average_rating(reviews)

        if average is None:
            document.set_text("#rating-average", self.messages.no_reviews)
            document.append("#rating-indicator", create_rating_indicator(0))
        else:
            document.set_text("#rating-average", format_rating(average))
            document.append("#rating-indicator", create_rating_indicator(average))
        document.set_text("#rating-count", str(len(reviews)))

        document.append("#reviews", [create_review_card(review) for review in reviews])
