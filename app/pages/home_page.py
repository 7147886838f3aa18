"""Home page: highlight carousel and the card grid of every place."""
import asyncio
import logging

from app.api import PlacesRepository
from app.metrics import PAGE_SECTION_ERRORS_TOTAL
from app.pages.document import PageDocument
from app.pages.messages import PageMessages
from app.render import (
    create_carousel_indicator,
    create_carousel_item,
    create_place_card,
    detail_href,
    div,
    error_banner,
)

logger = logging.getLogger(__name__)

HIGHLIGHT_CAROUSEL = "#hightlight-carousel"
PLACES_GRID = "#places"
CARD_WRAPPER_CLASS = "col-12 col-sm-6 col-md-4 col-lg-3 mb-3"


class HomePage:
    """Populates the home page.

    The two sections are fetched concurrently and fail independently: a
    failing section gets its own error banner and the other still renders.
    """

    def __init__(self, repository: PlacesRepository, messages: PageMessages):
        self.repository = repository
        self.messages = messages

    async def load(self, document: PageDocument):
        # Both sections finish before a failure escapes to the caller
        results = await asyncio.gather(
            self.load_highlighted_places(document),
            self.load_all_places(document),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def load_highlighted_places(self, document: PageDocument):
        try:
            places = await self.repository.get_highlighted_places()

            for index, place in enumerate(places):
                item = create_carousel_item(
                    image=place.thumbnail,
                    index=index,
                    href=detail_href(place.slug),
                    name=place.name,
                    description=place.description,
                )
                document.append(f"{HIGHLIGHT_CAROUSEL} .carousel-inner", item)

                indicator = create_carousel_indicator(
                    carousel_id=HIGHLIGHT_CAROUSEL, index=index, label=place.name
                )
                document.append(f"{HIGHLIGHT_CAROUSEL} .carousel-indicators", indicator)

            logger.info(f"[HomePage] Rendered {len(places)} highlighted places")
        except Exception as e:
            logger.error(f"[HomePage] Error loading highlighted places: {e}")
            PAGE_SECTION_ERRORS_TOTAL.labels(section="highlights").inc()
            document.replace_contents(
                HIGHLIGHT_CAROUSEL, error_banner(self.messages.highlights_error)
            )

    async def load_all_places(self, document: PageDocument):
        try:
            places = await self.repository.get_all_places()

            for place in places:
                wrapper = div(CARD_WRAPPER_CLASS)
                wrapper.append(create_place_card(place))
                document.append(PLACES_GRID, wrapper)

            logger.info(f"[HomePage] Rendered {len(places)} place cards")
        except Exception as e:
            logger.error(f"[HomePage] Error loading all places: {e}")
            PAGE_SECTION_ERRORS_TOTAL.labels(section="places").inc()
            document.replace_contents(PLACES_GRID, error_banner(self.messages.places_error))
