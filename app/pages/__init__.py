"""Page controllers for the home and detail views."""
from app.pages.document import PageDocument, Navigator, ElementNotFoundError
from app.pages.messages import PageMessages
from app.pages.home_page import HomePage
from app.pages.detail_page import DetailPage, average_rating, format_rating
from app.pages.site import initialize_app, page_for_path, HOME_PATHS

__all__ = [
    "PageDocument",
    "Navigator",
    "ElementNotFoundError",
    "PageMessages",
    "HomePage",
    "DetailPage",
    "average_rating",
    "format_rating",
    "initialize_app",
    "page_for_path",
    "HOME_PATHS",
]
