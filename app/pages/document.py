"""Rendering target and navigation capabilities handed to page controllers."""
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class ElementNotFoundError(LookupError):
    """A selector matched nothing in the page document."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No element matches selector {selector!r}")


class PageDocument:
    """Parsed page template that controllers populate in place."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "html.parser")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PageDocument":
        with open(path, "r", encoding="utf-8") as f:
            return cls(f.read())

    def query_selector(self, selector: str) -> Tag:
        """Return the first element matching a CSS selector.

        Raises:
            ElementNotFoundError: If nothing matches
        """
        found = self.soup.select_one(selector)
        if found is None:
            raise ElementNotFoundError(selector)
        return found

    def set_text(self, selector: str, text: str) -> Tag:
        target = self.query_selector(selector)
        target.string = text
        return target

    def set_attribute(self, selector: str, name: str, value: str) -> Tag:
        target = self.query_selector(selector)
        target[name] = value
        return target

    def append(self, selector: str, nodes: Union[Tag, Iterable[Tag]]) -> Tag:
        """Append one element or several to the element matching `selector`."""
        target = self.query_selector(selector)
        if isinstance(nodes, Tag):
            nodes = [nodes]
        for node in nodes:
            target.append(node)
        return target

    def replace_contents(self, selector: str, node: Tag) -> Tag:
        """Drop every child of the matching element and insert `node` instead."""
        target = self.query_selector(selector)
        target.clear()
        target.append(node)
        return target

    def render(self) -> str:
        return str(self.soup)


class Navigator:
    """Current location of the page and a way to leave it.

    A controller that calls navigate() expects the caller to answer with a
    redirect instead of the rendered document.
    """

    def __init__(self, path: str = "/", query: Optional[Mapping[str, str]] = None):
        self.path = path
        self.query = dict(query or {})
        self.redirect_to: Optional[str] = None

    def get_search_param(self, name: str) -> Optional[str]:
        return self.query.get(name)

    def navigate(self, href: str):
        logger.info(f"[Navigator] Navigating from {self.path} to {href}")
        self.redirect_to = href

    @property
    def redirected(self) -> bool:
        return self.redirect_to is not None
