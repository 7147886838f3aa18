"""Low-level element builders.

Elements are detached BeautifulSoup tags; they are attached to a page
by the page controllers.
"""
from typing import Optional

from bs4 import BeautifulSoup, Tag

# Tag factory only; nothing is ever attached to it
_factory = BeautifulSoup("", "html.parser")


def element(name: str, class_name: Optional[str] = None, text: Optional[str] = None, **attrs) -> Tag:
    """Create a tag with optional space-separated classes and text content.

    Attribute names use underscores for dashes (aria_label -> aria-label).
    """
    tag = _factory.new_tag(name)
    if class_name:
        add_class(tag, *class_name.split())
    for key, value in attrs.items():
        tag[key.replace("_", "-")] = str(value)
    if text is not None:
        tag.string = text
    return tag


def add_class(tag: Tag, *names: str) -> Tag:
    """Append classes to a tag, skipping ones it already has."""
    classes = list(tag.get("class") or [])
    for name in names:
        if name not in classes:
            classes.append(name)
    tag["class"] = classes
    return tag


def has_class(tag: Tag, name: str) -> bool:
    return name in (tag.get("class") or [])


def fragment(html: str) -> list:
    """Parse an HTML snippet into a list of detached nodes."""
    parsed = BeautifulSoup(html, "html.parser")
    return [node.extract() for node in list(parsed.contents)]


def div(class_name: str, content: Optional[str] = None) -> Tag:
    """Create a div with the given classes and optional inner HTML."""
    tag = element("div", class_name)
    if content:
        for node in fragment(content):
            tag.append(node)
    return tag


def img(src: str, alt: str = "") -> Tag:
    return element("img", src=src, alt=alt or "")


def google_embed_url(lat: float, lng: float) -> str:
    """Google Maps embed URL for a latitude/longitude pair."""
    return f"https://www.google.com/maps?q={lat},{lng}&output=embed"


def iframe(url: str, width: Optional[int] = None, height: Optional[int] = None) -> Tag:
    """Create a lazy-loading, fullscreen-capable iframe (600x450 by default)."""
    frame = element(
        "iframe",
        src=url,
        width=width if width is not None else 600,
        height=height if height is not None else 450,
        loading="lazy",
    )
    frame["allowfullscreen"] = ""
    return frame
