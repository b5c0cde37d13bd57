"""Thin query layer over BeautifulSoup."""
from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class HtmlDocument:
    """Lenient, read-only view of an HTML page.

    Every lookup returns ``None`` instead of raising when nothing matches,
    and empty attribute values or empty text count as absent.
    """

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "lxml")

    def first(self, selector: str) -> Tag | None:
        return self.soup.select_one(selector)

    def all(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def attr(self, selector: str, name: str) -> str | None:
        """Attribute ``name`` of the first element matching ``selector``."""
        element = self.first(selector)
        if element is None:
            return None
        return attribute(element, name)

    def text(self, selector: str) -> str | None:
        """Stripped text of the first element matching ``selector``."""
        element = self.first(selector)
        if element is None:
            return None
        return element.get_text().strip() or None

    def joined_text(self, selector: str) -> str | None:
        """Text of every element matching ``selector``, concatenated and stripped."""
        return "".join(element.get_text() for element in self.all(selector)).strip() or None

    def meta_content(self, key: str, value: str) -> str | None:
        """Content of ``<meta key="value">``, e.g. ``("property", "og:title")``."""
        return self.attr(f'meta[{key}="{value}"]', "content")


def attribute(element: Tag, name: str) -> str | None:
    value = element.get(name)
    if isinstance(value, list):
        # Multi-valued attributes such as rel/class come back as lists
        value = " ".join(value)
    return value or None
