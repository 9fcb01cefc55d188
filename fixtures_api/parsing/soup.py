from bs4 import BeautifulSoup
from bs4.element import Tag
from typing import Optional


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def text_of(el: Optional[Tag]) -> str:
    """Trimmed text of an element, empty string when the element is missing"""
    if el is None:
        return ""
    return el.get_text().strip()
