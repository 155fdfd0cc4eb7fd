"""Enumerations for catalog categories and navigation sections."""

from enum import Enum
from typing import Optional


class Category(str, Enum):
    MARTIAL = "武俠"
    ROMANCE = "言情"


class Section(str, Enum):
    """Top-level sections offered by the tab bar / sidebar."""
    MARTIAL = "martial"
    ROMANCE = "romance"
    PHOTO_WALL = "photos"

    @property
    def category(self) -> Optional[Category]:
        """Category listed by this section, None for the photo wall."""
        return _SECTION_CATEGORIES.get(self)

    @property
    def label(self) -> str:
        return _SECTION_LABELS[self]

    @classmethod
    def for_category(cls, category: Category) -> "Section":
        for section, cat in _SECTION_CATEGORIES.items():
            if cat == category:
                return section
        raise ValueError(f"No section for category {category!r}")


_SECTION_CATEGORIES = {
    Section.MARTIAL: Category.MARTIAL,
    Section.ROMANCE: Category.ROMANCE,
}

_SECTION_LABELS = {
    Section.MARTIAL: "武俠小說",
    Section.ROMANCE: "言情小說",
    Section.PHOTO_WALL: "照片牆",
}


class PageKind(str, Enum):
    SEARCH = "search"          # search engine query for the title
    REFERENCE = "reference"    # encyclopedia article for the title
