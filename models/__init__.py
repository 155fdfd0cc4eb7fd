"""Models package — immutable catalog entities and enums."""

from models.enums import Category, Section, PageKind
from models.author import Author
from models.chapter import Chapter
from models.novel import Novel
from models.photo import PhotoItem

__all__ = [
    "Author",
    "Novel",
    "Chapter",
    "PhotoItem",
    "Category",
    "Section",
    "PageKind",
]
