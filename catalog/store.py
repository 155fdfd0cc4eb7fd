"""Read-only in-memory catalog of authors, novels and photo wall items."""

import logging
from typing import Iterable, Optional

from catalog.seed import (
    AUTHOR_TABLE,
    NOVEL_TABLE,
    PHOTO_URL_TEMPLATE,
    chapter_content,
    chapter_title,
)
from config.exceptions import InvalidReferenceError
from models.author import Author
from models.chapter import Chapter
from models.enums import Category, Section
from models.novel import Novel
from models.photo import PhotoItem

logger = logging.getLogger(__name__)


def filter_authors(authors: Iterable[Author], query: str) -> list[Author]:
    """Case-sensitive substring match over author names, order preserved.

    An empty query returns every author.
    """
    authors = list(authors)
    if not query:
        return authors
    return [a for a in authors if query in a.name]


class Catalog:
    """Immutable catalog built once per process and passed to whoever needs it."""

    def __init__(
        self,
        authors: Iterable[Author],
        novels: dict[str, list[Novel]],
        photos: Iterable[PhotoItem] = (),
    ):
        self._authors: tuple[Author, ...] = tuple(authors)
        self._authors_by_id = {a.id: a for a in self._authors}
        self._novels = {aid: tuple(ns) for aid, ns in novels.items()}
        self._novels_by_id = {n.id: n for ns in self._novels.values() for n in ns}
        self._photos: tuple[PhotoItem, ...] = tuple(photos)

        for author_id, author_novels in self._novels.items():
            owner = self._authors_by_id.get(author_id)
            if owner is None:
                raise InvalidReferenceError("author", author_id)
            for novel in author_novels:
                if novel.author != owner:
                    raise InvalidReferenceError(
                        "novel", novel.id, f"Novel '{novel.title}' filed under wrong author"
                    )

    @classmethod
    def from_seed(
        cls,
        chapters_per_novel: int = 5,
        photo_count: int = 50,
        photo_size: int = 400,
    ) -> "Catalog":
        """Build the sample catalog from the seed tables."""
        authors: list[Author] = []
        novels: dict[str, list[Novel]] = {}
        for category in Category:
            for author_id, name, avatar, bio in AUTHOR_TABLE[category]:
                author = Author(id=author_id, name=name, avatar=avatar, bio=bio, category=category)
                authors.append(author)
                novels[author.id] = [
                    _build_novel(author, row, chapters_per_novel)
                    for row in NOVEL_TABLE[category]
                ]

        photos = [
            PhotoItem(id=i, url=PHOTO_URL_TEMPLATE.format(image_id=i * 3, size=photo_size))
            for i in range(1, photo_count + 1)
        ]
        catalog = cls(authors, novels, photos)
        logger.debug(
            "Catalog built: %d authors, %d novels, %d photos",
            len(catalog._authors), len(catalog._novels_by_id), len(photos),
        )
        return catalog

    @classmethod
    def from_settings(cls, settings) -> "Catalog":
        return cls.from_seed(
            chapters_per_novel=settings.chapters_per_novel,
            photo_count=settings.photo_count,
            photo_size=settings.photo_size,
        )

    # ── Authors ───────────────────────────────────────────────────────────

    def list_authors(self, category: Category) -> list[Author]:
        return [a for a in self._authors if a.category == category]

    def all_authors(self) -> list[Author]:
        """Every author, grouped by category in declaration order."""
        return [a for category in Category for a in self.list_authors(category)]

    def authors_for_section(self, section: Section) -> list[Author]:
        category = section.category
        if category is None:
            return []
        return self.list_authors(category)

    def get_author(self, author_id: str) -> Author:
        author = self._authors_by_id.get(author_id)
        if author is None:
            raise InvalidReferenceError("author", author_id)
        return author

    def find_author(self, name: str) -> Optional[Author]:
        """Exact name lookup, None when absent."""
        for author in self._authors:
            if author.name == name:
                return author
        return None

    def has_author(self, author: Author) -> bool:
        return self._authors_by_id.get(getattr(author, "id", None)) == author

    # ── Novels ────────────────────────────────────────────────────────────

    def list_novels(self, author: Author) -> list[Novel]:
        if not self.has_author(author):
            raise InvalidReferenceError("author", getattr(author, "id", repr(author)))
        return list(self._novels.get(author.id, ()))

    def featured_novels(self, author: Author, limit: int = 3) -> list[Novel]:
        return self.list_novels(author)[:limit]

    def get_novel(self, novel_id: str) -> Novel:
        novel = self._novels_by_id.get(novel_id)
        if novel is None:
            raise InvalidReferenceError("novel", novel_id)
        return novel

    # ── Photo wall ────────────────────────────────────────────────────────

    def photo_items(self) -> list[PhotoItem]:
        return list(self._photos)


def _build_novel(author: Author, row: tuple, chapter_count: int) -> Novel:
    slug, title, cover, description, rating, subtitle = row
    novel_id = f"{author.id}-{slug}"
    chapters = [
        Chapter(
            id=f"{novel_id}-{n}",
            number=n,
            title=chapter_title(n, subtitle),
            content=chapter_content(n),
        )
        for n in range(1, chapter_count + 1)
    ]
    return Novel(
        id=novel_id,
        title=title,
        author=author,
        cover=cover,
        description=description,
        rating=rating,
        chapters=chapters,
    )
