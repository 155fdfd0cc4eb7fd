"""Navigation state variants.

Each variant carries only the fields that are valid for it, so a novel can
never outlive the author it was reached through.
"""

from dataclasses import dataclass
from typing import Optional, Union

from models.author import Author
from models.chapter import Chapter
from models.enums import PageKind, Section
from models.novel import Novel


@dataclass(frozen=True)
class AtSectionRoot:
    section: Section

    depth = 0

    def parent(self) -> Optional["NavState"]:
        return None


@dataclass(frozen=True)
class AuthorSelected:
    section: Section
    author: Author

    depth = 1

    def parent(self) -> "NavState":
        return AtSectionRoot(self.section)


@dataclass(frozen=True)
class NovelSelected:
    section: Section
    author: Author
    novel: Novel

    depth = 2

    def parent(self) -> "NavState":
        return AuthorSelected(self.section, self.author)


@dataclass(frozen=True)
class ChapterOpen:
    """Chapter reader overlay on top of NovelSelected."""
    section: Section
    author: Author
    novel: Novel
    chapter: Chapter

    depth = 3

    def parent(self) -> "NavState":
        return NovelSelected(self.section, self.author, self.novel)


@dataclass(frozen=True)
class ExternalPageOpen:
    """Embedded web page overlay on top of NovelSelected."""
    section: Section
    author: Author
    novel: Novel
    kind: PageKind
    url: str

    depth = 3

    def parent(self) -> "NavState":
        return NovelSelected(self.section, self.author, self.novel)


@dataclass(frozen=True)
class AuthorSheetOpen:
    """The "all authors" sheet, layered over whatever was showing before."""
    section: Section
    underlying: "NavState"

    @property
    def depth(self) -> int:
        return self.underlying.depth + 1

    def parent(self) -> "NavState":
        return self.underlying


NavState = Union[
    AtSectionRoot,
    AuthorSelected,
    NovelSelected,
    ChapterOpen,
    ExternalPageOpen,
    AuthorSheetOpen,
]


def describe(state: NavState) -> str:
    """Short human-readable path, e.g. ``martial/金庸/射鵰英雄傳#3``."""
    if isinstance(state, AuthorSheetOpen):
        return f"{describe(state.underlying)} [authors]"
    parts = [state.section.value]
    author = getattr(state, "author", None)
    if author is not None:
        parts.append(author.name)
    novel = getattr(state, "novel", None)
    if novel is not None:
        parts.append(novel.title)
    path = "/".join(parts)
    if isinstance(state, ChapterOpen):
        path += f"#{state.chapter.number}"
    elif isinstance(state, ExternalPageOpen):
        path += f" [{state.kind.value}]"
    return path
