"""Novel data model."""

from dataclasses import dataclass, field

from config.exceptions import CatalogIntegrityError
from models.author import Author
from models.chapter import Chapter

MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass(frozen=True)
class Novel:
    """A novel owned by one author, with its chapters in reading order.

    Construction fails with CatalogIntegrityError unless the rating lies in
    [0, 5] and the chapters are non-empty and numbered 1..n without gaps.
    """
    id: str
    title: str
    author: Author
    cover: str = "book.closed.fill"  # icon name
    description: str = ""
    rating: float = 0.0
    chapters: tuple[Chapter, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "chapters", tuple(self.chapters))
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise CatalogIntegrityError(
                f"Rating of '{self.title}' outside [{MIN_RATING}, {MAX_RATING}]",
                {"novel": self.id, "rating": self.rating},
            )
        if not self.chapters:
            raise CatalogIntegrityError(
                f"Novel '{self.title}' has no chapters", {"novel": self.id}
            )
        numbers = [c.number for c in self.chapters]
        if numbers != list(range(1, len(numbers) + 1)):
            raise CatalogIntegrityError(
                f"Chapters of '{self.title}' are not numbered 1..{len(numbers)}",
                {"novel": self.id, "numbers": numbers},
            )

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    def chapter(self, number: int) -> Chapter | None:
        """Return the chapter with the given number, or None."""
        if 1 <= number <= len(self.chapters):
            return self.chapters[number - 1]
        return None
