"""Chapter data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chapter:
    """A single chapter; ``number`` is 1-based and matches its position in the novel."""
    id: str
    number: int
    title: str = ""
    content: str = ""

    @property
    def char_count(self) -> int:
        return len("".join(self.content.split()))
