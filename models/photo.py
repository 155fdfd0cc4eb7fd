"""Photo wall item."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoItem:
    id: int
    url: str
