"""Author data model."""

from dataclasses import dataclass

from models.enums import Category


@dataclass(frozen=True)
class Author:
    """An author listed under exactly one category."""
    id: str
    name: str
    avatar: str = "person.circle.fill"  # icon name
    bio: str = ""
    category: Category = Category.MARTIAL
