"""External page URLs for a novel title."""

from urllib.parse import quote

from models.enums import PageKind

DEFAULT_SEARCH_BASE = "https://www.google.com/search?q="
DEFAULT_REFERENCE_BASE = "https://zh.wikipedia.org/wiki/"


def _encode(title: str) -> str:
    return quote(title, safe="")


def search_url(title: str, base: str = DEFAULT_SEARCH_BASE) -> str:
    """Search engine query URL for ``title``."""
    return f"{base}{_encode(title)}"


def reference_url(title: str, base: str = DEFAULT_REFERENCE_BASE) -> str:
    """Encyclopedia article URL for ``title``."""
    return f"{base}{_encode(title)}"


def page_url(kind: PageKind, title: str, settings=None) -> str:
    """Dispatch on ``kind``; base URLs come from ``settings`` when given."""
    if kind == PageKind.SEARCH:
        base = settings.search_base_url if settings else DEFAULT_SEARCH_BASE
        return search_url(title, base)
    if kind == PageKind.REFERENCE:
        base = settings.reference_base_url if settings else DEFAULT_REFERENCE_BASE
        return reference_url(title, base)
    raise ValueError(f"Unknown page kind: {kind!r}")
