"""Catalog package — seed data, the read-only Catalog and external links."""

from catalog.store import Catalog, filter_authors
from catalog.links import page_url, reference_url, search_url

__all__ = [
    "Catalog",
    "filter_authors",
    "page_url",
    "reference_url",
    "search_url",
]
