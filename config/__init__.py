"""Configuration package — settings, logging, and exceptions."""

from config.exceptions import (
    EBookError,
    CatalogError,
    CatalogIntegrityError,
    InvalidReferenceError,
    NavigationError,
    NoOpNavigationError,
    ValidationError,
    InvalidConfigError,
)
from config.logging_config import setup_logging
from config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "EBookError",
    "CatalogError",
    "CatalogIntegrityError",
    "InvalidReferenceError",
    "NavigationError",
    "NoOpNavigationError",
    "ValidationError",
    "InvalidConfigError",
]
