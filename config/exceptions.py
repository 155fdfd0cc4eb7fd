"""Custom exception hierarchy for the e-book library."""

from typing import Optional


class EBookError(Exception):
    """Base exception for all e-book library errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# ---- Catalog Errors ----

class CatalogError(EBookError):
    """Base exception for catalog lookups and catalog construction."""


class CatalogIntegrityError(CatalogError):
    """A catalog entity was built with inconsistent data."""


class InvalidReferenceError(CatalogError):
    """An author, novel or chapter is not reachable from where it was requested."""

    def __init__(self, kind: str, ref: str, message: str = ""):
        msg = message or f"Unknown {kind}: {ref}"
        super().__init__(msg, {"kind": kind, "ref": ref})
        self.kind = kind
        self.ref = ref


# ---- Navigation Errors ----

class NavigationError(EBookError):
    """Base exception for rejected navigation transitions."""


class NoOpNavigationError(NavigationError):
    """The requested transition would not change anything (e.g. back at the root)."""

    def __init__(self, event: str, state: str = ""):
        msg = f"Nothing to do for '{event}'"
        super().__init__(msg, {"state": state} if state else None)
        self.event = event
        self.state = state


# ---- Validation Errors ----

class ValidationError(EBookError):
    """Input validation failed."""


class InvalidConfigError(ValidationError):
    """Configuration value is invalid."""
