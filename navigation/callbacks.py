"""Transition listeners for the navigator."""

import logging
from typing import Protocol, runtime_checkable

from navigation.states import NavState, describe

logger = logging.getLogger(__name__)


@runtime_checkable
class NavigationListener(Protocol):
    """Protocol for transition listeners.

    Implement this protocol to be told about every accepted transition.
    Rejected transitions are never reported.
    """

    def on_transition(self, previous: NavState, current: NavState, event: str) -> None:
        """Called once after the navigator has moved from ``previous`` to ``current``."""
        ...


class LoggingListener:
    """Lightweight listener that logs each screen change at INFO."""

    def on_transition(self, previous: NavState, current: NavState, event: str) -> None:
        logger.info("[%s] now showing %s", event, describe(current))


class HistoryListener:
    """Keeps every ``(event, state)`` pair in order of arrival."""

    def __init__(self, limit: int = 200):
        self.limit = limit
        self.entries: list[tuple[str, NavState]] = []

    def on_transition(self, previous: NavState, current: NavState, event: str) -> None:
        self.entries.append((event, current))
        if len(self.entries) > self.limit:
            del self.entries[: len(self.entries) - self.limit]

    @property
    def events(self) -> list[str]:
        return [event for event, _ in self.entries]
