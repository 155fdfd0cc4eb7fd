"""Navigation package — state variants, the navigator and its listeners."""

from navigation.states import (
    AtSectionRoot,
    AuthorSelected,
    AuthorSheetOpen,
    ChapterOpen,
    ExternalPageOpen,
    NavState,
    NovelSelected,
    describe,
)
from navigation.callbacks import HistoryListener, LoggingListener, NavigationListener
from navigation.machine import Navigator
from navigation.session import ReaderSession

__all__ = [
    "AtSectionRoot",
    "AuthorSelected",
    "AuthorSheetOpen",
    "ChapterOpen",
    "ExternalPageOpen",
    "NavState",
    "NovelSelected",
    "describe",
    "HistoryListener",
    "LoggingListener",
    "NavigationListener",
    "Navigator",
    "ReaderSession",
]
