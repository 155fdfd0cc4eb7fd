"""Navigation state machine: section → author → novel → chapter / external page.

All transitions are synchronous. A rejected transition raises before any
state is touched, so the navigator is always left where it was.
"""

import logging
from typing import Iterable, Optional

from catalog.links import page_url
from catalog.store import Catalog, filter_authors
from config.exceptions import InvalidReferenceError, NoOpNavigationError
from models.author import Author
from models.chapter import Chapter
from models.enums import PageKind, Section
from models.novel import Novel
from navigation.callbacks import NavigationListener
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

logger = logging.getLogger(__name__)


class Navigator:
    """Owns the navigation state of one session.

    Args:
        catalog: Read-only catalog every selection is checked against.
        default_section: Section shown at start.
        listeners: Notified after each accepted transition.
        settings: Optional Settings supplying external page base URLs.
    """

    def __init__(
        self,
        catalog: Catalog,
        default_section: Section = Section.MARTIAL,
        listeners: Iterable[NavigationListener] = (),
        settings=None,
    ):
        self.catalog = catalog
        self.settings = settings
        self._state: NavState = AtSectionRoot(default_section)
        self._query = ""
        self._listeners: list[NavigationListener] = list(listeners)

    # ── Read access ───────────────────────────────────────────────────────

    @property
    def state(self) -> NavState:
        return self._state

    @property
    def section(self) -> Section:
        return self._state.section

    @property
    def query(self) -> str:
        return self._query

    @property
    def section_authors(self) -> list[Author]:
        return self.catalog.authors_for_section(self.section)

    @property
    def visible_authors(self) -> list[Author]:
        """Authors listed at the section root after applying the search query."""
        return filter_authors(self.section_authors, self._query)

    @property
    def sheet_authors(self) -> list[Author]:
        """Authors listed in the "all authors" sheet after applying the search query."""
        return filter_authors(self.catalog.all_authors(), self._query)

    # ── Listeners ─────────────────────────────────────────────────────────

    def subscribe(self, listener: NavigationListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: NavigationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Transitions ───────────────────────────────────────────────────────

    def select_section(self, section: Section) -> NavState:
        """Switch top-level section; always lands on its root with no query."""
        section = Section(section)
        self._query = ""
        return self._move(AtSectionRoot(section), "select_section")

    def select_author(self, author: Author) -> NavState:
        state = self._state
        if isinstance(state, AuthorSheetOpen):
            if not self.catalog.has_author(author):
                raise InvalidReferenceError("author", _ref(author))
            section = Section.for_category(author.category)
            if section != state.section:
                self._query = ""
            return self._move(AuthorSelected(section, author), "select_author")

        self._require(state, AtSectionRoot, "select_author")
        if author not in self.section_authors:
            raise InvalidReferenceError(
                "author", _ref(author),
                f"Author not listed in section '{state.section.value}'",
            )
        return self._move(AuthorSelected(state.section, author), "select_author")

    def select_novel(self, novel: Novel) -> NavState:
        state = self._require(self._state, AuthorSelected, "select_novel")
        if novel.author != state.author or novel not in self.catalog.list_novels(state.author):
            raise InvalidReferenceError(
                "novel", _ref(novel),
                f"Novel does not belong to {state.author.name}",
            )
        return self._move(NovelSelected(state.section, state.author, novel), "select_novel")

    def open_chapter(self, chapter: Chapter) -> NavState:
        state = self._require(self._state, NovelSelected, "open_chapter")
        if chapter not in state.novel.chapters:
            raise InvalidReferenceError(
                "chapter", _ref(chapter),
                f"Chapter not part of '{state.novel.title}'",
            )
        return self._move(
            ChapterOpen(state.section, state.author, state.novel, chapter), "open_chapter"
        )

    def open_chapter_number(self, number: int) -> NavState:
        """Open a chapter of the selected novel by its 1-based number."""
        state = self._require(self._state, NovelSelected, "open_chapter")
        chapter = state.novel.chapter(number)
        if chapter is None:
            raise InvalidReferenceError("chapter", str(number))
        return self.open_chapter(chapter)

    def close_chapter(self) -> NavState:
        return self._close(ChapterOpen, "close_chapter")

    def open_external_page(self, kind: PageKind = PageKind.SEARCH) -> NavState:
        state = self._require(self._state, NovelSelected, "open_external_page")
        kind = PageKind(kind)
        url = page_url(kind, state.novel.title, self.settings)
        return self._move(
            ExternalPageOpen(state.section, state.author, state.novel, kind, url),
            "open_external_page",
        )

    def close_external_page(self) -> NavState:
        return self._close(ExternalPageOpen, "close_external_page")

    def open_author_sheet(self) -> NavState:
        if isinstance(self._state, AuthorSheetOpen):
            raise NoOpNavigationError("open_author_sheet", describe(self._state))
        return self._move(AuthorSheetOpen(self.section, self._state), "open_author_sheet")

    def close_author_sheet(self) -> NavState:
        return self._close(AuthorSheetOpen, "close_author_sheet")

    def go_back(self) -> NavState:
        """Pop one level. Raises NoOpNavigationError at a section root."""
        parent = self._state.parent()
        if parent is None:
            raise NoOpNavigationError("go_back", describe(self._state))
        return self._move(parent, "go_back")

    def set_search_query(self, query: Optional[str]) -> str:
        query = query or ""
        if query != self._query:
            self._query = query
            self._notify(self._state, self._state, "set_search_query")
        return self._query

    # ── Internals ─────────────────────────────────────────────────────────

    def _require(self, state: NavState, expected: type, event: str):
        if not isinstance(state, expected):
            raise InvalidReferenceError(
                "state", describe(state),
                f"'{event}' is not available from {type(state).__name__}",
            )
        return state

    def _close(self, overlay: type, event: str) -> NavState:
        if not isinstance(self._state, overlay):
            raise NoOpNavigationError(event, describe(self._state))
        return self._move(self._state.parent(), event)

    def _move(self, new_state: NavState, event: str) -> NavState:
        previous = self._state
        self._state = new_state
        logger.debug("%s: %s → %s", event, describe(previous), describe(new_state))
        self._notify(previous, new_state, event)
        return new_state

    def _notify(self, previous: NavState, current: NavState, event: str) -> None:
        for listener in list(self._listeners):
            listener.on_transition(previous, current, event)


def _ref(entity) -> str:
    return str(getattr(entity, "id", entity))
