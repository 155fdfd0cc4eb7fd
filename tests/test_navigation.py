"""Tests for the navigation state machine."""

import pytest

from config.exceptions import InvalidReferenceError, NoOpNavigationError
from models.author import Author
from models.chapter import Chapter
from models.enums import Category, PageKind, Section
from navigation.machine import Navigator
from navigation.states import (
    AtSectionRoot,
    AuthorSelected,
    AuthorSheetOpen,
    ChapterOpen,
    ExternalPageOpen,
    NovelSelected,
    describe,
)


@pytest.fixture
def at_novel(navigator, martial_author, martial_novel):
    navigator.select_author(martial_author)
    navigator.select_novel(martial_novel)
    return navigator


class TestInitialState:
    def test_starts_at_default_section_root(self, navigator):
        assert navigator.state == AtSectionRoot(Section.MARTIAL)
        assert navigator.query == ""

    def test_custom_default_section(self, catalog):
        nav = Navigator(catalog, default_section=Section.PHOTO_WALL)
        assert nav.state == AtSectionRoot(Section.PHOTO_WALL)
        assert nav.visible_authors == []


class TestDrillDown:
    def test_select_author(self, navigator, martial_author):
        state = navigator.select_author(martial_author)
        assert state == AuthorSelected(Section.MARTIAL, martial_author)

    def test_select_novel(self, navigator, martial_author, martial_novel):
        navigator.select_author(martial_author)
        assert navigator.select_novel(martial_novel) == NovelSelected(
            Section.MARTIAL, martial_author, martial_novel
        )

    def test_chapter_round_trip(self, at_novel, martial_author, martial_novel):
        before = at_novel.state
        at_novel.open_chapter(martial_novel.chapters[2])
        assert isinstance(at_novel.state, ChapterOpen)
        at_novel.close_chapter()
        assert at_novel.state == before == NovelSelected(Section.MARTIAL, martial_author, martial_novel)

    def test_open_chapter_by_number(self, at_novel, martial_novel):
        state = at_novel.open_chapter_number(4)
        assert state.chapter == martial_novel.chapters[3]

    def test_open_chapter_number_out_of_range(self, at_novel):
        before = at_novel.state
        with pytest.raises(InvalidReferenceError):
            at_novel.open_chapter_number(99)
        assert at_novel.state == before

    def test_external_page_round_trip(self, at_novel, martial_novel):
        before = at_novel.state
        state = at_novel.open_external_page()
        assert isinstance(state, ExternalPageOpen)
        assert state.kind == PageKind.SEARCH
        assert state.url.startswith("https://www.google.com/search?q=")
        at_novel.close_external_page()
        assert at_novel.state == before

    def test_reference_page(self, at_novel):
        state = at_novel.open_external_page(PageKind.REFERENCE)
        assert state.url.startswith("https://zh.wikipedia.org/wiki/")

    def test_external_page_uses_settings(self, catalog, settings, martial_author, martial_novel):
        settings.search_base_url = "https://search.example/?q="
        nav = Navigator(catalog, settings=settings)
        nav.select_author(martial_author)
        nav.select_novel(martial_novel)
        assert nav.open_external_page().url.startswith("https://search.example/?q=")


class TestGoBack:
    def test_three_steps_from_chapter_to_root(self, at_novel, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[0])
        at_novel.go_back()
        assert isinstance(at_novel.state, NovelSelected)
        at_novel.go_back()
        assert isinstance(at_novel.state, AuthorSelected)
        at_novel.go_back()
        assert at_novel.state == AtSectionRoot(Section.MARTIAL)

    def test_back_at_root_fails_and_keeps_state(self, navigator, history):
        with pytest.raises(NoOpNavigationError):
            navigator.go_back()
        assert navigator.state == AtSectionRoot(Section.MARTIAL)
        with pytest.raises(NoOpNavigationError):
            navigator.go_back()
        assert navigator.state == AtSectionRoot(Section.MARTIAL)
        assert history.entries == []

    def test_back_from_external_page(self, at_novel):
        before = at_novel.state
        at_novel.open_external_page()
        at_novel.go_back()
        assert at_novel.state == before


class TestRejectedTransitions:
    def test_novel_of_other_author_rejected(self, catalog, navigator, martial_author):
        navigator.select_author(martial_author)
        before = navigator.state
        other = catalog.list_novels(catalog.get_author("gulong"))[0]
        with pytest.raises(InvalidReferenceError):
            navigator.select_novel(other)
        assert navigator.state == before

    def test_author_from_other_section_rejected(self, navigator, romance_author):
        with pytest.raises(InvalidReferenceError):
            navigator.select_author(romance_author)
        assert navigator.state == AtSectionRoot(Section.MARTIAL)

    def test_unknown_author_rejected(self, navigator):
        with pytest.raises(InvalidReferenceError):
            navigator.select_author(Author(id="x", name="無名", category=Category.MARTIAL))

    def test_no_authors_on_photo_wall(self, navigator, martial_author):
        navigator.select_section(Section.PHOTO_WALL)
        with pytest.raises(InvalidReferenceError):
            navigator.select_author(martial_author)

    def test_chapter_of_other_novel_rejected(self, catalog, at_novel, martial_author):
        other = catalog.list_novels(martial_author)[1]
        before = at_novel.state
        with pytest.raises(InvalidReferenceError):
            at_novel.open_chapter(other.chapters[0])
        assert at_novel.state == before

    def test_foreign_chapter_rejected(self, at_novel):
        with pytest.raises(InvalidReferenceError):
            at_novel.open_chapter(Chapter(id="stray", number=1))

    def test_select_novel_from_root_rejected(self, navigator, martial_novel):
        with pytest.raises(InvalidReferenceError):
            navigator.select_novel(martial_novel)

    def test_select_author_twice_rejected(self, navigator, martial_author):
        navigator.select_author(martial_author)
        with pytest.raises(InvalidReferenceError):
            navigator.select_author(martial_author)

    def test_open_chapter_from_chapter_rejected(self, at_novel, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[0])
        with pytest.raises(InvalidReferenceError):
            at_novel.open_chapter(martial_novel.chapters[1])

    def test_external_page_requires_novel(self, navigator):
        with pytest.raises(InvalidReferenceError):
            navigator.open_external_page()

    def test_close_chapter_when_not_open(self, at_novel):
        before = at_novel.state
        with pytest.raises(NoOpNavigationError):
            at_novel.close_chapter()
        assert at_novel.state == before

    def test_close_external_page_when_chapter_open(self, at_novel, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[0])
        with pytest.raises(NoOpNavigationError):
            at_novel.close_external_page()


class TestSections:
    def test_switch_resets_drill_down(self, at_novel, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[0])
        assert at_novel.select_section(Section.ROMANCE) == AtSectionRoot(Section.ROMANCE)

    def test_switch_clears_query(self, navigator):
        navigator.set_search_query("金")
        navigator.select_section(Section.ROMANCE)
        assert navigator.query == ""

    def test_switch_accepts_string_value(self, navigator):
        navigator.select_section("photos")
        assert navigator.section == Section.PHOTO_WALL

    def test_reselecting_same_section_pops_to_root(self, navigator, martial_author):
        navigator.select_author(martial_author)
        navigator.select_section(Section.MARTIAL)
        assert navigator.state == AtSectionRoot(Section.MARTIAL)


class TestSearch:
    def test_empty_query_lists_all(self, navigator, catalog):
        assert navigator.visible_authors == catalog.list_authors(Category.MARTIAL)

    def test_query_narrows_list(self, navigator, catalog):
        navigator.set_search_query("古")
        assert navigator.visible_authors == [catalog.get_author("gulong")]

    def test_none_query_clears(self, navigator):
        navigator.set_search_query("古")
        navigator.set_search_query(None)
        assert navigator.query == ""

    def test_query_survives_drill_down(self, navigator, martial_author):
        navigator.set_search_query("金")
        navigator.select_author(martial_author)
        navigator.go_back()
        assert navigator.query == "金"
        assert navigator.visible_authors == [martial_author]

    def test_filtered_out_author_still_selectable(self, navigator, catalog):
        navigator.set_search_query("金")
        gulong = catalog.get_author("gulong")
        assert navigator.select_author(gulong) == AuthorSelected(Section.MARTIAL, gulong)


class TestAuthorSheet:
    def test_open_and_close(self, navigator):
        navigator.open_author_sheet()
        assert navigator.state == AuthorSheetOpen(Section.MARTIAL, AtSectionRoot(Section.MARTIAL))
        navigator.close_author_sheet()
        assert navigator.state == AtSectionRoot(Section.MARTIAL)

    def test_sheet_over_novel_restores_on_back(self, at_novel):
        before = at_novel.state
        at_novel.open_author_sheet()
        assert at_novel.state.depth == before.depth + 1
        at_novel.go_back()
        assert at_novel.state == before

    def test_pick_author_from_other_category_switches_section(self, navigator, romance_author):
        navigator.open_author_sheet()
        state = navigator.select_author(romance_author)
        assert state == AuthorSelected(Section.ROMANCE, romance_author)

    def test_section_switch_closes_sheet(self, navigator):
        navigator.open_author_sheet()
        navigator.select_section(Section.PHOTO_WALL)
        assert navigator.state == AtSectionRoot(Section.PHOTO_WALL)

    def test_open_twice_is_noop(self, navigator):
        navigator.open_author_sheet()
        with pytest.raises(NoOpNavigationError):
            navigator.open_author_sheet()

    def test_sheet_lists_every_author_without_query(self, navigator, catalog):
        navigator.open_author_sheet()
        assert navigator.sheet_authors == catalog.all_authors()

    def test_query_narrows_sheet_across_categories(self, navigator, romance_author):
        navigator.open_author_sheet()
        navigator.set_search_query("瓊")
        assert navigator.sheet_authors == [romance_author]
        assert navigator.select_author(navigator.sheet_authors[0]) == AuthorSelected(
            Section.ROMANCE, romance_author
        )

    def test_unknown_author_in_sheet_rejected(self, navigator):
        navigator.open_author_sheet()
        before = navigator.state
        with pytest.raises(InvalidReferenceError):
            navigator.select_author(Author(id="x", name="無名", category=Category.ROMANCE))
        assert navigator.state == before


class TestListeners:
    def test_notified_once_per_transition(self, at_novel, history, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[0])
        assert history.events == ["select_author", "select_novel", "open_chapter"]

    def test_rejected_transition_not_reported(self, navigator, history, martial_novel):
        with pytest.raises(InvalidReferenceError):
            navigator.select_novel(martial_novel)
        assert history.entries == []

    def test_query_change_reported(self, navigator, history):
        navigator.set_search_query("金")
        navigator.set_search_query("金")
        assert history.events == ["set_search_query"]

    def test_subscribe_and_unsubscribe(self, navigator, martial_author):
        seen = []

        class Recorder:
            def on_transition(self, previous, current, event):
                seen.append((previous, current, event))

        recorder = Recorder()
        navigator.subscribe(recorder)
        navigator.subscribe(recorder)
        navigator.select_author(martial_author)
        navigator.unsubscribe(recorder)
        navigator.go_back()
        assert len(seen) == 1
        previous, current, event = seen[0]
        assert previous == AtSectionRoot(Section.MARTIAL)
        assert current == AuthorSelected(Section.MARTIAL, martial_author)
        assert event == "select_author"

    def test_history_limit(self, catalog, martial_author):
        from navigation.callbacks import HistoryListener
        history = HistoryListener(limit=3)
        nav = Navigator(catalog, listeners=[history])
        for _ in range(5):
            nav.select_author(martial_author)
            nav.go_back()
        assert len(history.entries) == 3


class TestDescribe:
    def test_paths(self, at_novel, martial_novel):
        at_novel.open_chapter(martial_novel.chapters[1])
        assert describe(at_novel.state) == "martial/金庸/射鵰英雄傳#2"

    def test_sheet_suffix(self, navigator):
        navigator.open_author_sheet()
        assert describe(navigator.state) == "martial [authors]"
