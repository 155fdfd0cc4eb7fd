"""Interactive terminal browser driven by the navigator."""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from cli.render import render_state
from cli.theme import DARK_THEME, get_console, warning_panel
from config.exceptions import NavigationError, CatalogError
from models.enums import PageKind, Section
from navigation.session import ReaderSession
from navigation.states import (
    AtSectionRoot,
    AuthorSelected,
    AuthorSheetOpen,
    ExternalPageOpen,
    NavState,
    NovelSelected,
    describe,
)

logger = logging.getLogger(__name__)

_SECTION_ALIASES = {
    "martial": Section.MARTIAL, "m": Section.MARTIAL, "武俠": Section.MARTIAL,
    "romance": Section.ROMANCE, "r": Section.ROMANCE, "言情": Section.ROMANCE,
    "photos": Section.PHOTO_WALL, "p": Section.PHOTO_WALL, "照片牆": Section.PHOTO_WALL,
}

QUIT = object()


def selectable_items(session: ReaderSession, state: NavState) -> list:
    """Entities the user can pick by number on the current screen."""
    navigator = session.navigator
    if isinstance(state, AuthorSheetOpen):
        return navigator.sheet_authors
    if isinstance(state, AtSectionRoot):
        return navigator.visible_authors
    if isinstance(state, AuthorSelected):
        return session.catalog.list_novels(state.author)
    if isinstance(state, NovelSelected):
        return list(state.novel.chapters)
    return []


class BrowseSession:
    """Reads commands, applies them to the navigator and re-renders on every transition."""

    def __init__(self, session: ReaderSession, console: Optional[Console] = None):
        self.session = session
        self.console = console or get_console()
        self._dark_pushed = False
        session.navigator.subscribe(self)
        if session.dark_mode:
            self._apply_theme()

    # NavigationListener
    def on_transition(self, previous: NavState, current: NavState, event: str) -> None:
        self.redraw()

    def redraw(self) -> None:
        self.console.print(render_state(self.session))

    # ── Commands ──────────────────────────────────────────────────────────

    def handle_command(self, cmd: str):
        """Apply one command. Returns display text, ``QUIT``, or None when the screen redrew."""
        cmd = cmd.strip()
        if not self.session.in_library:
            if cmd in ("q", "quit"):
                return QUIT
            self.session.enter_library()
            self.redraw()
            return None

        if not cmd:
            return None
        try:
            return self._dispatch(cmd)
        except (NavigationError, CatalogError) as e:
            logger.debug("Rejected command %r: %s", cmd, e)
            return f"[warning]{escape(e.message)}[/]"

    def _dispatch(self, cmd: str):
        navigator = self.session.navigator
        parts = cmd.split(maxsplit=1)
        command = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""

        if cmd.startswith("/"):
            navigator.set_search_query(cmd[1:].strip())
            return None

        if command.isdigit():
            return self._select(int(command))

        if command in ("q", "quit", "exit"):
            return QUIT
        if command in ("?", "help"):
            return self._cmd_help()
        if command in ("b", "back"):
            navigator.go_back()
            return None
        if command in ("s", "section"):
            section = _SECTION_ALIASES.get(arg.lower()) or _SECTION_ALIASES.get(arg)
            if section is None:
                return f"[error]未知分類: {arg}[/]"
            navigator.select_section(section)
            return None
        if command == "w":
            navigator.open_external_page(PageKind.SEARCH)
            return None
        if command == "r":
            navigator.open_external_page(PageKind.REFERENCE)
            return None
        if command == "o":
            return self._cmd_open()
        if command == "a":
            if isinstance(navigator.state, AuthorSheetOpen):
                navigator.close_author_sheet()
            else:
                navigator.open_author_sheet()
            return None
        if command == "t":
            self.session.toggle_dark_mode()
            self._apply_theme()
            self.redraw()
            return None
        if command == "h":
            return self._cmd_history()

        return f"[error]未知命令: {command}[/]\n輸入 ? 查看可用命令"

    def _select(self, number: int):
        navigator = self.session.navigator
        state = navigator.state
        items = selectable_items(self.session, state)
        if not 1 <= number <= len(items):
            return f"[warning]沒有第 {number} 項[/]"
        item = items[number - 1]
        if isinstance(state, (AtSectionRoot, AuthorSheetOpen)):
            navigator.select_author(item)
        elif isinstance(state, AuthorSelected):
            navigator.select_novel(item)
        else:
            navigator.open_chapter(item)
        return None

    def _cmd_open(self) -> str:
        state = self.session.navigator.state
        if not isinstance(state, ExternalPageOpen):
            return "[warning]目前沒有開啟的網頁[/]"
        click.launch(state.url)
        logger.info("Launched browser for %s", state.url)
        return f"[success]已在瀏覽器開啟[/] [muted]{state.url}[/]"

    def _cmd_history(self) -> str:
        entries = self.session.history.entries
        if not entries:
            return "[muted]尚無瀏覽紀錄[/]"
        lines = [f"  [muted]{event:<20}[/] {escape(describe(state))}" for event, state in entries[-15:]]
        return "\n".join(["[bold]瀏覽紀錄[/]", *lines])

    def _cmd_help(self) -> str:
        lines = [
            "[bold]快捷命令[/]",
            "",
            "  [accent]數字[/]        選擇作者 / 作品 / 章節",
            "  [accent]b[/]           返回上一層",
            "  [accent]s 分類[/]      切換分類（martial / romance / photos）",
            "  [accent]/關鍵字[/]     搜尋作者（只輸入 / 清除）",
            "  [accent]w[/] / [accent]r[/]       網頁搜尋 / 查看維基",
            "  [accent]o[/]           在瀏覽器開啟目前網頁",
            "  [accent]a[/]           所有作者",
            "  [accent]t[/]           切換深淺模式",
            "  [accent]h[/]           瀏覽紀錄",
            "  [accent]q[/]           離開",
        ]
        return "\n".join(lines)

    def _apply_theme(self) -> None:
        if self.session.dark_mode and not self._dark_pushed:
            self.console.push_theme(DARK_THEME)
            self._dark_pushed = True
        elif not self.session.dark_mode and self._dark_pushed:
            self.console.pop_theme()
            self._dark_pushed = False

    # ── Main loop ─────────────────────────────────────────────────────────

    def run(self) -> None:
        self.redraw()
        while True:
            try:
                user_input = self.console.input("[accent]>[/] ")
            except (EOFError, KeyboardInterrupt):
                self.console.print("\n[muted]再見！[/]")
                break

            result = self.handle_command(user_input)
            if result is QUIT:
                self.console.print("[muted]再見！[/]")
                break
            if result:
                self.console.print(warning_panel(result) if result.startswith("[warning]") else result)
