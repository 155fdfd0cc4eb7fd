"""State → renderable. One function call per accepted transition."""

from rich import box
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.theme import (
    app_header,
    author_card,
    author_header,
    chapter_list,
    chapter_panel,
    featured_strip,
    genre_style,
    link_panel,
    novel_summary_panel,
    novel_table,
    photo_grid,
)
from models.enums import PageKind, Section
from navigation.session import ReaderSession
from navigation.states import (
    AtSectionRoot,
    AuthorSelected,
    AuthorSheetOpen,
    ChapterOpen,
    ExternalPageOpen,
    NovelSelected,
)

_PAGE_TITLES = {
    PageKind.SEARCH: "網頁搜尋",
    PageKind.REFERENCE: "查看維基",
}

_FEATURE_TAGS = ["深色模式", "多裝置支援", "精美封面", "書籤功能", "網路圖片"]


def landing_view() -> RenderableType:
    features = Table(box=None, show_header=False, padding=(0, 2))
    features.add_column(style="genre.martial")
    features.add_column(style="genre.romance")
    features.add_column(style="accent")
    features.add_row("武俠世界", "浪漫言情", "精美設計")
    features.add_row("[muted]刀光劍影，俠義江湖[/]", "[muted]柔情似水，愛恨交織[/]", "[muted]流暢動畫，極致體驗[/]")
    return Group(
        app_header(),
        "[muted]武俠江湖 · 浪漫言情[/]",
        "",
        features,
        "",
        "[muted]" + " · ".join(_FEATURE_TAGS) + "[/]",
        "",
        "[bold]按 Enter 開始閱讀[/]",
    )


def section_bar(current: Section, layout: str) -> RenderableType:
    """Tab bar on phones, sidebar list on tablets."""
    labels = []
    for section in Section:
        label = section.label
        labels.append(f"[reverse] {label} [/]" if section == current else f" {label} ")
    if layout == "tablet":
        return Panel("\n".join(labels), title="[bold]E-Book[/]", box=box.SIMPLE, expand=False)
    return Panel("  ".join(labels), box=box.SIMPLE)


def render_state(session: ReaderSession) -> RenderableType:
    """Build the full screen for the session's current navigation state."""
    if not session.in_library:
        return landing_view()

    navigator = session.navigator
    state = navigator.state
    bar = section_bar(state.section, session.layout)
    body = _render_body(session, state)
    if session.layout == "tablet":
        grid = Table.grid(padding=(0, 2))
        grid.add_column(no_wrap=True)
        grid.add_column(ratio=1)
        grid.add_row(bar, body)
        return grid
    return Group(body, bar)


def _render_body(session: ReaderSession, state) -> RenderableType:
    navigator = session.navigator
    catalog = session.catalog

    if isinstance(state, AuthorSheetOpen):
        header = "[bold]所有作者[/]  [muted](a 關閉)[/]"
        if navigator.query:
            header += f"  [muted]搜尋：{escape(navigator.query)}[/]"
        authors = navigator.sheet_authors
        if not authors:
            return Group(header, "[muted]沒有符合的作者[/]")
        return Group(header, *[author_card(i, a) for i, a in enumerate(authors, start=1)])

    if isinstance(state, AtSectionRoot):
        if state.section == Section.PHOTO_WALL:
            return Group("[bold]小說插圖牆[/]", photo_grid(catalog.photo_items()))
        category = state.section.category
        header = f"[{genre_style(category)}]{category.value}作者[/]"
        if navigator.query:
            header += f"  [muted]搜尋：{escape(navigator.query)}[/]"
        authors = navigator.visible_authors
        if not authors:
            return Group(header, "[muted]沒有符合的作者[/]")
        return Group(header, *[author_card(i, a) for i, a in enumerate(authors, start=1)])

    if isinstance(state, AuthorSelected):
        novels = catalog.list_novels(state.author)
        return Group(
            author_header(state.author),
            "[bold]熱門推薦[/]",
            featured_strip(catalog.featured_novels(state.author)),
            "[bold]所有作品[/]",
            novel_table(novels),
        )

    if isinstance(state, NovelSelected):
        return Group(
            novel_summary_panel(state.novel),
            "[bold]章節列表[/]  [muted]r 查看維基 · w 網頁搜尋[/]",
            chapter_list(state.novel.chapters),
        )

    if isinstance(state, ChapterOpen):
        return chapter_panel(state.chapter)

    if isinstance(state, ExternalPageOpen):
        return link_panel(f"{_PAGE_TITLES[state.kind]}：{state.novel.title}", state.url)

    raise TypeError(f"Unhandled navigation state: {type(state).__name__}")
