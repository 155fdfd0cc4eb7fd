"""Unified Rich theme and reusable UI helper functions for the CLI."""

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from models.author import Author
from models.chapter import Chapter
from models.enums import Category
from models.novel import Novel
from models.photo import PhotoItem

LIBRARY_THEME = Theme({
    "app.title": "bold",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "info": "blue",
    "muted": "dim",
    "accent": "cyan",
    "genre.martial": "bold dark_orange",
    "genre.romance": "bold magenta",
    "stat.label": "dim",
    "stat.value": "bold",
    "rating": "yellow",
    "chapter.num": "blue",
    "author.name": "bold cyan",
})

# Overrides pushed on top of LIBRARY_THEME while dark mode is on
DARK_THEME = Theme({
    "app.title": "bold white on grey11",
    "muted": "grey50",
    "accent": "bright_cyan",
    "author.name": "bold bright_cyan",
    "chapter.num": "bright_blue",
})


def get_console(**kwargs) -> Console:
    """Return a Console instance with the library theme applied."""
    return Console(theme=LIBRARY_THEME, **kwargs)


def genre_style(category: Category) -> str:
    return "genre.martial" if category == Category.MARTIAL else "genre.romance"


def app_header(title: str = "E-Book 小說館") -> Rule:
    """Return a Rule element for the application header banner."""
    return Rule(title=f"[app.title]{title}[/]", style="dim")


def stars(rating: float) -> str:
    return f"[rating]★ {rating:.1f}[/]"


def author_card(index: int, author: Author) -> Panel:
    """Card for one author in a list; ``index`` is the number the user types."""
    body = (
        f"[author.name]{author.name}[/]  [{genre_style(author.category)}]{author.category.value}[/]\n"
        f"[muted]{author.bio}[/]\n"
        f"[accent]查看作品 →[/]"
    )
    return Panel(body, title=f"[muted]{index}[/]", title_align="left",
                 box=box.ROUNDED, border_style="dim", padding=(0, 2))


def author_header(author: Author) -> Panel:
    body = (
        f"[author.name]{author.name}[/]\n"
        f"{author.bio}\n"
        f"[rating]★[/] [muted]經典作家[/]"
    )
    return Panel(body, box=box.ROUNDED, border_style="dim", padding=(0, 2))


def featured_strip(novels: list[Novel]) -> Columns:
    """Horizontal strip of the leading novels ("熱門推薦")."""
    cards = [
        Panel(f"[bold]{n.title}[/]\n{stars(n.rating)}", box=box.ROUNDED,
              border_style="dim", padding=(0, 1))
        for n in novels
    ]
    return Columns(cards, padding=(0, 1))


def novel_table(novels: list[Novel]) -> Table:
    table = Table(box=box.ROUNDED, border_style="dim", show_header=True, padding=(0, 1))
    table.add_column("#", style="muted", justify="right")
    table.add_column("作品", style="bold")
    table.add_column("簡介")
    table.add_column("評分", justify="right")
    table.add_column("章數", justify="right", style="muted")

    for i, novel in enumerate(novels, start=1):
        desc = novel.description
        if len(desc) > 40:
            desc = desc[:40] + "..."
        table.add_row(str(i), novel.title, desc, stars(novel.rating), f"{novel.chapter_count} 章")
    return table


def novel_summary_panel(novel: Novel) -> Panel:
    body = (
        f"  [stat.label]作者:[/] [author.name]{novel.author.name}[/]  "
        f"[muted]|[/]  {stars(novel.rating)}  "
        f"[muted]|[/]  [stat.label]章節:[/] [stat.value]{novel.chapter_count}[/]\n\n"
        f"  [stat.label]作品簡介:[/] {novel.description}"
    )
    return Panel(body, title=f"[bold]{novel.title}[/]", box=box.ROUNDED,
                 border_style="dim", padding=(0, 2))


def chapter_list(chapters: tuple[Chapter, ...] | list[Chapter]) -> Table:
    table = Table(box=None, show_header=False, padding=(0, 1))
    table.add_column(style="chapter.num", justify="right")
    table.add_column()
    for chapter in chapters:
        table.add_row(str(chapter.number), chapter.title)
    return table


def chapter_panel(chapter: Chapter) -> Panel:
    """Reader view for one chapter."""
    body = Text()
    body.append("章節：", style="muted")
    body.append(f"{chapter.number}\n\n", style="chapter.num")
    body.append(chapter.content)
    return Panel(body, title=f"[bold]{chapter.title}[/]",
                 subtitle=f"[muted]{chapter.char_count} 字 · b 完成[/]",
                 box=box.ROUNDED, border_style="dim", padding=(1, 2))


def link_panel(title: str, url: str) -> Panel:
    return Panel(f"[accent]{url}[/]\n\n[muted]o 在瀏覽器開啟 · b 關閉[/]",
                 title=f"[bold]{title}[/]", box=box.ROUNDED, border_style="blue", padding=(0, 2))


def photo_grid(photos: list[PhotoItem], columns: int = 4) -> Table:
    """Photo wall as a grid of image URLs; images themselves are not fetched."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
    for _ in range(columns):
        table.add_column(overflow="fold")
    for start in range(0, len(photos), columns):
        row = [f"[muted]{p.id}[/] {p.url}" for p in photos[start:start + columns]]
        row += [""] * (columns - len(row))
        table.add_row(*row)
    return table


def warning_panel(body: str) -> Panel:
    """Return a yellow-bordered Panel for rejected actions."""
    return Panel(body, box=box.ROUNDED, border_style="yellow", padding=(0, 2))
