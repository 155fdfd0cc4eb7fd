"""CLI entry point — E-Book 小說館。

用法：
  ebook                  進入互動瀏覽模式（預設）
  ebook authors -c 武俠   列出作者
  ebook novels jinyong   列出作者的作品
  ebook read jinyong-shediao 1
  ebook links jinyong-shediao --open
  ebook photos
  ebook --help           查看所有命令
"""

import logging
import os
import sys

# Ensure UTF-8 output on Windows to avoid encoding errors with Rich
if sys.platform == "win32":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")

import click

from catalog.links import reference_url, search_url
from catalog.store import Catalog, filter_authors
from cli.theme import (
    app_header,
    author_card,
    chapter_list,
    chapter_panel,
    get_console,
    link_panel,
    novel_summary_panel,
    novel_table,
    photo_grid,
)
from config.exceptions import EBookError
from config.logging_config import setup_logging
from config.settings import Settings
from models.enums import Category

console = get_console()

_CATEGORY_CHOICES = {
    "martial": Category.MARTIAL, "武俠": Category.MARTIAL,
    "romance": Category.ROMANCE, "言情": Category.ROMANCE,
}


def _init_logging(verbose: bool, settings: Settings):
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    setup_logging(level=level, log_dir=settings.log_dir, console_enabled=verbose)


def _fail(error: EBookError):
    console.print(f"[error]{error.message}[/]")
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--layout", type=click.Choice(["phone", "tablet"]), default=None, help="版面配置")
@click.option("--dark", is_flag=True, default=False, help="深色模式")
@click.pass_context
def cli(ctx, verbose, layout, dark):
    """E-Book 小說館 — 武俠江湖 · 浪漫言情

    \b
    直接執行 ebook 進入互動瀏覽模式：
      ebook              手機版面（分頁列）
      ebook --layout tablet   平板版面（側邊欄）

    \b
    或使用子命令：
      ebook authors -c 言情 -q 瓊
      ebook read jinyong-shediao 3
    """
    overrides = {}
    if layout:
        overrides["layout"] = layout
    if dark:
        overrides["dark_mode"] = True
    settings = Settings(**overrides)
    _init_logging(verbose, settings)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["catalog"] = Catalog.from_settings(settings)

    if ctx.invoked_subcommand is None:
        from cli.browse import BrowseSession
        from navigation.session import ReaderSession

        session = ReaderSession(ctx.obj["catalog"], settings)
        BrowseSession(session, console).run()


# ---------------------------------------------------------------------------
# one-shot commands
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--category", "-c", default="martial",
              type=click.Choice(list(_CATEGORY_CHOICES)), help="作者分類")
@click.option("--query", "-q", default="", help="依姓名搜尋（區分大小寫）")
@click.option("--all", "show_all", is_flag=True, help="列出所有分類的作者")
@click.pass_context
def authors(ctx, category, query, show_all):
    """列出作者。"""
    catalog: Catalog = ctx.obj["catalog"]
    listed = catalog.all_authors() if show_all else catalog.list_authors(_CATEGORY_CHOICES[category])
    listed = filter_authors(listed, query)

    console.print(app_header())
    if not listed:
        console.print("[muted]沒有符合的作者[/]")
        return
    for i, author in enumerate(listed, start=1):
        console.print(author_card(i, author))
        console.print(f"  [muted]id: {author.id}[/]")


@cli.command()
@click.argument("author_id", metavar="AUTHOR")
@click.pass_context
def novels(ctx, author_id):
    """列出作者的作品（可用作者 id 或姓名）。"""
    catalog: Catalog = ctx.obj["catalog"]
    try:
        author = catalog.find_author(author_id) or catalog.get_author(author_id)
        listed = catalog.list_novels(author)
    except EBookError as e:
        _fail(e)

    console.print(app_header(author.name))
    console.print(novel_table(listed))
    for novel in listed:
        console.print(f"  [muted]{novel.title}: {novel.id}[/]")


@cli.command()
@click.argument("novel_id")
@click.argument("chapter", type=int, required=False)
@click.pass_context
def read(ctx, novel_id, chapter):
    """閱讀作品；省略章節時顯示作品詳情與章節列表。"""
    catalog: Catalog = ctx.obj["catalog"]
    try:
        novel = catalog.get_novel(novel_id)
    except EBookError as e:
        _fail(e)

    if chapter is None:
        console.print(novel_summary_panel(novel))
        console.print(chapter_list(novel.chapters))
        return

    found = novel.chapter(chapter)
    if found is None:
        console.print(f"[error]《{novel.title}》沒有第 {chapter} 章（共 {novel.chapter_count} 章）[/]")
        sys.exit(1)
    console.print(chapter_panel(found))


@cli.command()
@click.argument("novel_id")
@click.option("--open", "open_kind", type=click.Choice(["search", "reference"]), default=None,
              help="在瀏覽器開啟其中一個網頁")
@click.pass_context
def links(ctx, novel_id, open_kind):
    """顯示作品的網頁搜尋與維基連結。"""
    catalog: Catalog = ctx.obj["catalog"]
    settings: Settings = ctx.obj["settings"]
    try:
        novel = catalog.get_novel(novel_id)
    except EBookError as e:
        _fail(e)

    urls = {
        "search": search_url(novel.title, settings.search_base_url),
        "reference": reference_url(novel.title, settings.reference_base_url),
    }
    console.print(link_panel(f"網頁搜尋：{novel.title}", urls["search"]))
    console.print(link_panel(f"查看維基：{novel.title}", urls["reference"]))
    if open_kind:
        click.launch(urls[open_kind])


@cli.command()
@click.option("--columns", default=4, show_default=True, type=click.IntRange(1, 8))
@click.pass_context
def photos(ctx, columns):
    """顯示照片牆的圖片網址。"""
    catalog: Catalog = ctx.obj["catalog"]
    console.print(app_header("小說插圖牆"))
    console.print(photo_grid(catalog.photo_items(), columns=columns))


if __name__ == "__main__":
    cli()
