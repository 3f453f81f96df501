"""
Main CLI dispatcher for blogcat.

Usage:
    blogcat check                        # Load the content tree and report
    blogcat posts [list|recent|show|search]
    blogcat series [list|show]
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import click
from rich.logging import RichHandler
from rich.table import Table

from blogcat import __version__
from blogcat.context import Context, console, pass_context
from blogcat.core.lang import Lang


@click.group()
@click.version_option(version=__version__, prog_name="blogcat")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Content root (defaults to the nearest contents/ directory)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, root: Path | None) -> None:
    """Multilingual blog content catalog.

    Load, validate and inspect a tree of markdown posts.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.obj = Context(verbose=verbose, root=root)


@main.command()
@pass_context
def check(ctx: Context) -> None:
    """Load every post and report counts.

    Exits with status 1 if any file fails to load.
    """
    catalog = ctx.load_catalog()

    counts = Counter((p.category.value, p.lang) for p in catalog.posts)
    categories = sorted({category for category, _ in counts})

    table = Table(title=f"Catalog ({len(catalog)} posts)")
    table.add_column("Category", style="cyan")
    for lang in Lang.all():
        table.add_column(lang.code, justify="right")
    table.add_column("Total", style="green", justify="right")

    for category in categories:
        per_lang = [counts[(category, lang)] for lang in Lang.all()]
        table.add_row(category, *(str(n) for n in per_lang), str(sum(per_lang)))

    console.print(table)
    keys = {p.translation_key for p in catalog.posts}
    console.print(f"[dim]{len(catalog.series)} series, {len(keys)} translation keys[/dim]")
    console.print("[green]Done![/green] All content loaded.")


# Import and register command groups (imports after main definition intentional)
from blogcat.posts.commands import posts  # noqa: E402
from blogcat.series.commands import series  # noqa: E402

main.add_command(posts)
main.add_command(series)


if __name__ == "__main__":
    main()
