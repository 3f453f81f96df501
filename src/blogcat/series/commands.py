"""CLI commands for series summaries."""

from __future__ import annotations

import json as json_module

import click
from rich.panel import Panel
from rich.table import Table

from blogcat.catalog.queries import get_posts_by_series
from blogcat.context import Context, console, lang_option, pass_context
from blogcat.series.aggregator import SeriesStatus, find_series, sort_series


@click.group(name="series")
def series() -> None:
    """Browse content series.

    Series are author-defined ordered groups of posts, independent of category.
    """
    pass


@series.command(name="list")
@click.option("--asc", is_flag=True, help="Least recently updated first")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def list_series(ctx: Context, asc: bool, as_json: bool) -> None:
    """List all series."""
    catalog = ctx.load_catalog()
    results = sort_series(catalog.series, ascending=asc)

    if as_json:
        click.echo(json_module.dumps([s.to_dict() for s in results], indent=2, ensure_ascii=False))
        return

    if not results:
        console.print("[yellow]No series found[/yellow]")
        return

    table = Table(title=f"Series ({len(results)} found)")
    table.add_column("Name", style="cyan")
    table.add_column("Posts", style="green", justify="right")
    table.add_column("Status", style="blue")
    table.add_column("Updated")
    table.add_column("Authors", style="dim")

    for entry in results:
        table.add_row(
            entry.name,
            str(entry.post_count),
            entry.status.value,
            entry.updated_at.strftime("%Y-%m-%d"),
            ", ".join(entry.authors),
        )

    console.print(table)


@series.command()
@click.argument("name")
@lang_option
@click.option("--desc", is_flag=True, help="Last post first")
@pass_context
def show(ctx: Context, name: str, lang, desc: bool) -> None:
    """Show a series and its posts in reading order."""
    catalog = ctx.load_catalog()
    entry = find_series(catalog.series, name)

    if entry is None:
        console.print(f"[red]Series not found: {name}[/red]")
        console.print("[dim]Use 'blogcat series list' to see available series[/dim]")
        raise SystemExit(1)

    status_style = "green" if entry.status is SeriesStatus.COMPLETED else "yellow"
    console.print(
        Panel(
            f"{entry.description or ''}\n\n"
            f"[{status_style}]{entry.status.value}[/{status_style}] · "
            f"{entry.post_count} posts · {', '.join(entry.authors)}",
            title=f"[bold cyan]{entry.name}[/bold cyan]",
        )
    )

    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Lang", style="blue")

    members = get_posts_by_series(catalog.posts, name, lang, ascending=not desc)
    for i, post in enumerate(members, 1):
        position = i if not desc else len(members) - i + 1
        table.add_row(str(position), post.slug, post.title, post.lang.code)

    console.print(table)
