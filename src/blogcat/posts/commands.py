"""CLI commands for browsing posts in the catalog."""

from __future__ import annotations

import json as json_module
from datetime import datetime, timezone

import click
from rich.table import Table

from blogcat.catalog.queries import (
    find_post,
    get_posts_by_category,
    get_recent_posts,
    search_posts,
)
from blogcat.catalog.translations import get_available_translations
from blogcat.content.models import Post, PostCategory
from blogcat.context import Context, console, lang_option, pass_context
from blogcat.series.navigation import get_series_nav_info

CATEGORY_CHOICE = click.Choice([c.value for c in PostCategory], case_sensitive=False)


def _print_posts(posts: list[Post], title: str, as_json: bool) -> None:
    if as_json:
        click.echo(json_module.dumps([p.to_dict() for p in posts], indent=2, ensure_ascii=False))
        return

    if not posts:
        console.print("[yellow]No posts found matching criteria[/yellow]")
        return

    now = datetime.now(timezone.utc)
    table = Table(title=f"{title} ({len(posts)} found)")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Lang", style="blue")
    table.add_column("Created", style="green")
    table.add_column("Min", justify="right")
    table.add_column("Tags", style="dim")
    table.add_column("New", style="bold green")

    for post in posts:
        title_text = post.title
        table.add_row(
            post.slug,
            title_text[:40] + "..." if len(title_text) > 40 else title_text,
            post.lang.code,
            post.created_at.strftime("%Y-%m-%d"),
            str(post.reading_time_min),
            ", ".join(post.tags),
            "new" if post.is_recent(now) else "",
        )

    console.print(table)


@click.group(name="posts")
def posts() -> None:
    """Browse posts.

    Lists are deduplicated across languages: each post appears once, in the
    requested language when a translation exists.
    """
    pass


@posts.command(name="list")
@click.option("-c", "--category", type=CATEGORY_CHOICE, default="blog", show_default=True)
@click.option("-t", "--tag", help="Only posts with this tag")
@lang_option
@click.option("--asc", is_flag=True, help="Oldest first")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def list_posts(ctx: Context, category: str, tag: str | None, lang, asc: bool, as_json: bool) -> None:
    """List posts of a category."""
    catalog = ctx.load_catalog()
    results = get_posts_by_category(
        catalog.posts, PostCategory(category.lower()), lang, tag=tag, ascending=asc
    )
    _print_posts(results, category.capitalize(), as_json)


@posts.command()
@lang_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def recent(ctx: Context, lang, as_json: bool) -> None:
    """Show the most recent posts."""
    catalog = ctx.load_catalog()
    results = get_recent_posts(catalog.posts, lang, ctx.settings.recent_limit)
    _print_posts(results, "Recent posts", as_json)


@posts.command()
@click.argument("query")
@lang_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def search(ctx: Context, query: str, lang, as_json: bool) -> None:
    """Search titles, descriptions and tags."""
    catalog = ctx.load_catalog()
    _print_posts(search_posts(catalog.posts, query, lang), f"Search: {query}", as_json)


@posts.command()
@click.argument("slug")
@lang_option
@click.option("--toc", is_flag=True, help="Show the table of contents")
@click.option("--html", "show_html", is_flag=True, help="Print the rendered HTML")
@pass_context
def show(ctx: Context, slug: str, lang, toc: bool, show_html: bool) -> None:
    """Show details for a post."""
    catalog = ctx.load_catalog()
    post = find_post(catalog.posts, slug, lang)

    if post is None:
        console.print(f"[red]Post not found: {slug}[/red]")
        console.print("[dim]Use 'blogcat posts list' to see available posts[/dim]")
        raise SystemExit(1)

    meta = post.metadata
    console.print(f"[bold cyan]{meta.title}[/bold cyan]")
    console.print(f"[dim]{meta.description}[/dim]")
    console.print()
    console.print(f"Slug:        {post.slug}")
    console.print(f"Category:    {post.category.value}")
    console.print(f"Author:      {meta.author}")
    console.print(f"Language:    {post.lang.label}")
    console.print(f"Created:     {meta.created_at.isoformat()}")
    console.print(f"Updated:     {meta.updated_at.isoformat()}")
    console.print(f"Reading:     {post.reading_time_min} min")
    if meta.tags:
        console.print(f"Tags:        {', '.join(meta.tags)}")

    langs = get_available_translations(catalog.posts, post.translation_key)
    if len(langs) > 1:
        console.print(f"Available:   {', '.join(lang.code for lang in langs)}")

    nav = get_series_nav_info(list(catalog.posts), post)
    if nav is not None:
        console.print(f"Series:      {nav.series_name} ({nav.position}/{nav.total})")
        if nav.prev_slug:
            console.print(f"  [dim]prev:[/dim] {nav.prev_slug} {nav.prev_title or ''}")
        if nav.next_slug:
            console.print(f"  [dim]next:[/dim] {nav.next_slug} {nav.next_title or ''}")

    if toc and post.toc:
        console.print()
        console.print("[bold]Contents[/bold]")
        for entry in post.toc:
            indent = "  " * (entry.level - 2)
            console.print(f"{indent}- {entry.text} [dim]#{entry.id}[/dim]")

    if show_html:
        console.print()
        console.print(post.content, markup=False, highlight=False)
