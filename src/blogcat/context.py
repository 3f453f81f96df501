"""Shared click context and options for blogcat commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from blogcat.catalog.store import Catalog, CatalogStore
from blogcat.core.config import Settings, get_settings
from blogcat.core.errors import ContentError
from blogcat.core.lang import Lang

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False, root: Path | None = None):
        self.verbose = verbose
        self.root = root
        self.console = console
        self._store: CatalogStore | None = None

    @property
    def store(self) -> CatalogStore:
        """Catalog store for the resolved content root."""
        if self._store is None:
            try:
                settings = get_settings(self.root)
            except FileNotFoundError as e:
                console.print(f"[red]{e}[/red]")
                raise SystemExit(1) from e
            self._store = CatalogStore(settings)
        return self._store

    @property
    def settings(self) -> Settings:
        return self.store.settings

    def load_catalog(self) -> Catalog:
        """Load the catalog, exiting with status 1 on content errors."""
        try:
            return self.store.snapshot()
        except ContentError as e:
            console.print(f"[red]Failed to load content: {e}[/red]")
            raise SystemExit(1) from e


pass_context = click.make_pass_decorator(Context, ensure=True)


def lang_option(func):
    """Add a ``-l/--lang`` option parsed into a Lang."""
    return click.option(
        "-l",
        "--lang",
        "lang",
        default=Lang.default().value,
        show_default=True,
        callback=lambda _ctx, _param, value: Lang.parse(value),
        help="Preferred language (ko, ja, en)",
    )(func)
