"""
Published catalog snapshots.

A reload builds a complete new Catalog before publishing it with a single
reference assignment. Readers never lock and always see either the old or
the new snapshot in full. A failed reload leaves the old snapshot in place.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from blogcat.content.loader import CatalogLoader
from blogcat.content.models import Post
from blogcat.core.config import CONTENT_EXTENSIONS, Settings
from blogcat.core.lang import Lang
from blogcat.series.aggregator import Series, aggregate_series
from blogcat.series.navigation import link_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot of every loaded post and series summary."""

    content_root: Path
    posts: tuple[Post, ...] = ()
    series: tuple[Series, ...] = ()
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __len__(self) -> int:
        return len(self.posts)


def build_catalog(
    content_root: Path,
    extensions: tuple[str, ...] | None = None,
    default_lang: Lang | None = None,
) -> Catalog:
    """Load posts, link series chains and aggregate series summaries.

    Raises:
        ContentError: If any file fails to load
    """
    loader = CatalogLoader(content_root, extensions or CONTENT_EXTENSIONS, default_lang)
    posts = loader.load()
    filled = link_series(posts)
    series = aggregate_series(posts)
    logger.info(
        "Built catalog: %d posts, %d series, %d series links",
        len(posts),
        len(series),
        filled,
    )
    return Catalog(content_root=Path(content_root), posts=tuple(posts), series=tuple(series))


class CatalogStore:
    """Holds the currently published catalog."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._snapshot: Catalog | None = None
        self._write_lock = threading.Lock()

    def snapshot(self) -> Catalog:
        """Return the published catalog, loading it on first use.

        Read posts and series from one returned snapshot; a later call may
        return a newer one.
        """
        current = self._snapshot
        if current is not None:
            return current
        with self._write_lock:
            # Another caller may have loaded it while we waited
            if self._snapshot is None:
                self._publish()
            return self._snapshot

    def reload(self) -> Catalog:
        """Rebuild the catalog from disk and publish it.

        Raises:
            ContentError: If loading fails; the previous snapshot stays published
        """
        with self._write_lock:
            return self._publish()

    def _publish(self) -> Catalog:
        catalog = build_catalog(
            self.settings.content_root,
            extensions=self.settings.extensions,
            default_lang=self.settings.default_lang,
        )
        self._snapshot = catalog
        logger.info("Published catalog from %s", catalog.content_root)
        return catalog
