"""
Content tree loader.

Walks ``contents/`` and turns every post file into a Post:

    contents/<category>/<name>[.<lang>].<ext>

Directories named after a PostCategory (case-insensitive) hold posts; any
other directory is searched further. A single bad file aborts the whole load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from blogcat.content.frontmatter import read_post_source
from blogcat.content.language import resolve_language, resolve_slug
from blogcat.content.markdown import MarkdownTransformer
from blogcat.content.models import Post, PostCategory
from blogcat.core.config import CONTENT_EXTENSIONS
from blogcat.core.errors import ContentIOError, DuplicateSlugError
from blogcat.core.lang import Lang

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads every post under a content root."""

    def __init__(
        self,
        content_root: Path,
        extensions: tuple[str, ...] = CONTENT_EXTENSIONS,
        default_lang: Lang | None = None,
    ):
        """Initialize loader.

        Args:
            content_root: Directory holding the category folders
            extensions: File suffixes treated as posts
            default_lang: Language for files without suffix or ``lang`` field
        """
        self.content_root = Path(content_root)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.default_lang = default_lang or Lang.default()
        self.transformer = MarkdownTransformer()

    def load(self) -> list[Post]:
        """Load all posts.

        Returns:
            Posts in traversal order (directories and files sorted by name)

        Raises:
            ContentIOError: If the root or a file cannot be read
            ContentError: If a file cannot be parsed (carries its path)
        """
        if not self.content_root.is_dir():
            raise ContentIOError("content root is not a directory", path=self.content_root)

        posts: list[Post] = []
        for path, category in self.iter_post_files():
            posts.append(self.load_file(path, category))

        self._check_unique_slugs(posts)
        logger.debug("Loaded %d posts from %s", len(posts), self.content_root)
        return posts

    def iter_post_files(self) -> list[tuple[Path, PostCategory]]:
        """List post files with their category, in deterministic order.

        Uses an explicit work list instead of recursion; entries are sorted
        by name at every level.
        """
        found: list[tuple[Path, PostCategory]] = []
        stack = [self.content_root]

        while stack:
            directory = stack.pop()
            subdirs: list[Path] = []
            for entry in self._list_dir(directory):
                if not entry.is_dir():
                    continue
                category = PostCategory.from_dir_name(entry.name)
                if category is not None:
                    found.extend((f, category) for f in self._post_files(entry))
                else:
                    subdirs.append(entry)
            # Reversed so the alphabetically first directory is popped first
            stack.extend(reversed(subdirs))

        return found

    def _list_dir(self, directory: Path) -> list[Path]:
        try:
            return sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ContentIOError(f"cannot read directory: {e}", path=directory) from e

    def _post_files(self, directory: Path) -> list[Path]:
        return [
            entry
            for entry in self._list_dir(directory)
            if entry.is_file()
            and not entry.name.startswith(".")
            and entry.suffix.lower() in self.extensions
        ]

    def load_file(self, path: Path, category: PostCategory) -> Post:
        """Build one Post from a content file.

        Raises:
            ContentIOError: If the file cannot be read
            MissingFrontMatter, MetadataParseError: If front matter is missing or invalid
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentIOError(f"cannot read file: {e}", path=path) from e

        metadata, body = read_post_source(text, path=path)
        translation_key, lang = resolve_language(path.stem, metadata, self.default_lang)
        rendered = self.transformer.render(body)

        logger.debug("Parsed %s (%s, %s)", path.name, category.value, lang.value)
        return Post(
            category=category,
            metadata=metadata,
            content=rendered.html,
            slug=resolve_slug(translation_key, metadata),
            lang=lang,
            translation_key=translation_key,
            toc=rendered.toc,
            reading_time_min=rendered.reading_time_min,
            source_path=path,
        )

    @staticmethod
    def _check_unique_slugs(posts: list[Post]) -> None:
        seen: dict[tuple[str, Lang], Path | None] = {}
        for post in posts:
            key = (post.slug, post.lang)
            if key in seen:
                raise DuplicateSlugError(
                    f"slug {post.slug!r} ({post.lang.value}) already used by {seen[key]}",
                    path=post.source_path,
                )
            seen[key] = post.source_path


def load_posts(
    content_root: Path,
    extensions: tuple[str, ...] = CONTENT_EXTENSIONS,
    default_lang: Lang | None = None,
) -> list[Post]:
    """Load every post under ``content_root``."""
    return CatalogLoader(content_root, extensions, default_lang).load()
