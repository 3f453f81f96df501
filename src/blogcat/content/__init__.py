"""
Content ingestion.

Provides tools for:
- Splitting and parsing front matter
- Resolving languages and translation keys
- Rendering markdown with TOC, reading time and graph directives
- Loading a content tree into posts
"""

from blogcat.content.frontmatter import parse_metadata, read_post_source, split_front_matter
from blogcat.content.language import resolve_language, resolve_slug, split_lang_suffix
from blogcat.content.loader import CatalogLoader, load_posts
from blogcat.content.markdown import MarkdownTransformer, RenderedMarkdown, render_markdown
from blogcat.content.models import Post, PostCategory, PostMetadata, TocEntry

__all__ = [
    "CatalogLoader",
    "load_posts",
    "MarkdownTransformer",
    "RenderedMarkdown",
    "render_markdown",
    "Post",
    "PostCategory",
    "PostMetadata",
    "TocEntry",
    "parse_metadata",
    "read_post_source",
    "split_front_matter",
    "resolve_language",
    "resolve_slug",
    "split_lang_suffix",
]
