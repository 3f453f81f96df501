"""Shared test fixtures for blogcat."""

from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from blogcat.content.models import Post, PostCategory, PostMetadata
from blogcat.core.lang import Lang


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's global config and environment out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("BLOGCAT_CONTENT_ROOT", raising=False)
    from blogcat.core import config
    config.get_content_root.cache_clear()
    yield
    config.get_content_root.cache_clear()


@pytest.fixture
def content_root(tmp_path):
    """Provide an empty contents/ directory."""
    root = tmp_path / "contents"
    root.mkdir()
    return root


def make_front_matter(
    title: str = "Test Post",
    created_at: str = "2024-01-01T09:00:00+09:00",
    updated_at: str | None = None,
    **extra,
) -> dict:
    fm = {
        "title": title,
        "description": f"About {title}",
        "author": "miniex",
        "tags": ["test"],
        "created_at": created_at,
        "updated_at": updated_at or created_at,
    }
    fm.update(extra)
    return fm


@pytest.fixture
def write_post(content_root):
    """Factory fixture for creating post files under contents/."""
    def _write(
        filename: str = "test-post.md",
        category: str = "blog",
        body: str = "Test content.",
        **fm_fields,
    ) -> Path:
        directory = content_root / category
        directory.mkdir(parents=True, exist_ok=True)

        fm_str = yaml.dump(make_front_matter(**fm_fields), default_flow_style=False, allow_unicode=True)
        path = directory / filename
        path.write_text(f"---\n{fm_str}---\n\n{body}\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_post():
    """Factory fixture for building Post objects without touching disk."""
    def _make(
        slug: str = "post",
        lang: Lang = Lang.EN,
        translation_key: str | None = None,
        category: PostCategory = PostCategory.BLOG,
        created: datetime | None = None,
        updated: datetime | None = None,
        **meta_fields,
    ) -> Post:
        created = created or datetime(2024, 1, 1, tzinfo=timezone.utc)
        fields = {
            "title": slug.replace("-", " ").title(),
            "description": f"About {slug}",
            "author": "miniex",
            "tags": [],
            "created_at": created,
            "updated_at": updated or created,
        }
        fields.update(meta_fields)
        return Post(
            category=category,
            metadata=PostMetadata(**fields),
            content="<p>body</p>",
            slug=slug,
            lang=lang,
            translation_key=translation_key or slug,
        )

    return _make
