"""
Configuration and path management.

Provides content root detection and catalog settings.

Resolution order for the content root:
  1. BLOGCAT_CONTENT_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for a contents/ directory
  3. Global config file (~/.config/blogcat/config.yaml) content_root key
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from blogcat.core.lang import Lang

CONTENT_DIR_NAME = "contents"
CONTENT_EXTENSIONS = (".md", ".mdx")
RECENT_POSTS_LIMIT = 5


@dataclass(frozen=True)
class Settings:
    """Where content lives and how the catalog is built."""

    content_root: Path
    default_lang: Lang = Lang.EN
    extensions: tuple[str, ...] = CONTENT_EXTENSIONS
    recent_limit: int = RECENT_POSTS_LIMIT


def get_global_config_path() -> Path:
    """Return the path to the global blogcat config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/blogcat/config.yaml.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "blogcat" / "config.yaml"


def load_global_config() -> dict:
    """Load the global configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    config_path = get_global_config_path()
    if not config_path.is_file():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            return data
        return {}
    except (OSError, yaml.YAMLError):
        return {}


def _walk_up_for_contents(start_path: Path) -> Path | None:
    current = start_path.resolve()
    while True:
        candidate = current / CONTENT_DIR_NAME
        if candidate.is_dir():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def find_content_root(start_path: Path | None = None) -> Path:
    """Find the content root using 3-tier resolution.

    Args:
        start_path: Starting path for the directory walk (defaults to cwd)

    Returns:
        Path to the content root

    Raises:
        FileNotFoundError: If no content root is found by any method
    """
    env_root = os.environ.get("BLOGCAT_CONTENT_ROOT")
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if env_path.is_dir():
            return env_path
        raise FileNotFoundError(
            f"BLOGCAT_CONTENT_ROOT={env_root} is not a directory."
        )

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_contents(Path(start_path))
    if result is not None:
        return result

    root_str = load_global_config().get("content_root")
    if root_str:
        global_path = Path(root_str).expanduser().resolve()
        if global_path.is_dir():
            return global_path
        raise FileNotFoundError(
            f"Global config content_root={root_str} is not a directory."
        )

    raise FileNotFoundError(
        f"Could not find a {CONTENT_DIR_NAME}/ directory starting from {start_path}. "
        f"Pass --root, set BLOGCAT_CONTENT_ROOT, or configure content_root "
        f"in {get_global_config_path()}."
    )


@lru_cache(maxsize=1)
def get_content_root() -> Path:
    """Get the cached content root path."""
    return find_content_root()


def get_settings(content_root: Path | None = None) -> Settings:
    """Build settings from the global config and the resolved content root.

    Args:
        content_root: Content root (uses the cached default if not provided)
    """
    if content_root is None:
        content_root = get_content_root()

    config = load_global_config()
    default_lang = Lang.EN
    if config.get("default_lang"):
        default_lang = Lang.parse(str(config["default_lang"]))

    recent_limit = config.get("recent_limit", RECENT_POSTS_LIMIT)
    if not isinstance(recent_limit, int) or recent_limit < 1:
        recent_limit = RECENT_POSTS_LIMIT

    return Settings(
        content_root=Path(content_root),
        default_lang=default_lang,
        recent_limit=recent_limit,
    )
