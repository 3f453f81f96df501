"""
Markdown to HTML with table of contents and reading time.

The markdown-it token tree is walked as one flat stream of events. A small
state machine captures the constructs that get rewritten:

- h2/h3 headings become ``<hN id="...">`` and are recorded in the TOC
- images become lazy-loading ``<img>`` tags
- fenced ``graph``, ``chart`` and ``plot3d`` blocks become placeholder
  ``<div>`` elements for the client-side renderers

Everything else is rendered by markdown-it unchanged. Only one capture is
active at a time: an image inside a captured heading contributes its alt
text to the heading and is otherwise dropped. Images nested in alt text are
flattened to their own alt text. Inline HTML is dropped from heading text
and alt text.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from markdown_it import MarkdownIt
from markdown_it.token import Token

from blogcat.content.models import TocEntry

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
TOC_LEVELS = (2, 3)

# Fence language tag -> wrapper class picked up by the graph renderers
DIRECTIVE_CLASSES = {
    "graph": "function-plot-target",
    "chart": "chart-js-target",
    "plot3d": "plotly-target",
}

_IMAGE_CLOSE = Token("image_close", "img", -1)


def slugify(text: str) -> str:
    """Convert heading text to an anchor id.

    Lowercase, drop punctuation, replace whitespace/underscores with hyphens,
    collapse runs of hyphens. Non-latin letters are kept.
    """
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-") or "section"


def count_words(text: str) -> int:
    return len(text.split())


def reading_minutes(word_count: int) -> int:
    """Whole minutes at 200 words per minute, never less than one."""
    return max(1, word_count // WORDS_PER_MINUTE)


@dataclass(frozen=True)
class RenderedMarkdown:
    """Output of a markdown transform."""

    html: str
    toc: list[TocEntry]
    word_count: int

    @property
    def reading_time_min(self) -> int:
        return reading_minutes(self.word_count)


class Mode(Enum):
    """Capture modes of the transformer."""

    DEFAULT = auto()
    IN_HEADING = auto()
    IN_IMAGE = auto()
    IN_DIRECTIVE = auto()


@dataclass
class _RenderState:
    """Mutable state for a single render pass."""

    out: list[str] = field(default_factory=list)
    toc: list[TocEntry] = field(default_factory=list)
    used_ids: set[str] = field(default_factory=set)
    id_counters: dict[str, int] = field(default_factory=dict)
    word_count: int = 0
    mode: Mode = Mode.DEFAULT
    heading_level: int = 0
    directive_class: str = ""
    image_src: str = ""
    image_title: str = ""
    buffer: list[str] = field(default_factory=list)

    def enter(self, mode: Mode) -> None:
        self.mode = mode
        self.buffer = []

    def leave(self) -> str:
        captured = "".join(self.buffer)
        self.mode = Mode.DEFAULT
        self.buffer = []
        return captured

    def unique_id(self, base: str) -> str:
        """Return base, or base-1, base-2, ... if already taken."""
        candidate = base
        n = self.id_counters.get(base, 0)
        while candidate in self.used_ids:
            n += 1
            candidate = f"{base}-{n}"
        self.id_counters[base] = n
        self.used_ids.add(candidate)
        return candidate


def _events(tokens: Sequence[Token]) -> Iterator[tuple[Sequence[Token], int]]:
    """Flatten block tokens and their inline children into one stream.

    Yields ``(siblings, index)`` so the renderer can still look at
    neighbouring tokens. An image is followed by its alt-text children and a
    synthetic ``image_close`` event.
    """
    for i, token in enumerate(tokens):
        if token.type != "inline":
            yield tokens, i
            continue
        children = token.children or []
        for j, child in enumerate(children):
            yield children, j
            if child.type == "image":
                yield from _alt_events(child.children or [])
                yield (_IMAGE_CLOSE,), 0


def _alt_events(children: Sequence[Token]) -> Iterator[tuple[Sequence[Token], int]]:
    # Images nested in alt text only contribute their own alt text
    for k, child in enumerate(children):
        if child.type == "image":
            yield from _alt_events(child.children or [])
        else:
            yield children, k


def _plain_text(token: Token) -> str:
    if token.type in ("text", "text_special", "code_inline"):
        return token.content
    if token.type in ("softbreak", "hardbreak"):
        return " "
    return ""


def _fence_lang(token: Token) -> str:
    info = token.info.strip()
    return info.split(maxsplit=1)[0].lower() if info else ""


class MarkdownTransformer:
    """Render markdown bodies into HTML plus TOC and word count."""

    def __init__(self) -> None:
        self.md = MarkdownIt("commonmark").enable(["strikethrough", "table"])

    def render(self, body: str) -> RenderedMarkdown:
        env: dict = {}
        tokens = self.md.parse(body, env)
        state = _RenderState()

        for siblings, idx in _events(tokens):
            token = siblings[idx]
            if state.mode is Mode.IN_HEADING:
                self._in_heading(state, token)
            elif state.mode is Mode.IN_IMAGE:
                self._in_image(state, token)
            else:
                self._default(state, siblings, idx, env)

        return RenderedMarkdown(
            html="".join(state.out),
            toc=state.toc,
            word_count=state.word_count,
        )

    def _default(
        self,
        state: _RenderState,
        siblings: Sequence[Token],
        idx: int,
        env: dict,
    ) -> None:
        token = siblings[idx]

        if token.type == "heading_open" and int(token.tag[1:]) in TOC_LEVELS:
            state.heading_level = int(token.tag[1:])
            state.enter(Mode.IN_HEADING)
            return

        if token.type == "image":
            state.image_src = token.attrGet("src") or ""
            state.image_title = token.attrGet("title") or ""
            state.enter(Mode.IN_IMAGE)
            return

        if token.type == "fence" and _fence_lang(token) in DIRECTIVE_CLASSES:
            # Fences arrive as one token, so the capture opens and closes here
            state.directive_class = DIRECTIVE_CLASSES[_fence_lang(token)]
            state.enter(Mode.IN_DIRECTIVE)
            state.buffer.append(token.content)
            self._close_directive(state)
            return

        if token.type in ("text", "text_special", "code_inline", "fence", "code_block"):
            state.word_count += count_words(token.content)

        renderer = self.md.renderer
        rule = renderer.rules.get(token.type)
        if rule is not None:
            state.out.append(rule(siblings, idx, self.md.options, env))
        else:
            state.out.append(renderer.renderToken(siblings, idx, self.md.options, env))

    def _in_heading(self, state: _RenderState, token: Token) -> None:
        if token.type == "heading_close":
            text = state.leave().strip()
            anchor = state.unique_id(slugify(text))
            level = state.heading_level
            state.toc.append(TocEntry(level=level, text=text, id=anchor))
            state.out.append(
                f'<h{level} id="{html.escape(anchor)}">{html.escape(text, quote=False)}</h{level}>\n'
            )
            return
        if token.type == "image":
            logger.debug("Image inside heading flattened to its alt text")
        state.buffer.append(_plain_text(token))

    def _in_image(self, state: _RenderState, token: Token) -> None:
        if token is _IMAGE_CLOSE:
            alt = state.leave()
            title = f' title="{html.escape(state.image_title)}"' if state.image_title else ""
            state.out.append(
                f'<img src="{html.escape(state.image_src)}" '
                f'alt="{html.escape(alt)}"{title} loading="lazy">'
            )
            return
        state.buffer.append(_plain_text(token))

    def _close_directive(self, state: _RenderState) -> None:
        content = state.leave()
        state.out.append(
            f'<div class="{state.directive_class}">{html.escape(content, quote=False)}</div>\n'
        )


_default_transformer: MarkdownTransformer | None = None


def render_markdown(body: str) -> RenderedMarkdown:
    """Render a markdown body with a shared transformer."""
    global _default_transformer
    if _default_transformer is None:
        _default_transformer = MarkdownTransformer()
    return _default_transformer.render(body)
