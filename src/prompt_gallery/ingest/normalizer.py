"""Record normalizer — applies defaults, derives slugs and renders markdown."""

from __future__ import annotations

import re
from functools import lru_cache

from markdown_it import MarkdownIt

from prompt_gallery.models.prompt import Prompt, PromptRecord

DEFAULT_AUTHOR = "Anonymous"
DEFAULT_CATEGORY = "General"

_SLUG_STRIP = re.compile(r"[^A-Za-z0-9_\s]")
_SLUG_SPACES = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Lower-case, drop punctuation and join whitespace runs with hyphens."""
    return _SLUG_SPACES.sub("-", _SLUG_STRIP.sub("", title.lower()))


def split_tags(value: str | list[str] | None, *, trim: bool = False) -> list[str]:
    """Split a comma-delimited tag field.

    Surrounding whitespace is kept unless ``trim`` is set, in which case
    empty tags are dropped as well.
    """
    if not value:
        return []
    tags = list(value) if isinstance(value, list) else value.split(",")
    if trim:
        return [tag.strip() for tag in tags if tag.strip()]
    return tags


class MarkdownRenderer:
    """CommonMark to HTML. Raw HTML in the source is escaped, not passed through."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": False})

    def render(self, content: str) -> str:
        return self._md.render(content)


class PromptNormalizer:
    """Turns :class:`PromptRecord` values into fully-defaulted :class:`Prompt` objects."""

    def __init__(self, renderer: MarkdownRenderer | None = None, *, trim_tags: bool = False) -> None:
        self._renderer = renderer or MarkdownRenderer()
        self._trim_tags = trim_tags

    def normalize(self, record: PromptRecord) -> Prompt:
        title = record.title or ""
        slug = record.slug or slugify(title)
        return Prompt(
            slug=slug,
            title=title or slug,
            author=record.author or DEFAULT_AUTHOR,
            author_link=record.author_link or None,
            category=record.category or DEFAULT_CATEGORY,
            tags=tuple(split_tags(record.tags, trim=self._trim_tags)),
            content=record.content,
            html=self._renderer.render(record.content),
        )

    def normalize_all(self, records: list[PromptRecord]) -> list[Prompt]:
        return [self.normalize(record) for record in records]


@lru_cache(maxsize=1)
def _default_normalizer() -> PromptNormalizer:
    return PromptNormalizer()


def normalize(record: PromptRecord) -> Prompt:
    """Normalize a record with the default (legacy, untrimmed tags) settings."""
    return _default_normalizer().normalize(record)
