"""Markdown prompt files with YAML front matter."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from prompt_gallery.models.prompt import PromptRecord

logger = logging.getLogger(__name__)

FENCE = "---"

# front matter key -> PromptRecord field
_FRONT_MATTER_KEYS: dict[str, str] = {
    "title": "title",
    "author": "author",
    "authorLink": "author_link",
    "category": "category",
    "tags": "tags",
}


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Separate a leading ``---`` fenced YAML block from the markdown body.

    Text without a front matter block is returned unchanged with empty
    metadata. A block that is not a YAML mapping is treated as empty.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FENCE:
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == FENCE:
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            data = yaml.safe_load(raw) if raw.strip() else {}
            if not isinstance(data, dict):
                logger.debug("Front matter ignored — not a mapping")
                data = {}
            return data, body
    return {}, text


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_markdown_prompt(text: str, slug: str) -> PromptRecord:
    """Build a record from a markdown file; ``slug`` is usually the file stem."""
    data, body = split_front_matter(text)
    values: dict[str, Any] = {"slug": slug, "content": body}
    for key, field in _FRONT_MATTER_KEYS.items():
        value = data.get(key)
        if field == "tags" and isinstance(value, list):
            values[field] = [str(tag) for tag in value]
        else:
            values[field] = _as_text(value)
    return PromptRecord.model_validate(values)
