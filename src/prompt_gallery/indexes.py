"""Tag and category indexes derived from a prompt collection."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_gallery.models.prompt import Prompt


def distinct_tags(prompts: Iterable[Prompt]) -> list[str]:
    """Every tag used by any prompt, in first-seen order."""
    seen: dict[str, None] = {}
    for prompt in prompts:
        for tag in prompt.tags:
            seen.setdefault(tag, None)
    return list(seen)


def distinct_categories(prompts: Iterable[Prompt]) -> list[str]:
    """Every non-empty category, in first-seen order."""
    seen: dict[str, None] = {}
    for prompt in prompts:
        if prompt.category:
            seen.setdefault(prompt.category, None)
    return list(seen)


def category_counts(prompts: Iterable[Prompt]) -> dict[str, int]:
    """Prompt count per non-empty category, in first-seen order.

    The collection total is not included; a category may itself be named
    ``All``.
    """
    counts: dict[str, int] = {}
    for prompt in prompts:
        if prompt.category:
            counts[prompt.category] = counts.get(prompt.category, 0) + 1
    return counts
