"""Browse filters — category, tag and free-text search."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_gallery.models.prompt import FilterCriteria, Prompt


def matches(prompt: Prompt, criteria: FilterCriteria) -> bool:
    """Return True when the prompt satisfies every active filter.

    Category is compared case-insensitively, tags exactly. The search term
    is a case-insensitive substring match on title, author and content only.
    """
    if criteria.is_empty:
        return True

    if criteria.category and prompt.category.lower() != criteria.category.lower():
        return False

    if criteria.tag and criteria.tag not in prompt.tags:
        return False

    if criteria.search_term:
        needle = criteria.search_term.lower()
        return (
            needle in prompt.title.lower()
            or needle in prompt.author.lower()
            or needle in prompt.content.lower()
        )
    return True


def filter_prompts(prompts: Iterable[Prompt], criteria: FilterCriteria) -> list[Prompt]:
    """Matching prompts in collection order."""
    if criteria.is_empty:
        return list(prompts)
    return [prompt for prompt in prompts if matches(prompt, criteria)]
