"""Data models for prompt records."""

from prompt_gallery.models.prompt import CSV_COLUMNS, FilterCriteria, Prompt, PromptRecord

__all__ = [
    "CSV_COLUMNS",
    "FilterCriteria",
    "Prompt",
    "PromptRecord",
]
