"""Prompt models — the raw decoded record and the normalized prompt."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# CSV header column -> PromptRecord field
CSV_COLUMNS: dict[str, str] = {
    "slug": "slug",
    "title": "title",
    "author": "author",
    "authorLink": "author_link",
    "category": "category",
    "tags": "tags",
    "promptContent": "content",
}


class PromptRecord(BaseModel):
    """One source entry before defaults are applied.

    Every field is optional; missing and empty values are resolved by the
    normalizer.
    """

    slug: str | None = None
    title: str | None = None
    author: str | None = None
    author_link: str | None = None
    category: str | None = None
    tags: str | list[str] | None = None
    content: str = ""

    @classmethod
    def from_row(cls, row: dict[str, str]) -> PromptRecord:
        """Map a decoded CSV row onto a record, ignoring unrecognized columns."""
        values = {field: row[column] for column, field in CSV_COLUMNS.items() if column in row}
        return cls.model_validate(values)


class Prompt(BaseModel):
    """A normalized prompt as served to the rest of the application."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    author: str = "Anonymous"
    author_link: str | None = Field(default=None, alias="authorLink")
    category: str = "General"
    tags: tuple[str, ...] = ()
    content: str = ""
    html: str = ""


class FilterCriteria(BaseModel):
    """Active browse filters; ``None`` or empty means the filter is off."""

    search_term: str | None = None
    tag: str | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.search_term or self.tag or self.category)
