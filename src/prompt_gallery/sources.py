"""Prompt sources — obtain raw prompt records from CSV assets or markdown files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx
import yaml

from prompt_gallery.errors import FetchError
from prompt_gallery.ingest.csv_decoder import decode
from prompt_gallery.ingest.frontmatter import parse_markdown_prompt
from prompt_gallery.models.prompt import PromptRecord

if TYPE_CHECKING:
    from prompt_gallery.config import SourceConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class PromptSource(Protocol):
    """Anything that can produce the raw records of the collection."""

    async def load_records(self) -> list[PromptRecord]:
        """Return every record, or raise :class:`FetchError`."""
        ...

    def describe(self) -> str:
        """Human-readable location used in logs and errors."""
        ...

    async def aclose(self) -> None:
        """Release any resources held by the source."""
        ...


def records_from_csv(text: str) -> list[PromptRecord]:
    return [PromptRecord.from_row(row) for row in decode(text)]


class HttpCsvSource:
    """Fetches the CSV asset with a single unauthenticated GET."""

    def __init__(self, url: str, client: httpx.AsyncClient | None = None) -> None:
        self._url = url
        self._client = client
        self._owns_client = client is None

    def describe(self) -> str:
        return self._url

    async def fetch_text(self) -> str:
        if self._client is None:
            self._client = httpx.AsyncClient()
        try:
            response = await self._client.get(self._url)
        except httpx.HTTPError as exc:
            logger.warning("Prompt CSV fetch failed — url=%s error=%s", self._url, exc)
            raise FetchError(self._url, f"Request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Prompt CSV fetch failed — url=%s status=%d", self._url, response.status_code)
            raise FetchError(
                self._url,
                f"Unexpected status {response.status_code}",
                status_code=response.status_code,
            )
        return response.content.decode("utf-8-sig", errors="replace")

    async def load_records(self) -> list[PromptRecord]:
        return records_from_csv(await self.fetch_text())

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class FileCsvSource:
    """Reads a CSV asset bundled alongside the application."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def describe(self) -> str:
        return str(self._path)

    async def load_records(self) -> list[PromptRecord]:
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Prompt CSV read failed — path=%s error=%s", self._path, exc)
            raise FetchError(str(self._path), f"Cannot read asset: {exc}") from exc
        return records_from_csv(text)

    async def aclose(self) -> None:
        return None


class MarkdownDirectorySource:
    """One prompt per ``*.md`` file; the file stem is the slug."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def describe(self) -> str:
        return str(self._directory)

    def _read_all(self) -> list[PromptRecord]:
        records = []
        for path in sorted(self._directory.glob("*.md")):
            try:
                text = path.read_text(encoding="utf-8")
            except UnicodeDecodeError:
                logger.warning("Prompt file skipped — not valid UTF-8 path=%s", path)
                continue
            try:
                records.append(parse_markdown_prompt(text, slug=path.stem))
            except yaml.YAMLError:
                logger.warning("Prompt file skipped — invalid front matter path=%s", path, exc_info=True)
        return records

    async def load_records(self) -> list[PromptRecord]:
        if not self._directory.is_dir():
            raise FetchError(str(self._directory), "Prompt directory does not exist")
        try:
            return await asyncio.to_thread(self._read_all)
        except OSError as exc:
            logger.warning("Prompt directory read failed — path=%s error=%s", self._directory, exc)
            raise FetchError(str(self._directory), f"Cannot read prompts: {exc}") from exc

    async def aclose(self) -> None:
        return None


def create_source(config: SourceConfig, client: httpx.AsyncClient | None = None) -> PromptSource:
    """Pick the source for the active environment."""
    if config.markdown_dir:
        source: PromptSource = MarkdownDirectorySource(config.markdown_dir)
    elif config.csv_path:
        source = FileCsvSource(config.csv_path)
    else:
        source = HttpCsvSource(config.csv_location, client=client)
    logger.info("Prompt source selected — type=%s location=%s", type(source).__name__, source.describe())
    return source
