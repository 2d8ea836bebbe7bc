"""Sitemap rendering for the home page and every prompt permalink."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from functools import lru_cache
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from prompt_gallery.models.prompt import Prompt

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    changefreq: str
    priority: str


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["xml", "html"]),
    )


def sitemap_entries(prompts: Iterable[Prompt], base_url: str) -> list[SitemapEntry]:
    """Home page first, then one entry per prompt in collection order."""
    root = base_url.rstrip("/")
    entries = [SitemapEntry(loc=f"{root}/", changefreq="weekly", priority="1.0")]
    entries.extend(
        SitemapEntry(loc=f"{root}/prompt/{quote(prompt.slug)}", changefreq="monthly", priority="0.8")
        for prompt in prompts
    )
    return entries


def render_sitemap(prompts: Iterable[Prompt], base_url: str, today: date | None = None) -> str:
    """Render a sitemaps.org ``urlset`` document."""
    lastmod = (today or datetime.now(UTC).date()).isoformat()
    template = _environment().get_template("sitemap.xml")
    return template.render(entries=sitemap_entries(prompts, base_url), lastmod=lastmod)
