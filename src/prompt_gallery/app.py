"""FastAPI application factory and lifespan wiring."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from prompt_gallery import __version__
from prompt_gallery.config import load_settings
from prompt_gallery.errors import FetchError
from prompt_gallery.ingest.normalizer import PromptNormalizer
from prompt_gallery.logging import configure_logging
from prompt_gallery.routes import pages_router, prompts_router
from prompt_gallery.sources import create_source
from prompt_gallery.store import PromptStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the prompt store on startup and close it on shutdown."""
    settings = app.state.settings
    source = create_source(settings.source)
    store = PromptStore(
        source,
        ttl_seconds=settings.cache.ttl_seconds,
        normalizer=PromptNormalizer(trim_tags=settings.source.trim_tags),
    )
    app.state.store = store

    try:
        await store.init()
    except FetchError as exc:
        logger.warning("Prompt store warm-up failed, loading on first request — %s", exc)

    try:
        yield
    finally:
        await store.aclose()
        logger.info("Prompt gallery shutdown complete")


def create_app() -> FastAPI:
    """Create the prompt gallery application."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    app = FastAPI(
        title="Prompt Gallery",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.is_development else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.include_router(prompts_router)
    app.include_router(pages_router)
    logger.info("Prompt gallery app created — env=%s", settings.app.env)
    return app
