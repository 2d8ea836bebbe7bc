"""Shared request helpers for route handlers."""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from prompt_gallery.errors import FetchError
from prompt_gallery.store import PromptSnapshot, PromptStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> PromptStore:
    return request.app.state.store


async def load_snapshot(request: Request) -> PromptSnapshot:
    """Return the current snapshot or raise HTTP 502 when the source is unavailable."""
    store = get_store(request)
    try:
        return await store.get()
    except FetchError as exc:
        logger.error("Prompt collection unavailable — %s", exc)  # noqa: TRY400
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Prompt collection is unavailable",
        ) from exc
