"""Prompt API routes — filtered listing, detail and cache refresh."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from prompt_gallery.filters import filter_prompts
from prompt_gallery.models.prompt import FilterCriteria, Prompt
from prompt_gallery.routes.dependencies import get_store, load_snapshot
from prompt_gallery.store import PromptSnapshot

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


def _serialize(prompt: Prompt) -> dict[str, Any]:
    return prompt.model_dump(mode="json", by_alias=True)


@router.get("")
async def list_prompts(
    q: str | None = None,
    tag: str | None = None,
    category: str | None = None,
    snapshot: PromptSnapshot = Depends(load_snapshot),
) -> dict[str, Any]:
    """List prompts matching the filters, with tag and category indexes of the full collection."""
    criteria = FilterCriteria(search_term=q, tag=tag, category=category)
    return {
        "prompts": [_serialize(prompt) for prompt in filter_prompts(snapshot.prompts, criteria)],
        "tags": list(snapshot.tags),
        "categories": list(snapshot.categories),
        "categoryCounts": snapshot.category_counts(),
        "total": len(snapshot),
    }


@router.post("/refresh")
async def refresh_prompts(request: Request) -> dict[str, Any]:
    """Drop the cached collection and load it again."""
    get_store(request).invalidate()
    snapshot = await load_snapshot(request)
    return {"count": len(snapshot)}


@router.get("/{slug}")
async def get_prompt(slug: str, snapshot: PromptSnapshot = Depends(load_snapshot)) -> dict[str, Any]:
    """Return a single prompt by slug."""
    prompt = snapshot.get(slug)
    if prompt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
    return _serialize(prompt)
