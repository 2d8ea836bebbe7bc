"""Public page routes — prompt permalinks and the sitemap."""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response

from prompt_gallery.routes.dependencies import load_snapshot
from prompt_gallery.sitemap import render_sitemap
from prompt_gallery.store import PromptSnapshot

router = APIRouter(tags=["pages"])

logger = logging.getLogger(__name__)


@router.get("/prompt/{slug}")
async def prompt_permalink(slug: str, snapshot: PromptSnapshot = Depends(load_snapshot)) -> RedirectResponse:
    """Redirect to the home page with the prompt selected, or home if unknown."""
    if snapshot.get(slug) is None:
        logger.warning("No prompt found — slug=%s", slug)
        return RedirectResponse("/", status_code=303)
    return RedirectResponse(f"/?prompt={quote(slug)}", status_code=303)


@router.get("/sitemap.xml")
async def sitemap(request: Request, snapshot: PromptSnapshot = Depends(load_snapshot)) -> Response:
    """Serve the XML sitemap."""
    settings = request.app.state.settings
    base_url = settings.app.site_url or str(request.base_url)
    return Response(content=render_sitemap(snapshot.prompts, base_url), media_type="application/xml")
