"""HTTP routes."""

from prompt_gallery.routes.pages import router as pages_router
from prompt_gallery.routes.prompts import router as prompts_router

__all__ = ["pages_router", "prompts_router"]
