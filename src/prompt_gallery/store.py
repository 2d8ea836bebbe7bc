"""Prompt store — single-flight, TTL-bounded cache of the normalized collection."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from prompt_gallery.indexes import category_counts, distinct_categories, distinct_tags
from prompt_gallery.ingest.normalizer import PromptNormalizer
from prompt_gallery.models.prompt import Prompt
from prompt_gallery.sources import PromptSource

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class PromptSnapshot:
    """An immutable view of one load: prompts plus the indexes derived from them."""

    prompts: tuple[Prompt, ...]
    tags: tuple[str, ...]
    categories: tuple[str, ...]
    loaded_at: float
    _by_slug: dict[str, Prompt] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def build(cls, prompts: Iterable[Prompt], loaded_at: float) -> PromptSnapshot:
        items = tuple(prompts)
        # Later prompts win on slug collisions.
        by_slug = {prompt.slug: prompt for prompt in items}
        return cls(
            prompts=items,
            tags=tuple(distinct_tags(items)),
            categories=tuple(distinct_categories(items)),
            loaded_at=loaded_at,
            _by_slug=by_slug,
        )

    def __len__(self) -> int:
        return len(self.prompts)

    def get(self, slug: str) -> Prompt | None:
        return self._by_slug.get(slug)

    def category_counts(self) -> dict[str, int]:
        return category_counts(self.prompts)


def _consume_exception(task: asyncio.Task[PromptSnapshot]) -> None:
    # Marks the failure as retrieved when every waiter was cancelled first.
    if not task.cancelled():
        task.exception()


class PromptStore:
    """Owns the cached collection for one source.

    Concurrent callers that arrive while a load is running share that load's
    outcome, so at most one fetch is outstanding at a time. A failed load
    clears the cache and the error reaches every waiter.
    """

    def __init__(
        self,
        source: PromptSource,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        normalizer: PromptNormalizer | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._ttl = ttl_seconds
        self._normalizer = normalizer or PromptNormalizer()
        self._clock = clock
        self._snapshot: PromptSnapshot | None = None
        self._loading: asyncio.Task[PromptSnapshot] | None = None

    @property
    def snapshot(self) -> PromptSnapshot | None:
        """The cached snapshot, fresh or not, without triggering a load."""
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        return self._loading is not None

    def _is_fresh(self, snapshot: PromptSnapshot) -> bool:
        return self._clock() - snapshot.loaded_at < self._ttl

    async def init(self) -> PromptSnapshot:
        """Warm the cache so the first request is served from memory."""
        snapshot = await self.get()
        logger.info("Prompt store initialized — prompts=%d source=%s", len(snapshot), self._source.describe())
        return snapshot

    async def get(self) -> PromptSnapshot:
        """Return the current snapshot, loading it if missing or expired."""
        snapshot = self._snapshot
        if snapshot is not None and self._is_fresh(snapshot):
            return snapshot
        if self._loading is None:
            self._loading = asyncio.create_task(self._load())
            self._loading.add_done_callback(_consume_exception)
        return await asyncio.shield(self._loading)

    def invalidate(self) -> None:
        """Drop the cached snapshot; the next :meth:`get` reloads.

        A load that is already running still completes and is delivered to
        its waiters.
        """
        self._snapshot = None
        logger.info("Prompt store invalidated — source=%s", self._source.describe())

    async def _load(self) -> PromptSnapshot:
        started = time.perf_counter()
        try:
            records = await self._source.load_records()
            snapshot = PromptSnapshot.build(self._normalizer.normalize_all(records), loaded_at=self._clock())
        except Exception:
            self._snapshot = None
            raise
        finally:
            self._loading = None
        self._snapshot = snapshot
        logger.info(
            "Prompts loaded — count=%d tags=%d categories=%d elapsed_ms=%.1f",
            len(snapshot),
            len(snapshot.tags),
            len(snapshot.categories),
            (time.perf_counter() - started) * 1000,
        )
        return snapshot

    async def aclose(self) -> None:
        """Cancel any in-flight load and close the source."""
        task = self._loading
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._loading = None
        await self._source.aclose()
