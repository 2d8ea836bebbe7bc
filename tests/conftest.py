"""Shared fixtures for prompt gallery tests."""

from __future__ import annotations

import pytest

from prompt_gallery.errors import FetchError
from prompt_gallery.models.prompt import PromptRecord
from tests.factories import FakeClock, FakeSource


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource(
        [
            PromptRecord(title="Code Reviewer", category="Code", tags="review,python", content="Review code."),
            PromptRecord(title="Story Starter", category="Writing", tags="fun", content="Write a story."),
        ]
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("fake://prompts", "Unexpected status 503", status_code=503)
