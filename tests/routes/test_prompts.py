"""Tests for the prompt API routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from prompt_gallery.models.prompt import PromptRecord
from tests.factories import FakeSource, make_app


@pytest.fixture
def source() -> FakeSource:
    return FakeSource(
        [
            PromptRecord(title="Story Starter", category="Writing", tags="fun", content="Once upon a time"),
            PromptRecord(
                title="Refactor Helper", author="Ada", category="Code", tags="fun,python", content="Clean code"
            ),
            PromptRecord(
                title="Haiku", author_link="https://poet.example", category="Writing", content="Five seven five"
            ),
        ]
    )


@pytest.fixture
def client(source: FakeSource):
    with TestClient(make_app(source)) as test_client:
        yield test_client


@pytest.mark.unit
class TestListPrompts:
    """Test GET /api/prompts."""

    def test_lists_all_with_indexes(self, client: TestClient) -> None:
        response = client.get("/api/prompts")

        assert response.status_code == 200
        body = response.json()
        assert [prompt["slug"] for prompt in body["prompts"]] == ["story-starter", "refactor-helper", "haiku"]
        assert body["tags"] == ["fun", "python"]
        assert body["categories"] == ["Writing", "Code"]
        assert body["categoryCounts"] == {"Writing": 2, "Code": 1}
        assert body["total"] == 3

    def test_prompt_shape(self, client: TestClient) -> None:
        prompt = client.get("/api/prompts").json()["prompts"][2]

        assert prompt["authorLink"] == "https://poet.example"
        assert prompt["author"] == "Anonymous"
        assert prompt["tags"] == []
        assert prompt["html"] == "<p>Five seven five</p>\n"

    def test_filters_by_category_and_tag(self, client: TestClient) -> None:
        body = client.get("/api/prompts", params={"category": "writing", "tag": "fun"}).json()

        assert [prompt["slug"] for prompt in body["prompts"]] == ["story-starter"]
        assert body["tags"] == ["fun", "python"]

    def test_search_term(self, client: TestClient) -> None:
        body = client.get("/api/prompts", params={"q": "ada"}).json()

        assert [prompt["slug"] for prompt in body["prompts"]] == ["refactor-helper"]

    def test_search_does_not_match_category(self, client: TestClient) -> None:
        body = client.get("/api/prompts", params={"q": "writing"}).json()

        assert body["prompts"] == []

    def test_fetch_failure_returns_502(self, source: FakeSource, fetch_error) -> None:
        source.error = fetch_error
        with TestClient(make_app(source)) as client:
            response = client.get("/api/prompts")

        assert response.status_code == 502
        assert response.json() == {"detail": "Prompt collection is unavailable"}

    def test_repeated_requests_hit_cache(self, client: TestClient, source: FakeSource) -> None:
        client.get("/api/prompts")
        client.get("/api/prompts")

        assert source.calls == 1


@pytest.mark.unit
class TestGetPrompt:
    """Test GET /api/prompts/{slug}."""

    def test_returns_prompt(self, client: TestClient) -> None:
        response = client.get("/api/prompts/haiku")

        assert response.status_code == 200
        assert response.json()["title"] == "Haiku"

    def test_unknown_slug_is_404(self, client: TestClient) -> None:
        response = client.get("/api/prompts/nope")

        assert response.status_code == 404


@pytest.mark.unit
def test_refresh_reloads_collection(client: TestClient, source: FakeSource) -> None:
    client.get("/api/prompts")
    source.records = source.records[:1]

    response = client.post("/api/prompts/refresh")

    assert response.status_code == 200
    assert response.json() == {"count": 1}
    assert source.calls == 2
