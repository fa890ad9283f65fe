"""Integration tests for the /search endpoints."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_smart_search_ranks_by_score(client: AsyncClient):
    response = await client.post(
        "/api/v1/search",
        json={"query": "calculate position size", "max_results": 5},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "calculate position size"
    assert 0 < data["total"] <= 5
    assert data["total"] == len(data["results"])
    scores = [r["score"] for r in data["results"]]
    assert scores == sorted(scores, reverse=True)
    assert any(r["card"]["id"] == "fno-risk-advisor" for r in data["results"])


@pytest.mark.asyncio
async def test_smart_search_segment_filter(client: AsyncClient):
    response = await client.post(
        "/api/v1/search",
        json={"query": "valuation", "segment": "investor"},
    )

    assert response.status_code == 200
    for result in response.json()["results"]:
        segments = result["card"]["segments"]
        assert segments is None or "investor" in segments


@pytest.mark.asyncio
async def test_smart_search_empty_query_returns_nothing(client: AsyncClient):
    response = await client.post("/api/v1/search", json={"query": ""})

    assert response.status_code == 200
    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_quick_search(client: AsyncClient):
    response = await client.get("/api/v1/search/quick", params={"q": "snapshot", "limit": 3})

    assert response.status_code == 200
    cards = response.json()
    assert cards[0]["id"] == "stock-snapshot"
    assert len(cards) <= 3


@pytest.mark.asyncio
async def test_search_by_question_type(client: AsyncClient):
    response = await client.get("/api/v1/search/by-question", params={"q": "how much capital do I need"})

    assert response.status_code == 200
    assert response.json()["question_type"] == "how_much"


@pytest.mark.asyncio
async def test_related_tools(client: AsyncClient):
    response = await client.get("/api/v1/search/related/dcf-valuation", params={"limit": 3})
    unknown = await client.get("/api/v1/search/related/no-such-card")

    assert response.status_code == 200
    related = response.json()
    assert 0 < len(related) <= 3
    assert all(card["id"] != "dcf-valuation" for card in related)
    assert unknown.status_code == 200
    assert unknown.json() == []


@pytest.mark.asyncio
async def test_recommended_for_segment(client: AsyncClient):
    response = await client.get("/api/v1/search/segment/scalper")
    invalid = await client.get("/api/v1/search/segment/whale")

    assert response.status_code == 200
    assert all("scalper" in card["segments"] for card in response.json())
    assert invalid.status_code == 422
