"""Integration tests for the /suggestions endpoints."""

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
async def test_contextual_suggestions_on_expiry(client: AsyncClient):
    response = await client.post(
        "/api/v1/suggestions/contextual",
        json={
            "current_tool": "price-structure",
            "time_of_day": "closing_hour",
            "is_expiry": True,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert [s["card"]["id"] for s in data["suggestions"]] == [
        "fno-risk-advisor",
        "trade-flow-intel",
        "technical-indicators",
        "options-strategy",
        "delivery-analysis",
        "price-structure",
    ]
    assert data["warnings"]
    assert data["strategies"] == []


@pytest.mark.asyncio
async def test_contextual_suggestions_market_playbook(client: AsyncClient):
    response = await client.post(
        "/api/v1/suggestions/contextual",
        json={"market_condition": "bullish"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["warnings"] == []
    assert "trend following" in data["strategies"]
    assert "shorting" in data["avoid"]
    assert all(s["context_match"] == ["market_condition"] for s in data["suggestions"])


@pytest.mark.asyncio
async def test_list_workflows(client: AsyncClient):
    response = await client.get("/api/v1/suggestions/workflows")

    assert response.status_code == 200
    names = [w["name"] for w in response.json()]
    assert names[:2] == ["intraday_morning", "fno_analysis"]


@pytest.mark.asyncio
async def test_workflow_for_query(client: AsyncClient):
    found = await client.get("/api/v1/suggestions/workflow", params={"q": "best options strategy for expiry"})
    missing = await client.get("/api/v1/suggestions/workflow", params={"q": "xyzzy plugh"})

    assert found.status_code == 200
    assert found.json()["name"] == "fno_analysis"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_workflow_info(client: AsyncClient):
    response = await client.get("/api/v1/suggestions/workflow-info/fno-risk-advisor")
    standalone = await client.get("/api/v1/suggestions/workflow-info/no-such-card")

    assert response.status_code == 200
    data = response.json()
    assert data["workflows"] == ["intraday_morning", "fno_analysis"]
    assert data["position"] == "middle"
    assert standalone.json()["position"] == "standalone"
    assert standalone.json()["workflows"] == []


@pytest.mark.asyncio
async def test_learning_path(client: AsyncClient):
    response = await client.get("/api/v1/suggestions/learning-path/scalper")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Scalper Learning Path"
    assert data["stages"][0]["tools"] == ["candlestick-hero", "price-structure"]
