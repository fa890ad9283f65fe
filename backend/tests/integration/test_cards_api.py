"""Integration tests for the /cards endpoints."""

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
async def test_list_cards(client: AsyncClient):
    response = await client.get("/api/v1/cards")

    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 79
    assert cards[0]["id"] == "stock-snapshot"


@pytest.mark.asyncio
async def test_list_cards_by_category(client: AsyncClient):
    response = await client.get("/api/v1/cards", params={"category": "value"})

    assert response.status_code == 200
    cards = response.json()
    assert len(cards) == 8
    assert {card["category"] for card in cards} == {"value"}


@pytest.mark.asyncio
async def test_list_categories(client: AsyncClient):
    response = await client.get("/api/v1/cards/categories")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert categories[0] == "overview"
    assert len(categories) == len(set(categories))


@pytest.mark.asyncio
async def test_get_card(client: AsyncClient):
    response = await client.get("/api/v1/cards/fno-risk-advisor")

    assert response.status_code == 200
    assert response.json()["id"] == "fno-risk-advisor"


@pytest.mark.asyncio
async def test_get_unknown_card_returns_404(client: AsyncClient):
    response = await client.get("/api/v1/cards/no-such-card")
    assert response.status_code == 404
