"""Cards API controller: read-only access to the card catalog."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import CardResponse, CategoryListResponse
from app.application.services import CardService
from app.domain.entities import UserSegment
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_card_service

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=list[CardResponse])
async def list_cards(
    category: str | None = None,
    segment: UserSegment | None = None,
    service: CardService = Depends(get_card_service),
) -> list[CardResponse]:
    """List catalog cards, optionally narrowed by category and segment."""
    cards = service.list_cards(category=category, segment=segment)
    return [CardResponse.model_validate(c) for c in cards]


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    service: CardService = Depends(get_card_service),
) -> CategoryListResponse:
    """Distinct card categories."""
    return CategoryListResponse(categories=service.list_categories())


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: str,
    service: CardService = Depends(get_card_service),
) -> CardResponse:
    """Retrieve a single card by id."""
    try:
        card = service.get_card(card_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CardResponse.model_validate(card)
