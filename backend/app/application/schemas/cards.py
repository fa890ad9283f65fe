"""Pydantic schemas for card catalog responses."""

from pydantic import BaseModel

from app.domain.entities import ComplexityLevel, UserSegment


class CardResponse(BaseModel):
    """A single analytics card as exposed by the API."""

    id: str
    label: str
    category: str
    description: str = ""
    tags: list[str] = []
    kind: str = "card"
    segments: list[UserSegment] | None = None
    complexity: ComplexityLevel | None = None
    default: bool = False
    has_edge_metric: bool = False
    has_risk_sizing: bool = False
    has_behavioral_tip: bool = False

    model_config = {"from_attributes": True}


class CategoryListResponse(BaseModel):
    """Distinct card categories in catalog order."""

    categories: list[str] = []
