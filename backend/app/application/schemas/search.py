"""Pydantic schemas for card search requests and responses."""

from pydantic import BaseModel, Field

from app.application.schemas.cards import CardResponse
from app.domain.entities import ComplexityLevel, MatchType, QuestionType, UserSegment


class SearchRequest(BaseModel):
    """Ranked search request with optional hard filters."""

    query: str = Field(..., max_length=500, description="Free-text search query")
    segment: UserSegment | None = None
    complexity: ComplexityLevel | None = None
    category: str | None = None
    max_results: int | None = Field(default=None, ge=1, le=100)
    include_explanation: bool = True


class SearchResultSchema(BaseModel):
    """A ranked card with score and explanation."""

    card: CardResponse
    score: float
    match_type: MatchType
    matched_terms: list[str] = []
    explanation: str = ""


class SearchResponse(BaseModel):
    """Ranked search results."""

    query: str
    results: list[SearchResultSchema] = []
    total: int = 0


class QuestionTypedSearchResponse(SearchResponse):
    """Ranked results re-weighted by the detected question type."""

    question_type: QuestionType
