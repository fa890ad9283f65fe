"""Search API controller: ranked, quick and related card lookups."""

from fastapi import APIRouter, Depends, Query

from app.application.schemas import (
    CardResponse,
    QuestionTypedSearchResponse,
    SearchRequest,
    SearchResponse,
    SearchResultSchema,
)
from app.application.services import SmartSearchService, detect_question_type
from app.config import get_settings
from app.domain.entities import SearchOptions, SearchResult, UserSegment
from app.infrastructure.dependencies import get_smart_search_service

router = APIRouter(prefix="/search", tags=["search"])


# ── Helpers ──────────────────────────────────────────────────────────


def to_search_result_schema(result: SearchResult) -> SearchResultSchema:
    """Map a domain SearchResult to its response schema."""
    return SearchResultSchema(
        card=CardResponse.model_validate(result.card),
        score=round(result.score, 4),
        match_type=result.match_type,
        matched_terms=result.matched_terms,
        explanation=result.explanation,
    )


def _to_search_options(body: SearchRequest) -> SearchOptions:
    return SearchOptions(
        segment=body.segment,
        complexity=body.complexity,
        category=body.category,
        max_results=body.max_results or get_settings().default_max_results,
        include_explanation=body.include_explanation,
    )


# ── Endpoints ────────────────────────────────────────────────────────


@router.post("", response_model=SearchResponse)
async def smart_search(
    body: SearchRequest,
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Rank catalog cards against a free-text query."""
    results = service.smart_search(body.query, _to_search_options(body))
    return SearchResponse(
        query=body.query,
        results=[to_search_result_schema(r) for r in results],
        total=len(results),
    )


@router.get("/quick", response_model=list[CardResponse])
async def quick_search(
    q: str = Query(..., max_length=200),
    limit: int | None = Query(default=None, ge=1, le=50),
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Plain substring lookup on label, id and tags."""
    max_results = limit or get_settings().quick_search_max_results
    return [CardResponse.model_validate(c) for c in service.quick_search(q, max_results)]


@router.get("/by-question", response_model=QuestionTypedSearchResponse)
async def search_by_question_type(
    q: str = Query(..., max_length=500),
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Smart search re-ranked by the shape of the question."""
    results = service.search_by_question_type(q)
    return QuestionTypedSearchResponse(
        query=q,
        question_type=detect_question_type(q),
        results=[to_search_result_schema(r) for r in results],
        total=len(results),
    )


@router.get("/related/{card_id}", response_model=list[CardResponse])
async def related_tools(
    card_id: str,
    limit: int | None = Query(default=None, ge=1, le=20),
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Cards similar to the given card; empty for unknown ids."""
    max_results = limit or get_settings().related_tools_max_results
    return [CardResponse.model_validate(c) for c in service.get_related_tools(card_id, max_results)]


@router.get("/segment/{segment}", response_model=list[CardResponse])
async def recommended_for_segment(
    segment: UserSegment,
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Cards aimed at a trader segment, defaults first."""
    return [CardResponse.model_validate(c) for c in service.get_recommended_for_segment(segment)]
