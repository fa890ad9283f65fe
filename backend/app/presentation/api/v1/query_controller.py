"""Query API controller: parsing, intents, filters and command-bar helpers."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    AutocompleteResponse,
    ContextModifierSchema,
    DetectedIntentSchema,
    ErrorSuggestionSchema,
    IntentResultSchema,
    NormalizedQuerySchema,
    ParsedQuerySchema,
    PhraseMatchSchema,
    QueryAnalysisSchema,
    QueryAnalyzeRequest,
    QueryCorrectionSchema,
    QueryRequest,
    ScreenerFilterSchema,
    ScreenerFiltersSchema,
    TermExplanationSchema,
    ToolRecommendationSchema,
)
from app.application.services import (
    QueryService,
    build_screener_query,
    detect_intent,
    detect_question_type,
    explain_term,
    extract_screener_filters,
    get_autocomplete_suggestions,
    get_error_suggestion,
    get_phrase_bank_stats,
    normalize_query,
    parse_query,
    recommend_tools,
)
from app.domain.entities import (
    DetectedIntent,
    ParsedQuery,
    QueryAnalysis,
    ScreenerFilter,
    SearchOptions,
    ToolRecommendation,
)
from app.infrastructure.dependencies import get_query_service
from app.presentation.api.v1.search_controller import to_search_result_schema
from app.presentation.api.v1.suggestions_controller import to_workflow_match_schema

router = APIRouter(prefix="/query", tags=["query"])


# ── Helpers ──────────────────────────────────────────────────────────


def _to_filter_schema(f: ScreenerFilter) -> ScreenerFilterSchema:
    return ScreenerFilterSchema(metric=f.metric, operator=f.operator, value=f.value, raw=f.raw)


def _to_parsed_schema(parsed: ParsedQuery) -> ParsedQuerySchema:
    """Map a domain ParsedQuery to its response schema."""
    return ParsedQuerySchema(
        original_query=parsed.original_query,
        corrected_query=parsed.corrected_query,
        corrections=[
            QueryCorrectionSchema(
                original=c.original,
                corrected=c.corrected,
                confidence=round(c.confidence, 4),
            )
            for c in parsed.corrections
        ],
        matches=[
            PhraseMatchSchema(
                category=m.category,
                intent=m.mapping.intent,
                cards=list(m.mapping.cards),
                score=round(m.score, 4),
            )
            for m in parsed.matches
        ],
        suggested_cards=parsed.suggested_cards,
        primary_intent=parsed.primary_intent,
        screener_filters=[_to_filter_schema(f) for f in parsed.screener_filters],
        context_modifiers=[
            ContextModifierSchema(type=m.type, value=m.value, raw=m.raw)
            for m in parsed.context_modifiers
        ],
        sentiment=parsed.sentiment,
        symbols=parsed.symbols,
        timeframe=parsed.timeframe,
    )


def _to_intent_schema(intent: DetectedIntent) -> DetectedIntentSchema:
    return DetectedIntentSchema(
        cluster=intent.cluster,
        confidence=round(intent.confidence, 4),
        tools=intent.tools,
        matched_terms=intent.matched_terms,
    )


def _to_recommendation_schema(rec: ToolRecommendation) -> ToolRecommendationSchema:
    return ToolRecommendationSchema(tool_id=rec.tool_id, score=round(rec.score, 4), reasons=rec.reasons)


def _to_analysis_schema(analysis: QueryAnalysis) -> QueryAnalysisSchema:
    """Map a domain QueryAnalysis to its response schema."""
    return QueryAnalysisSchema(
        parsed=_to_parsed_schema(analysis.parsed),
        normalized_query=analysis.normalized_query,
        question_type=analysis.question_type,
        intents=[_to_intent_schema(i) for i in analysis.intents],
        recommendations=[_to_recommendation_schema(r) for r in analysis.recommendations],
        results=[to_search_result_schema(r) for r in analysis.results],
        workflow=to_workflow_match_schema(analysis.workflow) if analysis.workflow else None,
    )


# ── Endpoints ────────────────────────────────────────────────────────


@router.post("/analyze", response_model=QueryAnalysisSchema)
async def analyze_query(
    body: QueryAnalyzeRequest,
    service: QueryService = Depends(get_query_service),
):
    """Run the whole pipeline: parse, detect intents, rank cards, match a workflow."""
    analysis = service.analyze(
        body.query,
        options=SearchOptions(max_results=body.max_results),
        max_recommendations=body.max_recommendations,
    )
    return _to_analysis_schema(analysis)


@router.post("/parse", response_model=ParsedQuerySchema)
async def parse(body: QueryRequest):
    """Phrase-bank parse only: corrections, modifiers, filters, cards, symbols."""
    return _to_parsed_schema(parse_query(body.query))


@router.post("/normalize", response_model=NormalizedQuerySchema)
async def normalize(body: QueryRequest):
    """Synonym normalisation of a query."""
    return NormalizedQuerySchema(original_query=body.query, normalized_query=normalize_query(body.query))


@router.post("/intents", response_model=IntentResultSchema)
async def intents(
    body: QueryRequest,
    max_results: int = Query(default=5, ge=1, le=20),
):
    """Detected intents and aggregated tool recommendations."""
    return IntentResultSchema(
        question_type=detect_question_type(body.query),
        intents=[_to_intent_schema(i) for i in detect_intent(body.query)],
        recommendations=[_to_recommendation_schema(r) for r in recommend_tools(body.query, max_results)],
    )


@router.post("/filters", response_model=ScreenerFiltersSchema)
async def screener_filters(body: QueryRequest):
    """Screener filters mined from the (lower-cased) query."""
    filters = extract_screener_filters(body.query.lower())
    return ScreenerFiltersSchema(
        filters=[_to_filter_schema(f) for f in filters],
        screener_query=build_screener_query(filters),
    )


@router.get("/autocomplete", response_model=AutocompleteResponse)
async def autocomplete(q: str = Query(default="", max_length=200)):
    """Command-bar suggestions for partially typed input."""
    return AutocompleteResponse(input=q, suggestions=get_autocomplete_suggestions(q))


@router.get("/explain/{term}", response_model=TermExplanationSchema)
async def explain(term: str):
    """Glossary entry for a trading term."""
    explanation = explain_term(term)
    if explanation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No explanation for '{term}'")
    return TermExplanationSchema(
        term=term,
        definition=explanation.definition,
        related=list(explanation.related),
        example=explanation.example,
    )


@router.get("/help/{kind}", response_model=ErrorSuggestionSchema)
async def help_copy(kind: str):
    """Help copy for no_results, ambiguous_query or invalid_symbol."""
    suggestion = get_error_suggestion(kind)
    if suggestion is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown help topic '{kind}'")
    return ErrorSuggestionSchema(kind=kind, message=suggestion.message, suggestions=list(suggestion.suggestions))


@router.get("/stats", response_model=dict[str, int])
async def stats():
    """Lexicon table sizes, for diagnostics."""
    return get_phrase_bank_stats()
