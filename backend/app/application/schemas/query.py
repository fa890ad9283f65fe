"""Pydantic schemas for query-understanding API requests and responses."""

from pydantic import BaseModel, Field

from app.application.schemas.search import SearchResultSchema
from app.application.schemas.suggestions import WorkflowMatchSchema
from app.domain.entities import QuestionType


# ── Request Schemas ──────────────────────────────────────────────────


class QueryRequest(BaseModel):
    """Request body carrying a free-text trader query."""

    query: str = Field(..., min_length=1, max_length=500, description="Free-text trader query")


class QueryAnalyzeRequest(QueryRequest):
    """Full analysis request: query plus ranking limits."""

    max_results: int = Field(default=10, ge=1, le=50, description="Maximum number of ranked cards")
    max_recommendations: int = Field(default=5, ge=1, le=20)


# ── Response Schemas ─────────────────────────────────────────────────


class QueryCorrectionSchema(BaseModel):
    """A typo or fuzzy correction applied to the query."""

    original: str
    corrected: str
    confidence: float


class ScreenerFilterSchema(BaseModel):
    """A metric constraint mined from the query."""

    metric: str
    operator: str
    value: float | str
    raw: str


class ContextModifierSchema(BaseModel):
    """A time, comparison or sentiment qualifier."""

    type: str
    value: str
    raw: str


class PhraseMatchSchema(BaseModel):
    """A phrase-bank category hit."""

    category: str
    intent: str
    cards: list[str] = []
    score: float


class ParsedQuerySchema(BaseModel):
    """Complete parse of a trader query."""

    original_query: str
    corrected_query: str
    corrections: list[QueryCorrectionSchema] = []
    matches: list[PhraseMatchSchema] = []
    suggested_cards: list[str] = []
    primary_intent: str = "analyze"
    screener_filters: list[ScreenerFilterSchema] = []
    context_modifiers: list[ContextModifierSchema] = []
    sentiment: str | None = None
    symbols: list[str] = []
    timeframe: str | None = None


class NormalizedQuerySchema(BaseModel):
    """A query before and after synonym normalisation."""

    original_query: str
    normalized_query: str


class DetectedIntentSchema(BaseModel):
    """An intent hit with its confidence."""

    cluster: str
    confidence: float
    tools: list[str] = []
    matched_terms: list[str] = []


class ToolRecommendationSchema(BaseModel):
    """Aggregated intent score for a tool."""

    tool_id: str
    score: float
    reasons: list[str] = []


class IntentResultSchema(BaseModel):
    """Intents, tool recommendations and question shape of a query."""

    question_type: QuestionType
    intents: list[DetectedIntentSchema] = []
    recommendations: list[ToolRecommendationSchema] = []


class ScreenerFiltersSchema(BaseModel):
    """Screener filters plus their human-readable rendering."""

    filters: list[ScreenerFilterSchema] = []
    screener_query: str = ""


class QueryAnalysisSchema(BaseModel):
    """Full query-understanding result with ranked cards."""

    parsed: ParsedQuerySchema
    normalized_query: str
    question_type: QuestionType
    intents: list[DetectedIntentSchema] = []
    recommendations: list[ToolRecommendationSchema] = []
    results: list[SearchResultSchema] = []
    workflow: WorkflowMatchSchema | None = None


class AutocompleteResponse(BaseModel):
    """Command-bar suggestions for partial input."""

    input: str
    suggestions: list[str] = []


class TermExplanationSchema(BaseModel):
    """Glossary entry for a trading term."""

    term: str
    definition: str
    related: list[str] = []
    example: str | None = None


class ErrorSuggestionSchema(BaseModel):
    """Consumer-facing help copy for an unhelpful result."""

    kind: str
    message: str
    suggestions: list[str] = []
