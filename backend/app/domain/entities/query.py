"""Domain entities for parsed trader queries: corrections, filters and intents."""

from dataclasses import dataclass, field

from .lexicon import PhraseMapping
from .search import QuestionType, SearchResult
from .suggestion import WorkflowMatch


@dataclass
class ScreenerFilter:
    """A single constraint extracted from the query.

    ``value`` is a number for "pe < 15" style filters, or the placeholder
    string ``"high"`` / ``"low"`` for adjective filters ("high dividend yield")
    that a downstream screener resolves to a percentile.
    """

    metric: str
    operator: str
    value: float | str
    raw: str


@dataclass
class ContextModifier:
    """A time, comparison or sentiment qualifier found in the query."""

    type: str  # "time" | "comparison" | "sentiment"
    value: str
    raw: str


@dataclass
class QueryCorrection:
    """A typo or fuzzy correction applied while parsing."""

    original: str
    corrected: str
    confidence: float


@dataclass
class PhraseMatch:
    """A phrase-bank category hit with its accumulated score."""

    category: str
    mapping: PhraseMapping
    score: float


@dataclass
class ParsedQuery:
    """Complete, fully derived parse of one trader query."""

    original_query: str
    corrected_query: str
    corrections: list[QueryCorrection] = field(default_factory=list)
    matches: list[PhraseMatch] = field(default_factory=list)
    suggested_cards: list[str] = field(default_factory=list)
    primary_intent: str = "analyze"
    screener_filters: list[ScreenerFilter] = field(default_factory=list)
    context_modifiers: list[ContextModifier] = field(default_factory=list)
    sentiment: str | None = None  # "bullish" | "bearish" | "neutral"
    symbols: list[str] = field(default_factory=list)
    timeframe: str | None = None


@dataclass
class DetectedIntent:
    """An intent hit with confidence in (0, 0.95]."""

    cluster: str
    confidence: float
    tools: list[str] = field(default_factory=list)
    matched_terms: list[str] = field(default_factory=list)


@dataclass
class ToolRecommendation:
    """Aggregated intent confidence for one tool, capped at 1.0."""

    tool_id: str
    score: float
    reasons: list[str] = field(default_factory=list)


@dataclass
class QueryAnalysis:
    """Everything the engine understands about one query, plus ranked cards."""

    parsed: ParsedQuery
    normalized_query: str
    question_type: QuestionType
    intents: list[DetectedIntent] = field(default_factory=list)
    recommendations: list[ToolRecommendation] = field(default_factory=list)
    results: list[SearchResult] = field(default_factory=list)
    workflow: WorkflowMatch | None = None
