"""Domain entities for card search results."""

from dataclasses import dataclass, field
from enum import Enum

from .card import CardDescriptor, ComplexityLevel, UserSegment


class MatchType(str, Enum):
    """Which ranking signal first lifted a card above the fuzzy baseline."""

    EXACT = "exact"
    SYNONYM = "synonym"
    INTENT = "intent"
    TAG = "tag"
    FUZZY = "fuzzy"


class QuestionType(str, Enum):
    """Coarse shape of a question, used for question-typed boosting."""

    HOW_MUCH = "how_much"
    WHAT_IS = "what_is"
    WHICH = "which"
    WHY = "why"
    SHOW_ME = "show_me"
    FIND = "find"
    COMPARE = "compare"


@dataclass
class SearchOptions:
    """Hard filters and limits for a ranked search."""

    segment: UserSegment | None = None
    complexity: ComplexityLevel | None = None
    category: str | None = None
    max_results: int = 10
    include_explanation: bool = True


@dataclass
class SearchResult:
    """A ranked card with its score in (0.1, 1] and a short explanation."""

    card: CardDescriptor
    score: float
    match_type: MatchType
    matched_terms: list[str] = field(default_factory=list)
    explanation: str = ""
