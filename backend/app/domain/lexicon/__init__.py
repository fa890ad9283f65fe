"""Static lexicon tables shared by every stage of the query engine.

Everything here is built once at import time and never mutated.
"""

from .assistance import AUTOCOMPLETE_SUGGESTIONS, ERROR_SUGGESTIONS, TERM_EXPLANATIONS
from .intents import INTENT_CLUSTERS, QUERY_PATTERNS
from .metrics import (
    HIGH_QUALITY_ADJECTIVES,
    METRICS,
    METRICS_BY_ID,
    QUALITY_ADJECTIVES,
    find_metric_containing,
    find_metric_exact,
)
from .modifiers import COMPARISON_MODIFIERS, SENTIMENT_PHRASES, TIME_MODIFIERS
from .operators import OPERATORS, resolve_operator
from .phrase_bank import INDIAN_MARKET_TERMS, PHRASE_BANK
from .synonyms import SYNONYM_MAP
from .typos import COMMON_TYPOS
from .vocabulary import VOCABULARY, VOCABULARY_SET, build_vocabulary
from .workflows import (
    EXPIRY_DAY_TOOLS,
    LEARNING_PATHS,
    MARKET_CONDITION_SUGGESTIONS,
    NEXT_TOOL_MAP,
    TIME_BASED_SUGGESTIONS,
    WORKFLOW_CHAINS,
)

__all__ = [
    "AUTOCOMPLETE_SUGGESTIONS",
    "ERROR_SUGGESTIONS",
    "TERM_EXPLANATIONS",
    "INTENT_CLUSTERS",
    "QUERY_PATTERNS",
    "METRICS",
    "METRICS_BY_ID",
    "QUALITY_ADJECTIVES",
    "HIGH_QUALITY_ADJECTIVES",
    "find_metric_containing",
    "find_metric_exact",
    "COMPARISON_MODIFIERS",
    "SENTIMENT_PHRASES",
    "TIME_MODIFIERS",
    "OPERATORS",
    "resolve_operator",
    "INDIAN_MARKET_TERMS",
    "PHRASE_BANK",
    "SYNONYM_MAP",
    "COMMON_TYPOS",
    "VOCABULARY",
    "VOCABULARY_SET",
    "build_vocabulary",
    "EXPIRY_DAY_TOOLS",
    "LEARNING_PATHS",
    "MARKET_CONDITION_SUGGESTIONS",
    "NEXT_TOOL_MAP",
    "TIME_BASED_SUGGESTIONS",
    "WORKFLOW_CHAINS",
]
