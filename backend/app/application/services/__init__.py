from .card_service import CardService
from .contextual_suggestion_service import (
    ContextualSuggestionService,
    get_learning_path,
    get_tool_workflow_info,
    suggest_workflow,
)
from .fuzzy_matcher import find_closest_match, levenshtein_distance
from .intent_detector import detect_intent, detect_question_type, recommend_tools
from .phrase_parser import get_phrase_bank_stats, parse_query
from .query_assist import explain_term, get_autocomplete_suggestions, get_error_suggestion
from .query_normalizer import normalize_query
from .query_service import QueryService
from .screener_filter_extractor import build_screener_query, extract_screener_filters
from .smart_search_service import SmartSearchService

__all__ = [
    "CardService",
    "ContextualSuggestionService",
    "get_learning_path",
    "get_tool_workflow_info",
    "suggest_workflow",
    "find_closest_match",
    "levenshtein_distance",
    "detect_intent",
    "detect_question_type",
    "recommend_tools",
    "get_phrase_bank_stats",
    "parse_query",
    "explain_term",
    "get_autocomplete_suggestions",
    "get_error_suggestion",
    "normalize_query",
    "QueryService",
    "build_screener_query",
    "extract_screener_filters",
    "SmartSearchService",
]
