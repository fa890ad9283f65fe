from .cards import CardResponse, CategoryListResponse
from .query import (
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
from .search import (
    QuestionTypedSearchResponse,
    SearchRequest,
    SearchResponse,
    SearchResultSchema,
)
from .suggestions import (
    ContextualSuggestionSchema,
    ContextualSuggestionsResponse,
    LearningPathSchema,
    LearningStageSchema,
    ToolWorkflowInfoSchema,
    UserContextRequest,
    WorkflowChainSchema,
    WorkflowMatchSchema,
)

__all__ = [
    "CardResponse",
    "CategoryListResponse",
    "AutocompleteResponse",
    "ContextModifierSchema",
    "DetectedIntentSchema",
    "ErrorSuggestionSchema",
    "IntentResultSchema",
    "NormalizedQuerySchema",
    "ParsedQuerySchema",
    "PhraseMatchSchema",
    "QueryAnalysisSchema",
    "QueryAnalyzeRequest",
    "QueryCorrectionSchema",
    "QueryRequest",
    "ScreenerFilterSchema",
    "ScreenerFiltersSchema",
    "TermExplanationSchema",
    "ToolRecommendationSchema",
    "QuestionTypedSearchResponse",
    "SearchRequest",
    "SearchResponse",
    "SearchResultSchema",
    "ContextualSuggestionSchema",
    "ContextualSuggestionsResponse",
    "LearningPathSchema",
    "LearningStageSchema",
    "ToolWorkflowInfoSchema",
    "UserContextRequest",
    "WorkflowChainSchema",
    "WorkflowMatchSchema",
]
