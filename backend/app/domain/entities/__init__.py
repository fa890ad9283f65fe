from .card import CardDescriptor, ComplexityLevel, UserSegment
from .lexicon import (
    AutocompleteGroup,
    ErrorSuggestion,
    IntentCluster,
    LearningPath,
    LearningStage,
    MarketConditionPlaybook,
    MetricDefinition,
    NextToolRule,
    OperatorAlias,
    PhraseMapping,
    QueryPattern,
    TermExplanation,
    ToolGroupSuggestion,
    WorkflowChain,
)
from .query import (
    ContextModifier,
    DetectedIntent,
    ParsedQuery,
    PhraseMatch,
    QueryAnalysis,
    QueryCorrection,
    ScreenerFilter,
    ToolRecommendation,
)
from .search import MatchType, QuestionType, SearchOptions, SearchResult
from .suggestion import ContextualSuggestion, ToolWorkflowInfo, UserContext, WorkflowMatch

__all__ = [
    "CardDescriptor",
    "ComplexityLevel",
    "UserSegment",
    "AutocompleteGroup",
    "ErrorSuggestion",
    "IntentCluster",
    "LearningPath",
    "LearningStage",
    "MarketConditionPlaybook",
    "MetricDefinition",
    "NextToolRule",
    "OperatorAlias",
    "PhraseMapping",
    "QueryPattern",
    "TermExplanation",
    "ToolGroupSuggestion",
    "WorkflowChain",
    "ContextModifier",
    "DetectedIntent",
    "ParsedQuery",
    "PhraseMatch",
    "QueryAnalysis",
    "QueryCorrection",
    "ScreenerFilter",
    "ToolRecommendation",
    "MatchType",
    "QuestionType",
    "SearchOptions",
    "SearchResult",
    "ContextualSuggestion",
    "ToolWorkflowInfo",
    "UserContext",
    "WorkflowMatch",
]
