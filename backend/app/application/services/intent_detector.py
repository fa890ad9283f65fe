"""Intent detection and tool recommendation over the intent lexicon.

Two signal sources feed :func:`detect_intent`:

1. Structural query patterns, tested against the raw query. Every hit is
   reported at a fixed 0.95 confidence.
2. Intent clusters, scored by how many of a cluster's terms appear in the
   normalized query. Cluster confidence is capped at 0.9 so structural hits
   always rank above bag-of-terms hits.
"""

import re

from app.application.services.query_normalizer import normalize_query
from app.domain.entities import DetectedIntent, QuestionType, ToolRecommendation
from app.domain.lexicon import INTENT_CLUSTERS, QUERY_PATTERNS

PATTERN_CONFIDENCE = 0.95
CLUSTER_CONFIDENCE_CAP = 0.9

# Prefix rules, tested in order; the first match decides.
_QUESTION_TYPE_RULES: tuple[tuple[re.Pattern[str], QuestionType], ...] = (
    (re.compile(r"^(how much|how many|calculate|compute)"), QuestionType.HOW_MUCH),
    (re.compile(r"^(what is|what's|explain|define)"), QuestionType.WHAT_IS),
    (re.compile(r"^(which|what|best|recommend)"), QuestionType.WHICH),
    (re.compile(r"^(why|how come|reason)"), QuestionType.WHY),
    (re.compile(r"^(show|display|visualize|chart)"), QuestionType.SHOW_ME),
    (re.compile(r"^(find|search|screen|scan|filter)"), QuestionType.FIND),
    (re.compile(r"^(compare|versus|vs|difference)"), QuestionType.COMPARE),
)


def detect_intent(query: str) -> list[DetectedIntent]:
    """Return every detected intent, sorted by confidence (stable, descending)."""
    results: list[DetectedIntent] = []

    for pattern in QUERY_PATTERNS:
        if pattern.pattern.search(query):
            results.append(
                DetectedIntent(
                    cluster=pattern.intent,
                    confidence=PATTERN_CONFIDENCE,
                    tools=list(pattern.tools),
                    matched_terms=[pattern.pattern.pattern],
                )
            )

    normalized = normalize_query(query)
    for name, cluster in INTENT_CLUSTERS.items():
        matched = [term for term in cluster.terms if term.lower() in normalized]
        if not matched:
            continue

        match_ratio = len(matched) / len(cluster.terms)
        priority_boost = (4 - cluster.priority) * 0.1  # priority 1 → +0.3, 3 → +0.1
        results.append(
            DetectedIntent(
                cluster=name,
                confidence=min(CLUSTER_CONFIDENCE_CAP, match_ratio * 2 + priority_boost),
                tools=list(cluster.tools),
                matched_terms=matched,
            )
        )

    results.sort(key=lambda intent: intent.confidence, reverse=True)
    return results


def recommend_tools(query: str, max_results: int = 5) -> list[ToolRecommendation]:
    """Aggregate intent confidences per tool, capped at 1.0, best first."""
    scores: dict[str, float] = {}
    reasons: dict[str, list[str]] = {}

    for intent in detect_intent(query):
        reason = f"Matched {intent.cluster} ({', '.join(intent.matched_terms[:3])})"
        for tool in intent.tools:
            scores[tool] = scores.get(tool, 0.0) + intent.confidence
            reasons.setdefault(tool, []).append(reason)

    recommendations = [
        ToolRecommendation(tool_id=tool, score=min(1.0, score), reasons=reasons[tool])
        for tool, score in scores.items()
    ]
    recommendations.sort(key=lambda rec: rec.score, reverse=True)
    return recommendations[:max_results]


def detect_question_type(query: str) -> QuestionType:
    """Classify the opening of a question; defaults to ``what_is``."""
    lower = query.lower()
    for pattern, question_type in _QUESTION_TYPE_RULES:
        if pattern.match(lower):
            return question_type
    return QuestionType.WHAT_IS
