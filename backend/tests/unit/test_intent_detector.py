"""Unit tests for intent detection, tool recommendation and question types."""

import pytest

from app.application.services.intent_detector import (
    PATTERN_CONFIDENCE,
    detect_intent,
    detect_question_type,
    recommend_tools,
)
from app.domain.entities import QuestionType

SAMPLE_QUERIES = [
    "calculate position size for 2L capital",
    "stocks with PE < 15 and ROE > 20",
    "show oi buildup for banknifty",
    "why am I losing money",
    "bullish on RELIANCE",
    "best options strategy for expiry",
    "rsi divergence on nifty 15m chart",
    "",
]


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_confidences_are_bounded(query: str):
    for intent in detect_intent(query):
        assert 0 < intent.confidence <= PATTERN_CONFIDENCE


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_intents_are_sorted_by_confidence(query: str):
    confidences = [i.confidence for i in detect_intent(query)]
    assert confidences == sorted(confidences, reverse=True)


def test_structural_pattern_hit_reports_pattern_source():
    intents = detect_intent("calculate position size for 2L capital")
    top = intents[0]
    assert top.confidence == PATTERN_CONFIDENCE
    assert "fno-risk-advisor" in top.tools
    assert len(top.matched_terms) == 1


def test_cluster_confidence_never_exceeds_cap():
    for intent in detect_intent("rsi macd bollinger vwap supertrend ema sma"):
        if intent.confidence != PATTERN_CONFIDENCE:
            assert intent.confidence <= 0.9


def test_no_intents_for_unrelated_text():
    assert detect_intent("xyzzy plugh") == []


def test_position_sizing_query_ranks_risk_advisor_first():
    recommendations = recommend_tools("calculate position size for 2L capital")
    assert recommendations[0].tool_id == "fno-risk-advisor"


def test_recommendations_are_capped_and_sorted():
    recommendations = recommend_tools("show oi buildup for banknifty", max_results=3)
    assert len(recommendations) <= 3
    scores = [r.score for r in recommendations]
    assert scores == sorted(scores, reverse=True)
    assert all(0 < s <= 1.0 for s in scores)


def test_recommendation_reasons_name_the_cluster():
    for rec in recommend_tools("calculate position size for 2L capital"):
        assert rec.reasons
        assert all(reason.startswith("Matched ") for reason in rec.reasons)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("how much capital do I need", QuestionType.HOW_MUCH),
        ("Calculate lot size", QuestionType.HOW_MUCH),
        ("what is cpr", QuestionType.WHAT_IS),
        ("which stock has the best roe", QuestionType.WHICH),
        ("why am I losing money", QuestionType.WHY),
        ("show me rsi divergence", QuestionType.SHOW_ME),
        ("find breakout stocks", QuestionType.FIND),
        ("compare tcs and infy", QuestionType.COMPARE),
        ("nifty", QuestionType.WHAT_IS),
    ],
)
def test_question_type(query: str, expected: QuestionType):
    assert detect_question_type(query) is expected
