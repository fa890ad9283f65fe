"""Unit tests for the SmartSearchService card ranker."""

import pytest

from app.application.services import SmartSearchService
from app.domain.entities import (
    CardDescriptor,
    ComplexityLevel,
    MatchType,
    SearchOptions,
    UserSegment,
)
from app.infrastructure.catalog import InMemoryCardCatalog


def _card(card_id: str, **overrides) -> CardDescriptor:
    fields = {
        "label": card_id.replace("-", " ").title(),
        "category": "technical",
        "description": "",
        "tags": (),
    }
    fields.update(overrides)
    return CardDescriptor(id=card_id, **fields)


@pytest.fixture
def cards() -> list[CardDescriptor]:
    return [
        _card(
            "trade-journal",
            category="behavioral",
            tags=("journal", "review", "mistakes"),
            segments=(UserSegment.SWING, UserSegment.INTRADAY),
            complexity=ComplexityLevel.BEGINNER,
            has_behavioral_tip=True,
            default=True,
        ),
        _card(
            "rsi-scanner",
            description="Scan for rsi divergence across the watchlist",
            tags=("rsi", "momentum", "oscillator"),
            segments=(UserSegment.SWING,),
            complexity=ComplexityLevel.BEGINNER,
        ),
        _card(
            "momentum-board",
            tags=("momentum", "trend"),
            segments=(UserSegment.SWING,),
            complexity=ComplexityLevel.INTERMEDIATE,
        ),
        _card(
            "value-screener",
            category="screener",
            tags=("valuation", "undervalued"),
            segments=(UserSegment.INVESTOR,),
            complexity=ComplexityLevel.INTERMEDIATE,
            has_edge_metric=True,
        ),
        _card("unscoped-card", category="misc", tags=("momentum",)),
        _card("perf-edge", category="performance", tags=("performance",), has_edge_metric=True),
        _card("perf-plain", category="performance", tags=("performance",)),
    ]


@pytest.fixture
def service(cards: list[CardDescriptor]) -> SmartSearchService:
    return SmartSearchService(InMemoryCardCatalog(cards))


# ── smart_search ─────────────────────────────────────────────────────


def test_exact_id_match_ranks_first(service: SmartSearchService):
    results = service.smart_search("trade journal")
    top = results[0]
    assert top.card.id == "trade-journal"
    assert top.match_type is MatchType.EXACT
    assert top.score == 1.0
    assert top.explanation == 'Direct match for "Trade Journal"'


@pytest.mark.parametrize("query", ["momentum", "rsi divergence", "trade journal", "performance", "valuation"])
def test_scores_bounded_sorted_and_truncated(service: SmartSearchService, query: str):
    results = service.smart_search(query, SearchOptions(max_results=2))
    assert len(results) <= 2
    scores = [r.score for r in results]
    assert all(0.1 < s <= 1.0 for s in scores)
    assert scores == sorted(scores, reverse=True)


def test_tag_match_type_and_explanation(service: SmartSearchService):
    results = service.smart_search("momentum")
    by_id = {r.card.id: r for r in results}
    assert by_id["rsi-scanner"].match_type is MatchType.TAG
    assert by_id["rsi-scanner"].explanation.startswith("Matched tags:")
    assert "momentum" in by_id["rsi-scanner"].matched_terms
    # a label hit outranks tags for the match type
    assert by_id["momentum-board"].match_type is MatchType.EXACT


def test_explanations_can_be_disabled(service: SmartSearchService):
    results = service.smart_search("momentum", SearchOptions(include_explanation=False))
    assert results
    assert all(r.explanation == "" for r in results)


def test_matched_terms_are_unique(service: SmartSearchService):
    for result in service.smart_search("rsi divergence"):
        assert len(result.matched_terms) == len(set(result.matched_terms))


def test_segment_filter_keeps_unscoped_cards(service: SmartSearchService):
    results = service.smart_search("momentum", SearchOptions(segment=UserSegment.SWING))
    ids = {r.card.id for r in results}
    assert "momentum-board" in ids
    assert "unscoped-card" in ids


def test_segment_filter_excludes_other_segments(service: SmartSearchService):
    results = service.smart_search("valuation", SearchOptions(segment=UserSegment.SWING))
    assert "value-screener" not in {r.card.id for r in results}


def test_complexity_filter(service: SmartSearchService):
    results = service.smart_search("momentum", SearchOptions(complexity=ComplexityLevel.BEGINNER))
    ids = {r.card.id for r in results}
    assert "momentum-board" not in ids
    assert "rsi-scanner" in ids


def test_category_filter(service: SmartSearchService):
    results = service.smart_search("momentum", SearchOptions(category="misc"))
    assert [r.card.id for r in results] == ["unscoped-card"]


def test_edge_metric_boost_on_performance_queries(service: SmartSearchService):
    results = service.smart_search("trading performance")
    ids = [r.card.id for r in results]
    assert ids.index("perf-edge") < ids.index("perf-plain")


def test_empty_query_returns_nothing(service: SmartSearchService):
    assert service.smart_search("   ") == []


def test_unrelated_query_returns_nothing(service: SmartSearchService):
    assert service.smart_search("xyzzy plugh") == []


# ── quick_search ─────────────────────────────────────────────────────


def test_quick_search_substring(service: SmartSearchService):
    assert [c.id for c in service.quick_search("journ")] == ["trade-journal"]


def test_quick_search_matches_tags_in_catalog_order(service: SmartSearchService):
    ids = [c.id for c in service.quick_search("momentum", max_results=10)]
    assert ids == ["rsi-scanner", "momentum-board", "unscoped-card"]


def test_quick_search_respects_limit(service: SmartSearchService):
    assert len(service.quick_search("momentum", max_results=2)) == 2


def test_quick_search_short_query(service: SmartSearchService):
    assert service.quick_search("m") == []


# ── related / segment ────────────────────────────────────────────────


def test_related_tools():
    source = _card(
        "source",
        category="technical",
        segments=(UserSegment.SWING,),
        tags=("rsi", "momentum"),
        complexity=ComplexityLevel.BEGINNER,
    )
    close = _card(
        "close",
        category="technical",
        segments=(UserSegment.SWING,),
        tags=("rsi",),
        complexity=ComplexityLevel.BEGINNER,
    )
    same_category = _card("same-category", category="technical")
    far = _card("far", category="value", tags=("momentum",))
    service = SmartSearchService(InMemoryCardCatalog([source, far, same_category, close]))

    assert [c.id for c in service.get_related_tools("source")] == ["close", "same-category"]


def test_related_tools_unknown_id(service: SmartSearchService):
    assert service.get_related_tools("does-not-exist") == []


def test_related_tools_limit(service: SmartSearchService):
    assert len(service.get_related_tools("rsi-scanner", max_results=1)) <= 1


def test_recommended_for_segment_defaults_first(service: SmartSearchService):
    ids = [c.id for c in service.get_recommended_for_segment(UserSegment.SWING)]
    assert ids[0] == "trade-journal"
    assert set(ids) == {"trade-journal", "rsi-scanner", "momentum-board"}


# ── question-typed search ────────────────────────────────────────────


def test_search_by_question_type_keeps_bounds(service: SmartSearchService):
    results = service.search_by_question_type("find undervalued valuation screener")
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)
    assert all(0.1 < s <= 1.0 for s in scores)


def test_find_questions_boost_screeners():
    screener = _card("screen-a", category="screener", tags=("momentum",))
    other = _card("screen-b", category="technical", tags=("momentum",))
    service = SmartSearchService(InMemoryCardCatalog([other, screener]))

    plain = service.smart_search("find momentum")
    boosted = service.search_by_question_type("find momentum")

    assert [r.card.id for r in plain] == ["screen-b", "screen-a"]
    assert boosted[0].card.id == "screen-a"
