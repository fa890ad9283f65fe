"""Unit tests for screener filter extraction."""

import pytest

from app.application.services.screener_filter_extractor import (
    build_screener_query,
    extract_metric_operator_filters,
    extract_quality_filters,
    extract_screener_filters,
)
from app.domain.entities import ScreenerFilter
from app.domain.lexicon import OPERATORS

ALIAS_CASES = [(symbol, alias) for symbol, op in OPERATORS.items() for alias in op.aliases]


def _triples(filters: list[ScreenerFilter]) -> list[tuple[str, str, float | str]]:
    return [(f.metric, f.operator, f.value) for f in filters]


# ── Metric / operator / value ────────────────────────────────────────


def test_two_symbolic_filters():
    filters = extract_screener_filters("stocks with pe < 15 and roe > 20")
    assert _triples(filters) == [("pe_ratio", "<", 15.0), ("roe", ">", 20.0)]


@pytest.mark.parametrize("symbol, alias", ALIAS_CASES)
def test_every_operator_alias_resolves(symbol: str, alias: str):
    filters = extract_metric_operator_filters(f"roe {alias} 10")
    assert _triples(filters) == [("roe", symbol, 10.0)]


def test_longest_operator_alias_wins():
    filters = extract_metric_operator_filters("roe greater than or equal 12")
    assert _triples(filters) == [("roe", ">=", 12.0)]


def test_multi_word_metric_alias():
    filters = extract_metric_operator_filters("return on equity above 18.5")
    assert _triples(filters) == [("roe", ">", 18.5)]


def test_metric_resolved_from_trailing_words():
    filters = extract_metric_operator_filters("companies having debt to equity below 1")
    assert _triples(filters) == [("debt_to_equity", "<", 1.0)]


def test_unknown_metric_is_skipped():
    assert extract_metric_operator_filters("banana above 10") == []


def test_raw_text_is_preserved():
    (f,) = extract_metric_operator_filters("pe < 15")
    assert f.raw == "pe < 15"


def test_year_after_set_operator_is_a_period_not_a_filter():
    assert extract_metric_operator_filters("companies with roe in 2023") == []
    assert _triples(extract_metric_operator_filters("roe in 15")) == [("roe", "in", 15.0)]
    assert _triples(extract_metric_operator_filters("market cap > 2023")) == [("market_cap", ">", 2023.0)]


# ── Quality adjectives ───────────────────────────────────────────────


def test_high_dividend_yield():
    filters = extract_quality_filters("high dividend yield stocks")
    assert _triples(filters) == [("dividend_yield", ">=", "high")]
    assert filters[0].raw == "high dividend yield"


def test_low_is_good_when_lower_is_better():
    filters = extract_quality_filters("low debt to equity companies")
    assert _triples(filters) == [("debt_to_equity", ">=", "low")]


def test_strong_maps_to_high():
    filters = extract_quality_filters("strong roe")
    assert _triples(filters) == [("roe", ">=", "high")]


def test_low_on_higher_is_better_metric():
    filters = extract_quality_filters("low roe")
    assert _triples(filters) == [("roe", "<=", "low")]


def test_adjective_without_metric_is_skipped():
    assert extract_quality_filters("high conviction ideas") == []


def test_operator_filters_come_before_quality_filters():
    filters = extract_screener_filters("high dividend yield and pe < 20")
    assert _triples(filters) == [("pe_ratio", "<", 20.0), ("dividend_yield", ">=", "high")]


# ── Rendering ────────────────────────────────────────────────────────


def test_build_screener_query_appends_units():
    filters = extract_screener_filters("stocks with pe < 15 and roe > 20")
    assert build_screener_query(filters) == "P/E Ratio < 15 AND ROE > 20%"


def test_build_screener_query_skips_unknown_metrics():
    filters = [
        ScreenerFilter(metric="unknown", operator=">", value=1.0, raw="unknown > 1"),
        ScreenerFilter(metric="roe", operator=">", value=20.0, raw="roe > 20"),
    ]
    assert build_screener_query(filters) == "ROE > 20%"


def test_build_screener_query_empty():
    assert build_screener_query([]) == ""
