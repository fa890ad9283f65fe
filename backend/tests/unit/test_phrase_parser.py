"""Unit tests for the phrase-bank query parser."""

import pytest

from app.application.services.phrase_parser import get_phrase_bank_stats, parse_query
from app.domain.lexicon import COMMON_TYPOS, PHRASE_BANK, VOCABULARY


def _filters(query: str) -> list[tuple]:
    return [(f.metric, f.operator, f.value) for f in parse_query(query).screener_filters]


# ── Corrections ──────────────────────────────────────────────────────


def test_typo_table_and_filter_extraction():
    parsed = parse_query("sotcks with pe ration less than 15")
    assert "stocks" in parsed.corrected_query
    assert "pe ratio" in parsed.corrected_query
    assert _filters("sotcks with pe ration less than 15") == [("pe_ratio", "<", 15.0)]


def test_typo_corrections_have_full_confidence():
    parsed = parse_query("divdend yeild")
    assert parsed.corrected_query == "dividend yield"
    assert [(c.original, c.corrected, c.confidence) for c in parsed.corrections] == [
        ("divdend", "dividend", 1.0),
        ("yeild", "yield", 1.0),
    ]


def test_fuzzy_correction_confidence():
    parsed = parse_query("momentm stocks")
    assert parsed.corrected_query == "momentum stocks"
    (correction,) = parsed.corrections
    assert correction.original == "momentm"
    assert correction.corrected == "momentum"
    assert correction.confidence == pytest.approx(1 - 1 / 8)


def test_short_and_known_words_are_not_corrected():
    parsed = parse_query("nifty vs sensex this quarter")
    assert parsed.corrections == []
    assert parsed.corrected_query == "nifty vs sensex this quarter"


def test_original_query_is_kept_verbatim():
    parsed = parse_query("Bullish on RELIANCE")
    assert parsed.original_query == "Bullish on RELIANCE"
    assert parsed.corrected_query == "bullish on reliance"


# ── Filters ──────────────────────────────────────────────────────────


def test_symbolic_filters():
    assert _filters("stocks with PE < 15 and ROE > 20") == [
        ("pe_ratio", "<", 15.0),
        ("roe", ">", 20.0),
    ]


def test_quality_filter():
    assert _filters("high dividend yield stocks") == [("dividend_yield", ">=", "high")]


def test_weak_adjective_survives_correction():
    parsed = parse_query("weak roe stocks")
    assert parsed.corrected_query == "weak roe stocks"
    assert _filters("weak roe stocks") == [("roe", "<=", "low")]


def test_decimal_value_is_not_corrected():
    assert _filters("roe >= 15.5") == [("roe", ">=", 15.5)]


def test_years_are_not_corrected():
    parsed = parse_query("pe < 15 in 2023")
    assert parsed.corrections == []
    assert parsed.corrected_query == "pe < 15 in 2023"
    assert _filters("pe < 15 in 2023") == [("pe_ratio", "<", 15.0)]


# ── Modifiers, sentiment, symbols ────────────────────────────────────


def test_sentiment_and_symbols():
    parsed = parse_query("bullish on RELIANCE")
    assert parsed.sentiment == "bullish"
    assert "RELIANCE" in parsed.symbols


def test_symbols_exclude_finance_acronyms():
    parsed = parse_query("compare TCS and INFY PE")
    assert parsed.symbols == ["TCS", "INFY"]


def test_lowercase_words_are_not_symbols():
    assert parse_query("bullish on reliance").symbols == []


def test_time_and_comparison_modifiers():
    parsed = parse_query("nifty vs sensex this quarter")
    assert parsed.timeframe == "this_quarter"
    assert parsed.sentiment is None
    kinds = [(m.type, m.value) for m in parsed.context_modifiers]
    assert ("time", "this_quarter") in kinds
    assert ("comparison", "vs_sensex") in kinds


def test_bearish_sentiment_with_weekly_timeframe():
    parsed = parse_query("bearish on banknifty this week")
    assert parsed.sentiment == "bearish"
    assert parsed.timeframe == "this_week"


# ── Phrase bank ──────────────────────────────────────────────────────


def test_matches_are_sorted_and_capped():
    parsed = parse_query("find undervalued stocks with high roe this year")
    scores = [m.score for m in parsed.matches]
    assert scores == sorted(scores, reverse=True)
    assert len(parsed.matches) <= 10


def test_suggested_cards_are_unique_and_capped():
    parsed = parse_query("find undervalued stocks with high roe and low pe ratio")
    assert len(parsed.suggested_cards) <= 5
    assert len(set(parsed.suggested_cards)) == len(parsed.suggested_cards)


def test_primary_intent_follows_top_match():
    parsed = parse_query("high dividend yield stocks")
    assert parsed.matches
    assert parsed.primary_intent == parsed.matches[0].mapping.intent


def test_unmatched_query_defaults_to_analyze():
    parsed = parse_query("xyzzy plugh")
    assert parsed.matches == []
    assert parsed.suggested_cards == []
    assert parsed.primary_intent == "analyze"


def test_empty_query_is_handled():
    parsed = parse_query("")
    assert parsed.corrected_query == ""
    assert parsed.screener_filters == []


# ── Stats ────────────────────────────────────────────────────────────


def test_phrase_bank_stats():
    stats = get_phrase_bank_stats()
    assert stats["categories"] == len(PHRASE_BANK)
    assert stats["typo_corrections"] == len(COMMON_TYPOS)
    assert stats["vocabulary_size"] == len(VOCABULARY)
    assert stats["operators"] == 10
    assert stats["phrases"] >= stats["categories"]
