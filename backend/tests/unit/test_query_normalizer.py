"""Unit tests for synonym normalisation."""

from app.application.services.query_normalizer import normalize_query


def test_lowercases_trims_and_collapses_whitespace():
    assert normalize_query("  What   is the  LTP ") == "what is the last_price"


def test_rewrites_multi_word_synonyms():
    assert normalize_query("current market price") == "last_price"


def test_synonyms_only_match_whole_words():
    # "sl" must not fire inside "slow"
    assert normalize_query("slow market") == "slow market"


def test_single_pass_does_not_revisit_earlier_entries():
    # "sl" precedes "trailing sl" in the table, so the longer synonym never fires
    assert normalize_query("trailing sl") == "trailing stop_loss"


def test_canonical_only_query_is_stable():
    query = "stop_loss and target for position_sizing"
    once = normalize_query(query)
    assert once == query
    assert normalize_query(once) == once


def test_empty_query():
    assert normalize_query("   ") == ""
