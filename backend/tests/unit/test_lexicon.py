"""Unit tests for the static lexicon tables."""

from app.domain.lexicon import (
    COMMON_TYPOS,
    INDIAN_MARKET_TERMS,
    INTENT_CLUSTERS,
    METRICS,
    METRICS_BY_ID,
    OPERATORS,
    PHRASE_BANK,
    SYNONYM_MAP,
    VOCABULARY,
    VOCABULARY_SET,
    build_vocabulary,
    find_metric_containing,
    find_metric_exact,
    resolve_operator,
)


def test_metric_ids_are_unique():
    assert len(METRICS_BY_ID) == len(METRICS)


def test_operator_aliases_are_unambiguous():
    aliases = [alias for op in OPERATORS.values() for alias in op.aliases]
    assert len(aliases) == len(set(aliases))


def test_resolve_operator():
    assert resolve_operator("  Less Than ") == "<"
    assert resolve_operator("at least") == ">="
    assert resolve_operator("approximately") is None


def test_find_metric_exact_by_id_name_and_alias():
    assert find_metric_exact("pe_ratio").id == "pe_ratio"
    assert find_metric_exact("P/E Ratio").id == "pe_ratio"
    assert find_metric_exact("return on equity").id == "roe"
    assert find_metric_exact("") is None
    assert find_metric_exact("banana") is None


def test_find_metric_containing_first_in_table_order():
    assert find_metric_containing("dividend yield").id == "dividend_yield"
    assert find_metric_containing("debt").id == "debt_to_equity"


def test_indian_market_terms_are_merged_into_phrase_bank():
    for category in ("indices", "fno_specific", "regulatory", "indian_sectors"):
        assert category in INDIAN_MARKET_TERMS
        assert PHRASE_BANK[category] is INDIAN_MARKET_TERMS[category]


def test_intent_cluster_priorities():
    assert all(cluster.priority in (1, 2, 3) for cluster in INTENT_CLUSTERS.values())


def test_typo_table_has_no_identity_entries():
    assert all(typo != fix for typo, fix in COMMON_TYPOS.items())


def test_synonym_targets_use_canonical_form():
    multi_word_targets = [c for c in SYNONYM_MAP.values() if " " in c]
    assert multi_word_targets == []


def test_vocabulary_is_deduplicated_and_stable():
    assert len(VOCABULARY) == len(VOCABULARY_SET)
    assert build_vocabulary() == VOCABULARY


def test_vocabulary_keeps_metric_names_first():
    assert VOCABULARY[0] == METRICS[0].display_name.lower()


def test_vocabulary_knows_routing_words():
    for word in ("less", "than", "position", "show", "this", "quarter", "stocks", "dividend", "weak", "strong"):
        assert word in VOCABULARY_SET
