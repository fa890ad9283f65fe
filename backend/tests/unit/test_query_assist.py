"""Unit tests for autocomplete, glossary lookups and help copy."""

from app.application.services.query_assist import (
    MAX_AUTOCOMPLETE,
    explain_term,
    get_autocomplete_suggestions,
    get_error_suggestion,
)


def test_trigger_prefix_narrows_to_group():
    assert get_autocomplete_suggestions("show oi") == ["show OI buildup"]


def test_bare_trigger_returns_whole_group():
    suggestions = get_autocomplete_suggestions("calculate")
    assert len(suggestions) == 4
    assert all(s.startswith("calculate") for s in suggestions)


def test_short_input_returns_first_suggestions():
    suggestions = get_autocomplete_suggestions("sh")
    assert len(suggestions) == MAX_AUTOCOMPLETE
    assert suggestions[0] == "show RSI divergence"


def test_substring_search_across_groups():
    assert get_autocomplete_suggestions("win rate") == [
        "calculate break-even win rate",
        "what is my win rate",
        "how to improve win rate",
    ]


def test_no_suggestions_for_unknown_input():
    assert get_autocomplete_suggestions("xyzzy") == []


def test_explain_term_with_spaces_and_case():
    explanation = explain_term("Max Pain")
    assert explanation is not None
    assert explanation.definition


def test_explain_term_unknown():
    assert explain_term("flux capacitor") is None


def test_error_suggestions():
    no_results = get_error_suggestion("no_results")
    assert no_results is not None
    assert no_results.suggestions
    assert get_error_suggestion("bogus") is None
