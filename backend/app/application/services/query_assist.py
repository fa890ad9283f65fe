"""Command-bar helpers: autocomplete, glossary lookups and empty-result copy."""

import re

from app.domain.entities import ErrorSuggestion, TermExplanation
from app.domain.lexicon import AUTOCOMPLETE_SUGGESTIONS, ERROR_SUGGESTIONS, TERM_EXPLANATIONS

MAX_AUTOCOMPLETE = 5


def get_autocomplete_suggestions(text: str) -> list[str]:
    """Suggestions for a partially typed query.

    Input starting with a known trigger ("show", "calculate", ...) gets that
    trigger's suggestions. Very short input gets the first few suggestions
    overall; anything else is a substring search across all of them.
    """
    lowered = text.lower().strip()

    for group in AUTOCOMPLETE_SUGGESTIONS:
        if lowered.startswith(group.trigger):
            return [s for s in group.suggestions if lowered in s.lower()]

    everything = [s for group in AUTOCOMPLETE_SUGGESTIONS for s in group.suggestions]
    if len(lowered) < 3:
        return everything[:MAX_AUTOCOMPLETE]

    return [s for s in everything if lowered in s.lower()][:MAX_AUTOCOMPLETE]


def explain_term(term: str) -> TermExplanation | None:
    """Glossary entry for a term; spaces are treated as underscores ("max pain")."""
    key = re.sub(r"\s+", "_", term.strip().lower())
    return TERM_EXPLANATIONS.get(key)


def get_error_suggestion(kind: str) -> ErrorSuggestion | None:
    """Consumer-facing help copy for ``no_results``, ``ambiguous_query`` or ``invalid_symbol``."""
    return ERROR_SUGGESTIONS.get(kind)
