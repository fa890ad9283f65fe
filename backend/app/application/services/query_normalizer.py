"""Synonym-based query normalization."""

import re

from app.domain.lexicon import SYNONYM_MAP

_WHITESPACE = re.compile(r"\s+")

# One compiled, word-bounded pattern per synonym, in table order.
_SYNONYM_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b{re.escape(synonym)}\b", re.IGNORECASE), canonical)
    for synonym, canonical in SYNONYM_MAP.items()
)


def normalize_query(query: str) -> str:
    """Lowercase, collapse whitespace, then rewrite synonyms to canonical terms.

    The synonym table is walked exactly once from top to bottom. A term
    produced by an earlier rewrite can still be rewritten by a later entry,
    but the table is never re-scanned to a fixpoint.
    """
    normalized = _WHITESPACE.sub(" ", query.lower().strip())

    for pattern, canonical in _SYNONYM_PATTERNS:
        normalized = pattern.sub(canonical, normalized)

    return normalized
