"""Known-word vocabulary used as the dictionary for fuzzy typo correction."""

from .assistance import AUTOCOMPLETE_SUGGESTIONS
from .intents import INTENT_CLUSTERS
from .metrics import METRICS, QUALITY_ADJECTIVES
from .modifiers import COMPARISON_MODIFIERS, SENTIMENT_PHRASES, TIME_MODIFIERS
from .operators import OPERATORS
from .phrase_bank import PHRASE_BANK
from .synonyms import SYNONYM_MAP


def _words(phrase: str) -> list[str]:
    return [word for word in phrase.lower().split() if len(word) > 2]


def build_vocabulary() -> tuple[str, ...]:
    """Union every lexicon term into an insertion-ordered, de-duplicated tuple.

    Order matters: nearest-match lookups keep the first candidate at the
    minimum distance, so metric names outrank operator and phrase words.
    Metric names, operator aliases, time and sentiment phrases are added
    whole. Everything else contributes its words longer than two characters.
    """
    vocab: dict[str, None] = {}

    for metric in METRICS:
        for name in metric.names():
            vocab[name] = None

    for operator in OPERATORS.values():
        for alias in operator.aliases:
            vocab[alias.lower()] = None
            # multi-word aliases ("less than") keep their words known
            for word in _words(alias):
                vocab[word] = None

    for mapping in PHRASE_BANK.values():
        for phrase in mapping.phrases:
            for word in _words(phrase):
                vocab[word] = None

    for adjective in QUALITY_ADJECTIVES:
        vocab[adjective] = None

    for table in (TIME_MODIFIERS, SENTIMENT_PHRASES):
        for phrases in table.values():
            for phrase in phrases:
                vocab[phrase.lower()] = None

    # Routing words ("position", "show", "this") must never be "corrected" away.
    modifier_tables = (TIME_MODIFIERS, SENTIMENT_PHRASES, COMPARISON_MODIFIERS)
    routing_phrases = [
        *(phrase for table in modifier_tables for phrases in table.values() for phrase in phrases),
        *(term for cluster in INTENT_CLUSTERS.values() for term in cluster.terms),
        *SYNONYM_MAP.keys(),
        *(s for group in AUTOCOMPLETE_SUGGESTIONS for s in group.suggestions),
    ]
    for phrase in routing_phrases:
        for word in _words(phrase):
            vocab[word] = None

    return tuple(vocab)


VOCABULARY: tuple[str, ...] = build_vocabulary()
VOCABULARY_SET: frozenset[str] = frozenset(VOCABULARY)
