"""Phrase-bank query parser: the full parse of a trader query.

Pipeline (each stage reads the corrected text produced by the previous one):

1. Known typos are substring-replaced, then any unknown word longer than
   three characters is fuzzy-corrected against the vocabulary.
2. Sentiment, timeframe and benchmark-comparison modifiers are detected.
3. Screener filters are extracted.
4. Phrase-bank categories are scored and turned into suggested cards.
5. Ticker-like symbols are pulled from the raw query.

This path deliberately does not call :func:`normalize_query`; synonym
rewriting is a separate concern used by intent detection and search.
"""

import re

from app.application.services.fuzzy_matcher import find_closest_match, levenshtein_distance
from app.application.services.screener_filter_extractor import extract_screener_filters
from app.domain.entities import ContextModifier, ParsedQuery, PhraseMatch, QueryCorrection
from app.domain.lexicon import (
    COMMON_TYPOS,
    COMPARISON_MODIFIERS,
    METRICS,
    OPERATORS,
    PHRASE_BANK,
    SENTIMENT_PHRASES,
    TIME_MODIFIERS,
    VOCABULARY,
    VOCABULARY_SET,
)

MAX_MATCHES = 10
MAX_SUGGESTED_CARDS = 5
_CARD_SOURCE_MATCHES = 5

_SYMBOL = re.compile(r"\b([A-Z]{2,10})\b")
_SYMBOL_EXCLUSIONS = frozenset({
    "PE", "PB", "PS", "EV", "ROE", "ROA", "FCF", "EPS", "YOY", "QOQ", "MOM",
    "SIP", "NAV", "AUM", "THE", "AND", "FOR", "NOT", "WITH",
})
_DEFAULT_INTENT = "analyze"


def _apply_typos(text: str, corrections: list[QueryCorrection]) -> str:
    for typo, correction in COMMON_TYPOS.items():
        if typo in text:
            text = text.replace(typo, correction)
            corrections.append(QueryCorrection(original=typo, corrected=correction, confidence=1.0))
    return text


def _fuzzy_correct(text: str, corrections: list[QueryCorrection]) -> str:
    corrected_words: list[str] = []
    for word in text.split():
        # numbers ("15.5", "2023") are values, never typos
        if len(word) > 3 and not any(ch.isdigit() for ch in word) and word not in VOCABULARY_SET:
            match = find_closest_match(word, VOCABULARY, 2)
            if match and match != word:
                distance = levenshtein_distance(word, match)
                corrections.append(
                    QueryCorrection(
                        original=word,
                        corrected=match,
                        confidence=1 - distance / max(len(word), len(match)),
                    )
                )
                corrected_words.append(match)
                continue
        corrected_words.append(word)
    return " ".join(corrected_words)


def _detect_sentiment(text: str) -> str | None:
    for sentiment, phrases in SENTIMENT_PHRASES.items():
        if any(phrase.lower() in text for phrase in phrases):
            return sentiment
    return None


def _first_hit(text: str, phrases: tuple[str, ...]) -> str | None:
    for phrase in phrases:
        if phrase.lower() in text:
            return phrase
    return None


def _detect_modifiers(text: str) -> tuple[str | None, list[ContextModifier]]:
    timeframe: str | None = None
    modifiers: list[ContextModifier] = []

    for period, phrases in TIME_MODIFIERS.items():
        hit = _first_hit(text, phrases)
        if hit:
            timeframe = period
            modifiers.append(ContextModifier(type="time", value=period, raw=hit))
            break

    for comparison, phrases in COMPARISON_MODIFIERS.items():
        hit = _first_hit(text, phrases)
        if hit:
            modifiers.append(ContextModifier(type="comparison", value=comparison, raw=hit))

    return timeframe, modifiers


def _score_phrase_bank(text: str) -> list[PhraseMatch]:
    matches: list[PhraseMatch] = []
    for category, mapping in PHRASE_BANK.items():
        score = 0
        hits = 0
        for phrase in mapping.phrases:
            phrase_lower = phrase.lower()
            if phrase_lower in text:
                # longer phrases are more specific, so they weigh more
                score += mapping.priority * len(phrase_lower.split(" "))
                hits += 1
        if score > 0:
            matches.append(PhraseMatch(category=category, mapping=mapping, score=score * (1 + hits * 0.1)))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


def _suggest_cards(matches: list[PhraseMatch]) -> list[str]:
    cards: list[str] = []
    for match in matches[:_CARD_SOURCE_MATCHES]:
        for card in match.mapping.cards:
            if card not in cards:
                cards.append(card)
    return cards[:MAX_SUGGESTED_CARDS]


def _extract_symbols(query: str) -> list[str]:
    return [
        symbol
        for symbol in _SYMBOL.findall(query)
        if symbol not in _SYMBOL_EXCLUSIONS
    ]


def parse_query(query: str) -> ParsedQuery:
    """Parse a free-text trader query into corrections, filters, intents and cards.

    Total over any string input: nothing here raises on unparsable text.
    """
    corrections: list[QueryCorrection] = []
    corrected = _apply_typos(query.lower(), corrections)
    corrected = _fuzzy_correct(corrected, corrections)

    sentiment = _detect_sentiment(corrected)
    timeframe, modifiers = _detect_modifiers(corrected)
    screener_filters = extract_screener_filters(corrected)
    matches = _score_phrase_bank(corrected)

    return ParsedQuery(
        original_query=query,
        corrected_query=corrected,
        corrections=corrections,
        matches=matches[:MAX_MATCHES],
        suggested_cards=_suggest_cards(matches),
        primary_intent=matches[0].mapping.intent if matches else _DEFAULT_INTENT,
        screener_filters=screener_filters,
        context_modifiers=modifiers,
        sentiment=sentiment,
        symbols=_extract_symbols(query),
        timeframe=timeframe,
    )


def get_phrase_bank_stats() -> dict[str, int]:
    """Sizes of the lexicon tables, for diagnostics."""
    cards: set[str] = set()
    intents: set[str] = set()
    phrases = 0
    words = 0
    for mapping in PHRASE_BANK.values():
        phrases += len(mapping.phrases)
        words += sum(len(phrase.split()) for phrase in mapping.phrases)
        cards.update(mapping.cards)
        intents.add(mapping.intent)

    return {
        "categories": len(PHRASE_BANK),
        "phrases": phrases,
        "words": words,
        "metrics": len(METRICS),
        "metric_aliases": sum(len(m.aliases) for m in METRICS),
        "operators": len(OPERATORS),
        "operator_aliases": sum(len(op.aliases) for op in OPERATORS.values()),
        "cards_linked": len(cards),
        "intents": len(intents),
        "typo_corrections": len(COMMON_TYPOS),
        "vocabulary_size": len(VOCABULARY),
        "time_modifiers": sum(len(p) for p in TIME_MODIFIERS.values()),
        "comparison_modifiers": sum(len(p) for p in COMPARISON_MODIFIERS.values()),
        "sentiment_phrases": sum(len(p) for p in SENTIMENT_PHRASES.values()),
    }
