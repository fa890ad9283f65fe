"""Smart search: ranks catalog cards against a free-text query.

Every card that survives the hard filters (segment, complexity, category)
is scored by additive signals, then contextual multiplicative boosts:

    exact id           +1.0
    label substring    +0.8
    intent routing     +0.9 × recommended-tool score
    tags               +0.7 × tag score (capped at 1.0)
    synonyms           +0.6 × synonym score (capped at 1.0)
    description        +0.3

    segment match ×1.1, default card ×1.05,
    edge metric on performance queries ×1.15,
    risk sizing on position/risk queries ×1.15

Scores are clamped to 1.0 and cards at or below 0.1 are dropped.
"""

import logging
import re

from app.application.interfaces.card_catalog import CardCatalog
from app.application.services.intent_detector import detect_question_type, recommend_tools
from app.application.services.query_normalizer import normalize_query
from app.domain.entities import (
    CardDescriptor,
    MatchType,
    QuestionType,
    SearchOptions,
    SearchResult,
    UserSegment,
)
from app.domain.lexicon import SYNONYM_MAP

logger = logging.getLogger(__name__)

MIN_SCORE = 0.1
_INTENT_RECOMMENDATION_POOL = 20
_PERFORMANCE_QUERY = re.compile(r"win.?rate|expectancy|edge|performance", re.IGNORECASE)
_RISK_QUERY = re.compile(r"position|size|risk|lot|capital", re.IGNORECASE)


def _tag_score(tags: tuple[str, ...], query_terms: list[str], normalized: str) -> tuple[float, list[str]]:
    score = 0.0
    matched: list[str] = []
    for tag in tags:
        tag_lower = tag.lower()
        if tag_lower in normalized:
            score += 0.3
            matched.append(tag)
            continue
        # loose containment in either direction, counted once per tag
        if any(term in tag_lower or tag_lower in term for term in query_terms):
            score += 0.15
            matched.append(tag)
    return min(score, 1.0), matched


def _synonym_score(tags: tuple[str, ...], query: str) -> tuple[float, list[str]]:
    score = 0.0
    matched: list[str] = []
    lowered = query.lower()
    for synonym, canonical in SYNONYM_MAP.items():
        if synonym.lower() not in lowered:
            continue
        phrase = canonical.replace("_", " ")
        parts = canonical.split("_")
        for tag in tags:
            tag_lower = tag.lower()
            if phrase in tag_lower or any(part in tag_lower for part in parts):
                score += 0.2
                matched.append(f"{synonym} → {tag}")
                break
    return min(score, 1.0), matched


def _explain(card: CardDescriptor, match_type: MatchType, matched_terms: list[str]) -> str:
    if match_type is MatchType.EXACT:
        return f'Direct match for "{card.label}"'
    if match_type is MatchType.INTENT:
        return f"Recommended for: {', '.join(matched_terms[:2])}"
    if match_type is MatchType.SYNONYM:
        return f"Matched via synonyms: {', '.join(matched_terms[:2])}"
    if match_type is MatchType.TAG:
        return f"Matched tags: {', '.join(matched_terms[:3])}"
    return "Related to your search"


def _passes_filters(card: CardDescriptor, options: SearchOptions) -> bool:
    # cards that leave segments/complexity unset are never excluded by them
    if options.segment and card.segments and not card.has_segment(options.segment):
        return False
    if options.complexity and card.complexity and card.complexity != options.complexity:
        return False
    if options.category and card.category != options.category:
        return False
    return True


class SmartSearchService:
    """Vocabulary-aware ranking of catalog cards."""

    def __init__(self, catalog: CardCatalog):
        self._catalog = catalog

    def smart_search(self, query: str, options: SearchOptions | None = None) -> list[SearchResult]:
        """Rank every eligible card; best first, at most ``options.max_results``."""
        options = options or SearchOptions()
        normalized = normalize_query(query)
        if not normalized:
            return []
        query_terms = normalized.split(" ")
        recommendations = {
            rec.tool_id: rec for rec in recommend_tools(query, _INTENT_RECOMMENDATION_POOL)
        }
        wants_performance = bool(_PERFORMANCE_QUERY.search(query))
        wants_risk = bool(_RISK_QUERY.search(query))

        results: list[SearchResult] = []
        for card in self._catalog.all():
            if not _passes_filters(card, options):
                continue

            score = 0.0
            match_type = MatchType.FUZZY
            matched_terms: list[str] = []

            if card.id.lower() == re.sub(r"\s+", "-", normalized):
                score += 1.0
                match_type = MatchType.EXACT
                matched_terms.append(card.id)

            if normalized in card.label.lower():
                score += 0.8
                if match_type is MatchType.FUZZY:
                    match_type = MatchType.EXACT
                matched_terms.append(card.label)

            recommendation = recommendations.get(card.id)
            if recommendation:
                score += recommendation.score * 0.9
                if match_type is MatchType.FUZZY:
                    match_type = MatchType.INTENT
                matched_terms.extend(reason.split("(")[0].strip() for reason in recommendation.reasons)

            tag_score, matched_tags = _tag_score(card.tags, query_terms, normalized)
            if tag_score > 0:
                score += tag_score * 0.7
                if match_type is MatchType.FUZZY:
                    match_type = MatchType.TAG
                matched_terms.extend(matched_tags)

            synonym_score, matched_synonyms = _synonym_score(card.tags, query)
            if synonym_score > 0:
                score += synonym_score * 0.6
                if match_type is MatchType.FUZZY:
                    match_type = MatchType.SYNONYM
                matched_terms.extend(matched_synonyms)

            if normalized in card.description.lower():
                score += 0.3
                matched_terms.append("description")

            if options.segment and card.has_segment(options.segment):
                score *= 1.1
            if card.default:
                score *= 1.05
            if card.has_edge_metric and wants_performance:
                score *= 1.15
            if card.has_risk_sizing and wants_risk:
                score *= 1.15

            if score <= MIN_SCORE:
                continue

            results.append(
                SearchResult(
                    card=card,
                    score=min(score, 1.0),
                    match_type=match_type,
                    matched_terms=list(dict.fromkeys(matched_terms)),
                    explanation=_explain(card, match_type, matched_terms) if options.include_explanation else "",
                )
            )

        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug("smart_search %r → %d results", query, len(results))
        return results[: options.max_results]

    def quick_search(self, query: str, max_results: int = 5) -> list[CardDescriptor]:
        """Plain substring match on label, id and tags, in catalog order."""
        if len(query) < 2:
            return []
        needle = query.lower()
        matches = [
            card
            for card in self._catalog.all()
            if needle in card.label.lower()
            or needle in card.id
            or any(needle in tag.lower() for tag in card.tags)
        ]
        return matches[:max_results]

    def get_recommended_for_segment(self, segment: UserSegment) -> list[CardDescriptor]:
        """Cards aimed at a segment: defaults first, then edge-metric cards."""
        cards = [card for card in self._catalog.all() if card.has_segment(segment)]
        return sorted(cards, key=lambda card: (not card.default, not card.has_edge_metric))

    def get_related_tools(self, card_id: str, max_results: int = 4) -> list[CardDescriptor]:
        """Cards most similar to ``card_id``; empty when the id is unknown."""
        source = self._catalog.get(card_id)
        if source is None:
            return []

        source_tags = [tag.lower() for tag in source.tags]
        scored: list[tuple[CardDescriptor, float]] = []
        for card in self._catalog.all():
            if card.id == card_id:
                continue

            score = 0.0
            if card.category == source.category:
                score += 0.3
            if source.segments and card.segments:
                score += 0.15 * sum(1 for s in source.segments if s in card.segments)
            card_tags = {tag.lower() for tag in card.tags}
            score += 0.1 * sum(1 for tag in source_tags if tag in card_tags)
            if card.complexity == source.complexity:
                score += 0.1

            if score > 0.2:
                scored.append((card, score))

        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [card for card, _ in scored[:max_results]]

    def search_by_question_type(self, query: str) -> list[SearchResult]:
        """Smart search re-ranked by the kind of question asked."""
        question_type = detect_question_type(query)
        results = self.smart_search(query)

        for result in results:
            card = result.card
            boost = 1.0
            if question_type is QuestionType.HOW_MUCH:
                if card.has_risk_sizing or "calculator" in card.id:
                    boost = 1.2
            elif question_type is QuestionType.SHOW_ME:
                if card.category == "technical":
                    boost = 1.15
            elif question_type is QuestionType.FIND:
                if card.category == "screener":
                    boost = 1.2
            elif question_type is QuestionType.COMPARE:
                if "peer" in card.id or "compare" in card.id:
                    boost = 1.3
            elif question_type is QuestionType.WHY:
                if card.has_behavioral_tip or "journal" in card.id:
                    boost = 1.2
            # clamped so boosted scores stay within (0.1, 1]
            result.score = min(result.score * boost, 1.0)

        results.sort(key=lambda r: r.score, reverse=True)
        return results
