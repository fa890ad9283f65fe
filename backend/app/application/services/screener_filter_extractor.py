"""Screener filter extraction from free text.

Two independent passes run over the query text:

* **metric-operator-value**: ``"pe < 15"``, ``"roe greater than 20"``. The
  metric must resolve exactly against a metric id, display name or alias.
* **quality adjective**: ``"high dividend yield"``. The metric is resolved
  by substring containment, and the value is the placeholder ``"high"`` or
  ``"low"`` for a downstream percentile lookup.

Unresolvable fragments are skipped, never raised.
"""

import logging
import re

from app.domain.entities import MetricDefinition, ScreenerFilter
from app.domain.lexicon import (
    HIGH_QUALITY_ADJECTIVES,
    METRICS_BY_ID,
    OPERATORS,
    QUALITY_ADJECTIVES,
    find_metric_containing,
    find_metric_exact,
    resolve_operator,
)

logger = logging.getLogger(__name__)


def _operator_alternation() -> str:
    aliases = {alias.lower() for op in OPERATORS.values() for alias in op.aliases}
    parts = []
    # longest first so "less than or equal" wins over "less than"
    for alias in sorted(aliases, key=len, reverse=True):
        escaped = re.escape(alias)
        if alias[0].isalnum():
            escaped = rf"\b{escaped}"
        if alias[-1].isalnum():
            escaped = rf"{escaped}\b"
        parts.append(escaped)
    return "|".join(parts)


_METRIC_OPERATOR_VALUE = re.compile(
    rf"([a-z/\s]+?)\s*({_operator_alternation()})\s*(\d+(?:\.\d+)?)",
    re.IGNORECASE,
)

_QUALITY_ADJECTIVE = re.compile(r"\b(" + "|".join(QUALITY_ADJECTIVES) + r")\b", re.IGNORECASE)
_METRIC_WORD = re.compile(r"[a-z/%&-]+")
# "roe in 2023" names a period, not a set of values
_YEAR = re.compile(r"(?:19|20)\d{2}")

# Words that end the metric phrase following a quality adjective.
_STOP_WORDS = frozenset({
    "stock", "stocks", "company", "companies", "share", "shares", "scrip", "scrips",
    "with", "and", "or", "but", "in", "on", "for", "of", "the", "a", "an", "to", "by",
    "high", "low", "good", "strong", "weak", "bad", "than", "vs", "versus",
})


def _resolve_trailing_metric(text: str) -> MetricDefinition | None:
    """Longest trailing word run of ``text`` that names a metric exactly."""
    words = text.split()
    for start in range(len(words)):
        metric = find_metric_exact(" ".join(words[start:]))
        if metric:
            return metric
    return None


def _metric_phrase(text: str) -> list[str]:
    words: list[str] = []
    for token in text.split():
        token = token.lower()
        if token in _STOP_WORDS or not _METRIC_WORD.fullmatch(token):
            break
        words.append(token)
    return words


def _resolve_leading_metric(words: list[str]) -> tuple[MetricDefinition | None, str]:
    """Longest leading word run contained in some metric name."""
    for end in range(len(words), 0, -1):
        candidate = " ".join(words[:end])
        if len(candidate) < 2:
            continue
        metric = find_metric_containing(candidate)
        if metric:
            return metric, candidate
    return None, ""


def extract_metric_operator_filters(text: str) -> list[ScreenerFilter]:
    """Every ``<metric> <operator> <number>`` triple whose metric resolves."""
    filters: list[ScreenerFilter] = []
    for match in _METRIC_OPERATOR_VALUE.finditer(text):
        metric_text, operator_text, value_text = match.groups()
        metric = _resolve_trailing_metric(metric_text)
        if metric is None:
            logger.debug("Skipping unresolved metric text %r", metric_text.strip())
            continue

        operator = resolve_operator(operator_text)
        if operator is None:
            # keep the raw operator so callers can see what was asked for
            operator = operator_text.strip().lower()
            logger.debug("Unrecognized operator %r kept raw", operator)
        elif operator == "in" and _YEAR.fullmatch(value_text):
            logger.debug("Skipping year reference %r", match.group(0).strip())
            continue

        filters.append(
            ScreenerFilter(
                metric=metric.id,
                operator=operator,
                value=float(value_text),
                raw=match.group(0).strip(),
            )
        )
    return filters


def extract_quality_filters(text: str) -> list[ScreenerFilter]:
    """Every ``high|low|good|strong|weak <metric>`` phrase whose metric resolves."""
    filters: list[ScreenerFilter] = []
    for match in _QUALITY_ADJECTIVE.finditer(text):
        quality = match.group(1).lower()
        metric, candidate = _resolve_leading_metric(_metric_phrase(text[match.end():]))
        if metric is None:
            continue

        higher_is_better = metric.higher_is_better is not False
        wants_high = quality in HIGH_QUALITY_ADJECTIVES
        filters.append(
            ScreenerFilter(
                metric=metric.id,
                operator=">=" if wants_high == higher_is_better else "<=",
                value="high" if wants_high else "low",
                raw=f"{match.group(1)} {candidate}",
            )
        )
    return filters


def extract_screener_filters(text: str) -> list[ScreenerFilter]:
    """Run both passes; metric-operator-value filters come first."""
    return extract_metric_operator_filters(text) + extract_quality_filters(text)


def _format_value(value: float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_screener_query(filters: list[ScreenerFilter]) -> str:
    """Render filters as ``"P/E Ratio < 15 AND ROE > 20%"``; unknown metrics are skipped."""
    conditions: list[str] = []
    for screener_filter in filters:
        metric = METRICS_BY_ID.get(screener_filter.metric)
        if metric is None:
            continue
        condition = f"{metric.display_name} {screener_filter.operator} {_format_value(screener_filter.value)}"
        if metric.unit:
            condition += metric.unit
        conditions.append(condition)
    return " AND ".join(conditions)
