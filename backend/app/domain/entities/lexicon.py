"""Domain entities for the static lexicon tables: operators, metrics, phrases and intents."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OperatorAlias:
    """A canonical comparison operator and every phrasing that means it."""

    symbol: str
    aliases: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class MetricDefinition:
    """One screenable financial metric.

    ``id`` is the canonical key used downstream; ``aliases`` drive matching.
    ``higher_is_better`` is ``None`` for metrics without a natural direction.
    """

    id: str
    display_name: str
    aliases: tuple[str, ...]
    category: str
    default_operator: str
    unit: str | None = None
    higher_is_better: bool | None = None

    def names(self) -> tuple[str, ...]:
        """All lowercase names the metric answers to (display name first)."""
        return (self.display_name.lower(), *(a.lower() for a in self.aliases))


@dataclass(frozen=True)
class PhraseMapping:
    """A phrase-bank category: phrases that route to a set of cards.

    ``priority`` is used multiplicatively when scoring phrase hits.
    """

    phrases: tuple[str, ...]
    cards: tuple[str, ...]
    intent: str
    priority: int


@dataclass(frozen=True)
class IntentCluster:
    """A bag of terms that signals one user intent.

    Priority 1 is the strongest cluster; it adds the largest confidence boost.
    """

    terms: tuple[str, ...]
    tools: tuple[str, ...]
    priority: int


@dataclass(frozen=True)
class QueryPattern:
    """A structural regex that identifies an intent with high confidence."""

    pattern: re.Pattern[str]
    intent: str
    tools: tuple[str, ...]


@dataclass(frozen=True)
class WorkflowChain:
    """A canonical ordered sequence of tools plus the phrases that select it."""

    name: str
    description: str
    sequence: tuple[str, ...]
    triggers: tuple[str, ...]


@dataclass(frozen=True)
class NextToolRule:
    """'After using X, suggest these tools because ...'."""

    next: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class ToolGroupSuggestion:
    """A group of tools recommended together with a shared reason."""

    tools: tuple[str, ...]
    reason: str
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MarketConditionPlaybook:
    """Tools, strategies and anti-patterns for one market condition."""

    tools: tuple[str, ...]
    strategies: tuple[str, ...]
    avoid: tuple[str, ...]


@dataclass(frozen=True)
class LearningStage:
    """One stage of a persona learning path."""

    name: str
    tools: tuple[str, ...]
    goal: str


@dataclass(frozen=True)
class LearningPath:
    """An ordered curriculum of tools for one trader persona."""

    name: str
    description: str
    stages: tuple[LearningStage, ...]


@dataclass(frozen=True)
class TermExplanation:
    """Glossary entry for a trading term."""

    definition: str
    related: tuple[str, ...]
    example: str | None = None


@dataclass(frozen=True)
class ErrorSuggestion:
    """Consumer-facing copy for an empty or ambiguous result."""

    message: str
    suggestions: tuple[str, ...]


@dataclass(frozen=True)
class AutocompleteGroup:
    """Command-bar suggestions offered when the input starts with ``trigger``."""

    trigger: str
    suggestions: tuple[str, ...]
    category: str
