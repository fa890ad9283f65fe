"""Domain entity for analytics cards: the externally owned catalog the engine ranks."""

from dataclasses import dataclass, field
from enum import Enum


class UserSegment(str, Enum):
    """Trader personas a card is aimed at."""

    SCALPER = "scalper"
    INTRADAY = "intraday"
    SWING = "swing"
    POSITIONAL = "positional"
    INVESTOR = "investor"


class ComplexityLevel(str, Enum):
    """Skill level required to read a card."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class CardDescriptor:
    """A single analytics card as described by the catalog.

    The query engine only reads these records; optional fields stay ``None``
    (segments, complexity) or ``False`` (flags) when the catalog omits them.
    """

    id: str
    label: str
    category: str
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    kind: str = "card"
    segments: tuple[UserSegment, ...] | None = None
    complexity: ComplexityLevel | None = None
    default: bool = False
    has_edge_metric: bool = False
    has_risk_sizing: bool = False
    has_behavioral_tip: bool = False

    def has_segment(self, segment: UserSegment | str) -> bool:
        """True when the card explicitly targets the given segment.

        Unknown segment names are simply not targeted.
        """
        if not self.segments:
            return False
        return segment in {s.value for s in self.segments}
