"""Domain entities for contextual 'what next' suggestions and workflows."""

from dataclasses import dataclass, field

from .card import CardDescriptor, UserSegment
from .lexicon import WorkflowChain


@dataclass
class UserContext:
    """Session context supplied fresh on every call.

    time_of_day: "pre_market" | "market_open" | "mid_session" | "closing_hour" | "post_market"
    market_condition: "bullish" | "bearish" | "sideways" | "volatile"
    """

    segment: UserSegment | None = None
    current_tool: str | None = None
    recent_tools: list[str] = field(default_factory=list)
    time_of_day: str | None = None
    day_of_week: int | None = None  # 0 = Sunday
    is_expiry: bool = False
    market_condition: str | None = None


@dataclass
class ContextualSuggestion:
    """A card suggested for the current context, lower priority shown first."""

    card: CardDescriptor
    reason: str
    priority: int
    context_match: list[str] = field(default_factory=list)


@dataclass
class WorkflowMatch:
    """The first workflow whose trigger appears in a query."""

    name: str
    workflow: WorkflowChain
    matched_trigger: str


@dataclass
class ToolWorkflowInfo:
    """Where a tool sits across all known workflow chains."""

    workflows: list[str] = field(default_factory=list)
    position: str = "standalone"  # "start" | "middle" | "end" | "standalone"
    before_tools: list[str] = field(default_factory=list)
    after_tools: list[str] = field(default_factory=list)
