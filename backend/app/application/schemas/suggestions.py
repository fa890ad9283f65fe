"""Pydantic schemas for contextual suggestions, workflows and learning paths."""

from pydantic import BaseModel, Field

from app.application.schemas.cards import CardResponse
from app.domain.entities import UserSegment


# ── Request Schemas ──────────────────────────────────────────────────


class UserContextRequest(BaseModel):
    """Session context sent with every suggestion request."""

    segment: UserSegment | None = None
    current_tool: str | None = None
    recent_tools: list[str] = []
    time_of_day: str | None = Field(
        default=None,
        description="pre_market | market_open | mid_session | closing_hour | post_market",
    )
    day_of_week: int | None = Field(default=None, ge=0, le=6, description="0 = Sunday")
    is_expiry: bool = False
    market_condition: str | None = Field(
        default=None, description="bullish | bearish | sideways | volatile"
    )


# ── Response Schemas ─────────────────────────────────────────────────


class ContextualSuggestionSchema(BaseModel):
    """A card suggested for the current context."""

    card: CardResponse
    reason: str
    priority: int
    context_match: list[str] = []


class ContextualSuggestionsResponse(BaseModel):
    """Suggestions plus expiry warnings and market playbook hints."""

    suggestions: list[ContextualSuggestionSchema] = []
    warnings: list[str] = []
    strategies: list[str] = []
    avoid: list[str] = []


class WorkflowChainSchema(BaseModel):
    """An ordered multi-tool workflow."""

    name: str
    description: str
    sequence: list[str] = []
    triggers: list[str] = []


class WorkflowMatchSchema(BaseModel):
    """The workflow triggered by a query."""

    name: str
    matched_trigger: str
    workflow: WorkflowChainSchema


class ToolWorkflowInfoSchema(BaseModel):
    """Where a tool sits across workflow chains."""

    tool_id: str
    workflows: list[str] = []
    position: str = "standalone"
    before_tools: list[str] = []
    after_tools: list[str] = []


class LearningStageSchema(BaseModel):
    """One stage of a learning path."""

    name: str
    tools: list[str] = []
    goal: str


class LearningPathSchema(BaseModel):
    """Persona learning path."""

    segment: UserSegment
    name: str
    description: str
    stages: list[LearningStageSchema] = []
