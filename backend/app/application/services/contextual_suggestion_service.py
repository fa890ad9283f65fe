"""Contextual 'what next' suggestions and workflow introspection.

Suggestions are merged from five static sources, in this order:

    1. next-tool map for the current tool   priority 1
    2. time-of-day table                    priority 2
    3. expiry-day tools                     priority 1
    4. market-condition playbook            priority 2
    5. segment defaults (first three)       priority 3

A card keeps the reason of the first source that added it, even if a later
source would have given it a better priority. The merged list is then
stably sorted by priority and capped.
"""

from app.application.interfaces.card_catalog import CardCatalog
from app.domain.entities import (
    ContextualSuggestion,
    LearningPath,
    MarketConditionPlaybook,
    ToolWorkflowInfo,
    UserContext,
    UserSegment,
    WorkflowMatch,
)
from app.domain.lexicon import (
    EXPIRY_DAY_TOOLS,
    LEARNING_PATHS,
    MARKET_CONDITION_SUGGESTIONS,
    NEXT_TOOL_MAP,
    TIME_BASED_SUGGESTIONS,
    WORKFLOW_CHAINS,
)
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("SuggestionEngine")

MAX_SUGGESTIONS = 8
_SEGMENT_DEFAULTS = 3


class ContextualSuggestionService:
    """Stateless recommender over the workflow tables and the card catalog."""

    def __init__(self, catalog: CardCatalog):
        self._catalog = catalog

    def get_contextual_suggestions(self, context: UserContext) -> list[ContextualSuggestion]:
        """Merged, priority-sorted suggestions for the given session context."""
        suggestions: list[ContextualSuggestion] = []
        seen: set[str] = set()

        def add(tool_ids, reason: str, priority: int, context_match: str) -> None:
            for tool_id in tool_ids:
                if tool_id in seen:
                    continue
                card = self._catalog.get(tool_id)
                if card is None:
                    continue
                seen.add(tool_id)
                suggestions.append(
                    ContextualSuggestion(
                        card=card,
                        reason=reason,
                        priority=priority,
                        context_match=[context_match],
                    )
                )

        rule = NEXT_TOOL_MAP.get(context.current_tool) if context.current_tool else None
        if rule:
            add(rule.next, rule.reason, 1, "workflow_sequence")

        timed = TIME_BASED_SUGGESTIONS.get(context.time_of_day) if context.time_of_day else None
        if timed:
            add(timed.tools, timed.reason, 2, "time_of_day")

        if context.is_expiry:
            add(EXPIRY_DAY_TOOLS.tools, EXPIRY_DAY_TOOLS.reason, 1, "expiry_day")

        playbook = self.get_market_playbook(context.market_condition)
        if playbook:
            add(
                playbook.tools,
                f"Recommended for {context.market_condition} market",
                2,
                "market_condition",
            )

        segment = _parse_segment(context.segment)
        if segment:
            defaults = [
                card.id
                for card in self._catalog.all()
                if card.default and card.has_segment(segment)
            ][:_SEGMENT_DEFAULTS]
            add(defaults, f"Popular with {segment.value} traders", 3, "segment")

        suggestions.sort(key=lambda s: s.priority)
        plog.step_complete(
            PipelineStage.SUGGEST,
            f"{len(suggestions)} contextual suggestions",
            tool=context.current_tool,
            time=context.time_of_day,
            expiry=context.is_expiry,
        )
        return suggestions[:MAX_SUGGESTIONS]

    @staticmethod
    def get_market_playbook(condition: str | None) -> MarketConditionPlaybook | None:
        """Tools, strategies and things to avoid for a market condition."""
        if not condition:
            return None
        return MARKET_CONDITION_SUGGESTIONS.get(condition)

    @staticmethod
    def get_expiry_warnings() -> list[str]:
        """Risk reminders shown on expiry days."""
        return list(EXPIRY_DAY_TOOLS.warnings)


def suggest_workflow(query: str) -> WorkflowMatch | None:
    """First workflow (in table order) with a trigger contained in the query."""
    lowered = query.lower()
    for workflow in WORKFLOW_CHAINS:
        for trigger in workflow.triggers:
            if trigger in lowered:
                return WorkflowMatch(name=workflow.name, workflow=workflow, matched_trigger=trigger)
    return None


def get_tool_workflow_info(tool_id: str) -> ToolWorkflowInfo:
    """Where a tool sits across every workflow chain that contains it.

    ``position`` reflects the last chain that contains the tool;
    neighbours are collected from all of them.
    """
    info = ToolWorkflowInfo()
    for workflow in WORKFLOW_CHAINS:
        if tool_id not in workflow.sequence:
            continue
        index = workflow.sequence.index(tool_id)
        last = len(workflow.sequence) - 1
        info.workflows.append(workflow.name)

        if index == 0:
            info.position = "start"
        elif index == last:
            info.position = "end"
        else:
            info.position = "middle"

        if index > 0 and workflow.sequence[index - 1] not in info.before_tools:
            info.before_tools.append(workflow.sequence[index - 1])
        if index < last and workflow.sequence[index + 1] not in info.after_tools:
            info.after_tools.append(workflow.sequence[index + 1])
    return info


def get_learning_path(segment: UserSegment | str) -> LearningPath | None:
    """The persona learning path for a trader segment; None for unknown segments."""
    parsed = _parse_segment(segment)
    return LEARNING_PATHS.get(parsed) if parsed else None


def _parse_segment(value: UserSegment | str | None) -> UserSegment | None:
    if not value:
        return None
    try:
        return UserSegment(value)
    except ValueError:
        return None
