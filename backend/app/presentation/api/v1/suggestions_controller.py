"""Suggestions API controller: contextual next steps, workflows and learning paths."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    CardResponse,
    ContextualSuggestionSchema,
    ContextualSuggestionsResponse,
    LearningPathSchema,
    LearningStageSchema,
    ToolWorkflowInfoSchema,
    UserContextRequest,
    WorkflowChainSchema,
    WorkflowMatchSchema,
)
from app.application.services import (
    ContextualSuggestionService,
    get_learning_path,
    get_tool_workflow_info,
    suggest_workflow,
)
from app.domain.entities import UserContext, UserSegment, WorkflowChain, WorkflowMatch
from app.domain.lexicon import WORKFLOW_CHAINS
from app.infrastructure.dependencies import get_contextual_suggestion_service

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


# ── Helpers ──────────────────────────────────────────────────────────


def _to_workflow_schema(workflow: WorkflowChain) -> WorkflowChainSchema:
    return WorkflowChainSchema(
        name=workflow.name,
        description=workflow.description,
        sequence=list(workflow.sequence),
        triggers=list(workflow.triggers),
    )


def to_workflow_match_schema(match: WorkflowMatch) -> WorkflowMatchSchema:
    """Map a domain WorkflowMatch to its response schema."""
    return WorkflowMatchSchema(
        name=match.name,
        matched_trigger=match.matched_trigger,
        workflow=_to_workflow_schema(match.workflow),
    )


def _to_user_context(body: UserContextRequest) -> UserContext:
    return UserContext(
        segment=body.segment,
        current_tool=body.current_tool,
        recent_tools=body.recent_tools,
        time_of_day=body.time_of_day,
        day_of_week=body.day_of_week,
        is_expiry=body.is_expiry,
        market_condition=body.market_condition,
    )


# ── Endpoints ────────────────────────────────────────────────────────


@router.post("/contextual", response_model=ContextualSuggestionsResponse)
async def contextual_suggestions(
    body: UserContextRequest,
    service: ContextualSuggestionService = Depends(get_contextual_suggestion_service),
):
    """What to open next, given the current session context."""
    suggestions = service.get_contextual_suggestions(_to_user_context(body))
    playbook = service.get_market_playbook(body.market_condition)
    return ContextualSuggestionsResponse(
        suggestions=[
            ContextualSuggestionSchema(
                card=CardResponse.model_validate(s.card),
                reason=s.reason,
                priority=s.priority,
                context_match=s.context_match,
            )
            for s in suggestions
        ],
        warnings=service.get_expiry_warnings() if body.is_expiry else [],
        strategies=list(playbook.strategies) if playbook else [],
        avoid=list(playbook.avoid) if playbook else [],
    )


@router.get("/workflows", response_model=list[WorkflowChainSchema])
async def list_workflows():
    """Every known workflow chain, in matching order."""
    return [_to_workflow_schema(w) for w in WORKFLOW_CHAINS]


@router.get("/workflow", response_model=WorkflowMatchSchema)
async def workflow_for_query(q: str = Query(..., min_length=1, max_length=500)):
    """The first workflow triggered by a query."""
    match = suggest_workflow(q)
    if match is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No workflow matches this query")
    return to_workflow_match_schema(match)


@router.get("/workflow-info/{tool_id}", response_model=ToolWorkflowInfoSchema)
async def workflow_info(tool_id: str):
    """Where a tool sits across workflow chains; 'standalone' when in none."""
    info = get_tool_workflow_info(tool_id)
    return ToolWorkflowInfoSchema(
        tool_id=tool_id,
        workflows=info.workflows,
        position=info.position,
        before_tools=info.before_tools,
        after_tools=info.after_tools,
    )


@router.get("/learning-path/{segment}", response_model=LearningPathSchema)
async def learning_path(segment: UserSegment):
    """The persona learning path for a trader segment."""
    path = get_learning_path(segment)
    if path is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No learning path for '{segment.value}'")
    return LearningPathSchema(
        segment=segment,
        name=path.name,
        description=path.description,
        stages=[
            LearningStageSchema(name=stage.name, tools=list(stage.tools), goal=stage.goal)
            for stage in path.stages
        ],
    )
