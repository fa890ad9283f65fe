"""Query service: runs one trader query through the whole understanding pipeline.

Stages:
  1. Parse: typo/fuzzy correction, modifiers, screener filters, phrase bank.
  2. Intent: synonym normalisation, pattern and cluster intents, tool scores.
  3. Rank: smart search over the card catalog.
  4. Workflow: first workflow chain triggered by the query.
"""

from app.application.services.contextual_suggestion_service import suggest_workflow
from app.application.services.intent_detector import (
    detect_intent,
    detect_question_type,
    recommend_tools,
)
from app.application.services.phrase_parser import parse_query
from app.application.services.query_normalizer import normalize_query
from app.application.services.smart_search_service import SmartSearchService
from app.domain.entities import QueryAnalysis, SearchOptions
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("QueryEngine")


class QueryService:
    """Application service orchestrating the query-understanding stages."""

    def __init__(self, search_service: SmartSearchService):
        self._search = search_service

    def analyze(
        self,
        query: str,
        *,
        options: SearchOptions | None = None,
        max_recommendations: int = 5,
    ) -> QueryAnalysis:
        """Full analysis of ``query``. Never raises on unparsable text."""
        plog.step_start(PipelineStage.PIPELINE, "Analyzing query", query=repr(query))

        with plog.timed_step(PipelineStage.CORRECT, "Parsing"):
            parsed = parse_query(query)
        if parsed.corrections and plog.enabled():
            plog.detail(
                "Corrections",
                applied=", ".join(f"{c.original}→{c.corrected}" for c in parsed.corrections),
            )
        if parsed.screener_filters:
            plog.step_complete(
                PipelineStage.FILTERS,
                f"{len(parsed.screener_filters)} screener filters",
                metrics=", ".join(f.metric for f in parsed.screener_filters),
            )

        with plog.timed_step(PipelineStage.NORMALIZE, "Normalizing synonyms"):
            normalized = normalize_query(query)

        with plog.timed_step(PipelineStage.INTENT, "Detecting intents"):
            intents = detect_intent(query)
            recommendations = recommend_tools(query, max_recommendations)
            question_type = detect_question_type(query)

        if intents:
            plog.detail("Top intent", cluster=intents[0].cluster, confidence=f"{intents[0].confidence:.2f}")

        with plog.timed_step(PipelineStage.RANK, "Ranking cards"):
            results = self._search.smart_search(query, options)

        workflow = suggest_workflow(query)
        plog.stats(
            intents=len(intents),
            filters=len(parsed.screener_filters),
            cards=len(results),
            workflow=workflow.name if workflow else "-",
        )
        plog.step_complete(PipelineStage.COMPLETE, "Query analyzed", primary_intent=parsed.primary_intent)

        return QueryAnalysis(
            parsed=parsed,
            normalized_query=normalized,
            question_type=question_type,
            intents=intents,
            recommendations=recommendations,
            results=results,
            workflow=workflow,
        )
