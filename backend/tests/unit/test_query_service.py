"""Unit tests for the QueryService pipeline."""

import pytest

from app.application.services import QueryService, SmartSearchService
from app.domain.entities import CardDescriptor, QuestionType, SearchOptions, UserSegment
from app.infrastructure.catalog import InMemoryCardCatalog


@pytest.fixture
def service() -> QueryService:
    cards = [
        CardDescriptor(
            id="fno-risk-advisor",
            label="F&O Risk Advisor",
            category="risk",
            tags=("position sizing", "lot size", "capital at risk"),
            segments=(UserSegment.INTRADAY,),
            has_risk_sizing=True,
            default=True,
        ),
        CardDescriptor(id="trade-journal", label="Trade Journal", category="behavioral", tags=("journal",)),
    ]
    return QueryService(SmartSearchService(InMemoryCardCatalog(cards)))


def test_analyze_position_sizing_query(service: QueryService):
    analysis = service.analyze("calculate position size for 2L capital")

    assert analysis.parsed.original_query == "calculate position size for 2L capital"
    assert analysis.question_type is QuestionType.HOW_MUCH
    assert analysis.recommendations[0].tool_id == "fno-risk-advisor"
    assert analysis.intents[0].confidence == 0.95
    assert analysis.results[0].card.id == "fno-risk-advisor"
    assert analysis.normalized_query == "calculate position_sizing for 2l capital"


def test_analyze_screener_query(service: QueryService):
    analysis = service.analyze("stocks with PE < 15 and ROE > 20")
    filters = [(f.metric, f.operator, f.value) for f in analysis.parsed.screener_filters]
    assert filters == [("pe_ratio", "<", 15.0), ("roe", ">", 20.0)]


def test_analyze_matches_workflow(service: QueryService):
    assert service.analyze("best options strategy for expiry").workflow.name == "fno_analysis"
    assert service.analyze("xyzzy plugh").workflow is None


def test_analyze_passes_search_options(service: QueryService):
    analysis = service.analyze("trade journal", options=SearchOptions(max_results=1))
    assert len(analysis.results) == 1
    assert analysis.results[0].card.id == "trade-journal"


def test_analyze_limits_recommendations(service: QueryService):
    analysis = service.analyze("show oi buildup for banknifty", max_recommendations=1)
    assert len(analysis.recommendations) <= 1


def test_analyze_unparsable_query_is_total(service: QueryService):
    analysis = service.analyze("xyzzy plugh")
    assert analysis.parsed.primary_intent == "analyze"
    assert analysis.intents == []
    assert analysis.results == []
