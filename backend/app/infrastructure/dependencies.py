"""FastAPI dependency injection: wires infrastructure to the application layer."""

from functools import lru_cache

from fastapi import Depends

from app.application.interfaces.card_catalog import CardCatalog
from app.application.services import (
    CardService,
    ContextualSuggestionService,
    QueryService,
    SmartSearchService,
)
from app.config import get_settings
from app.infrastructure.catalog import YamlCardCatalog


@lru_cache
def get_card_catalog() -> CardCatalog:
    """Process-wide card catalog, loaded from YAML on first use."""
    settings = get_settings()
    return YamlCardCatalog(settings.card_catalog_path)


def get_card_service(
    catalog: CardCatalog = Depends(get_card_catalog),
) -> CardService:
    """Provides a CardService over the shared catalog."""
    return CardService(catalog)


def get_smart_search_service(
    catalog: CardCatalog = Depends(get_card_catalog),
) -> SmartSearchService:
    """Provides the card ranker over the shared catalog."""
    return SmartSearchService(catalog)


def get_query_service(
    search_service: SmartSearchService = Depends(get_smart_search_service),
) -> QueryService:
    """Provides the full query-understanding pipeline."""
    return QueryService(search_service)


def get_contextual_suggestion_service(
    catalog: CardCatalog = Depends(get_card_catalog),
) -> ContextualSuggestionService:
    """Provides contextual 'what next' suggestions over the shared catalog."""
    return ContextualSuggestionService(catalog)
