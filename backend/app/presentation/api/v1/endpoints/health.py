"""Health check endpoint: reports the loaded catalog and lexicon sizes."""

from fastapi import APIRouter, Depends

from app.application.interfaces.card_catalog import CardCatalog
from app.config import get_settings
from app.domain.lexicon import VOCABULARY
from app.infrastructure.dependencies import get_card_catalog

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(catalog: CardCatalog = Depends(get_card_catalog)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "cards": len(catalog.all()),
        "vocabulary_size": len(VOCABULARY),
    }
