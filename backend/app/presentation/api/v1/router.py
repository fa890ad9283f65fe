"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.query_controller import router as query_router
from app.presentation.api.v1.search_controller import router as search_router
from app.presentation.api.v1.suggestions_controller import router as suggestions_router
from app.presentation.api.v1.cards_controller import router as cards_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(query_router)
router.include_router(search_router)
router.include_router(suggestions_router)
router.include_router(cards_router)
