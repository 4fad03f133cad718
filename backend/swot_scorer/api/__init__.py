from fastapi import APIRouter

from swot_scorer.api.routes import comparison_router, scenarios_router, scoring_router

router = APIRouter()
router.include_router(scenarios_router)
router.include_router(comparison_router)
router.include_router(scoring_router)

__all__ = ["router"]
