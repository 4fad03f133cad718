"""Coleccion de routers de la API."""

from swot_scorer.api.routes.comparison import router as comparison_router
from swot_scorer.api.routes.scenarios import router as scenarios_router
from swot_scorer.api.routes.scoring import router as scoring_router

__all__ = ["comparison_router", "scenarios_router", "scoring_router"]
