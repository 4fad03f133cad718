"""Endpoints de pesos, estadísticas y ranking de escenarios."""

from fastapi import APIRouter, HTTPException, status

from swot_scorer.api.errors import to_http_exception
from swot_scorer.core.exceptions import SwotScorerError
from swot_scorer.schemas import (
    AREAS,
    RankedScenario,
    RankingResponse,
    ScenarioStatistics,
    Weights,
    WeightsRequest,
)
from swot_scorer.services import get_container

router = APIRouter()


@router.get("/weights", response_model=Weights)
async def get_weights() -> Weights:
    return get_container().store.weights


@router.put("/weights", response_model=Weights)
async def set_weights(request: WeightsRequest) -> Weights:
    return get_container().store.set_weights(Weights(**request.model_dump()))


@router.post("/weights/presets/{preset}", response_model=Weights)
async def apply_weights_preset(preset: str) -> Weights:
    """Aplica un preset: 'uniform' (1/1/1/1) o 'swot' (S/O +, W/T -)."""
    try:
        return get_container().store.apply_weights_preset(preset)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/ranking", response_model=RankingResponse)
async def get_ranking() -> RankingResponse:
    """Ranking por total = Σ(media × peso), descendente y estable ante empates."""
    store = get_container().store
    weights = store.weights
    ranked = [
        RankedScenario(position=i, **stats.model_dump())
        for i, stats in enumerate(store.ranking(), start=1)
    ]
    return RankingResponse(
        weights={area: weights.for_area(area) for area in AREAS},
        ranking=ranked,
    )


@router.get("/scenarios/{scenario_id}/statistics", response_model=ScenarioStatistics)
async def get_scenario_statistics(scenario_id: str) -> ScenarioStatistics:
    try:
        return get_container().store.statistics(scenario_id)
    except SwotScorerError as e:
        raise to_http_exception(e)
