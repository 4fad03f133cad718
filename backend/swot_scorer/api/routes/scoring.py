"""Endpoints de scoring externo: lado servicio (/ai-score) y lado cliente."""

from fastapi import APIRouter

from swot_scorer.api.errors import to_http_exception
from swot_scorer.core.exceptions import (
    CriterionNotFoundError,
    ScenarioNotFoundError,
    ScoringEndpointError,
    SwotScorerError,
)
from swot_scorer.core.logging import get_logger
from swot_scorer.schemas import Area, JudgedScores, Scenario, ScoringRequest
from swot_scorer.services import get_container

logger = get_logger(__name__)
router = APIRouter()


@router.post("/ai-score", response_model=JudgedScores)
async def ai_score(request: ScoringRequest) -> JudgedScores:
    """
    Juzga cada criterio con el LLM y devuelve valores de la escala por área.

    Los criterios cuyo juicio falla se omiten del mapa; nunca se rellenan.
    """
    scores = await get_container().judge.score_request(request)
    return JudgedScores(**{area.value: values for area, values in scores.items()})


@router.post("/scenarios/{scenario_id}/ai-score", response_model=Scenario)
async def score_scenario(scenario_id: str) -> Scenario:
    """
    Puntúa el escenario contra el endpoint configurado y aplica los scores.

    Rechazo, fallo de transporte o respuesta malformada: 502 y ningún cambio.
    """
    container = get_container()
    store = container.store
    try:
        scenario = store.get_scenario(scenario_id)
    except SwotScorerError as e:
        raise to_http_exception(e)

    def _set_score(area: Area, criterion_id: str, score: int) -> None:
        try:
            store.set_score(scenario_id, area, criterion_id, score)
        except (CriterionNotFoundError, ScenarioNotFoundError) as e:
            # Borrado mientras la llamada estaba en curso: last write wins
            logger.warning(f"[AI-SCORE] Score for {criterion_id} dropped: {e}")

    try:
        await container.orchestrator.score_all(scenario, _set_score)
    except ScoringEndpointError as e:
        logger.error(f"[AI-SCORE] {e}")
        raise to_http_exception(e)

    try:
        return store.get_scenario(scenario_id)
    except SwotScorerError as e:
        raise to_http_exception(e)
