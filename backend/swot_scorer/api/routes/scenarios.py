"""Endpoints de gestión de escenarios y criterios."""

from fastapi import APIRouter, HTTPException, status

from swot_scorer.api.errors import to_http_exception
from swot_scorer.core.exceptions import SwotScorerError
from swot_scorer.schemas import (
    AddCriteriaRequest,
    AttachFilesRequest,
    Area,
    CreateScenarioRequest,
    Criterion,
    EditCriterionRequest,
    Scenario,
    SetScoreRequest,
    UpdateScenarioRequest,
)
from swot_scorer.services import get_container

router = APIRouter()


@router.get("/scenarios", response_model=list[Scenario])
async def list_scenarios() -> list[Scenario]:
    """Lista todos los escenarios en orden de creación."""
    return list(get_container().store.list_scenarios())


@router.post("/scenarios", response_model=Scenario, status_code=status.HTTP_201_CREATED)
async def create_scenario(request: CreateScenarioRequest) -> Scenario:
    return get_container().store.add_scenario(request.name)


@router.get("/scenarios/{scenario_id}", response_model=Scenario)
async def get_scenario(scenario_id: str) -> Scenario:
    try:
        return get_container().store.get_scenario(scenario_id)
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.patch("/scenarios/{scenario_id}", response_model=Scenario)
async def update_scenario(scenario_id: str, request: UpdateScenarioRequest) -> Scenario:
    try:
        return get_container().store.update_scenario(
            scenario_id, name=request.name, description=request.description
        )
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.delete("/scenarios/{scenario_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scenario(scenario_id: str) -> None:
    """Elimina un escenario. El último escenario no se puede eliminar."""
    try:
        get_container().store.remove_scenario(scenario_id)
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.post("/scenarios/{scenario_id}/files", response_model=Scenario)
async def attach_files(scenario_id: str, request: AttachFilesRequest) -> Scenario:
    """Registra nombres de adjuntos (sin contenido)."""
    try:
        return get_container().store.attach_files(scenario_id, request.names)
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.post(
    "/scenarios/{scenario_id}/criteria/{area}",
    response_model=list[Criterion],
    status_code=status.HTTP_201_CREATED,
)
async def add_criteria(scenario_id: str, area: Area, request: AddCriteriaRequest) -> list[Criterion]:
    """Importa criterios desde texto, uno por línea no vacía."""
    try:
        created = get_container().store.add_criteria_from_text(scenario_id, area, request.text)
    except SwotScorerError as e:
        raise to_http_exception(e)
    if not created:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No non-blank lines in text")
    return created


@router.patch("/scenarios/{scenario_id}/criteria/{area}/{criterion_id}", response_model=Criterion)
async def edit_criterion(scenario_id: str, area: Area, criterion_id: str, request: EditCriterionRequest) -> Criterion:
    try:
        return get_container().store.edit_criterion(scenario_id, area, criterion_id, request.text)
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.delete("/scenarios/{scenario_id}/criteria/{area}/{criterion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_criterion(scenario_id: str, area: Area, criterion_id: str) -> None:
    try:
        get_container().store.delete_criterion(scenario_id, area, criterion_id)
    except SwotScorerError as e:
        raise to_http_exception(e)


@router.put("/scenarios/{scenario_id}/criteria/{area}/{criterion_id}/score", response_model=Criterion)
async def set_score(scenario_id: str, area: Area, criterion_id: str, request: SetScoreRequest) -> Criterion:
    """Puntuación manual: 0, un valor de la escala o null para borrar."""
    try:
        return get_container().store.set_score(scenario_id, area, criterion_id, request.score)
    except SwotScorerError as e:
        raise to_http_exception(e)
