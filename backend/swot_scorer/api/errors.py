"""Traducción de excepciones de dominio a respuestas HTTP."""

from fastapi import HTTPException, status

from swot_scorer.core.exceptions import (
    CriterionNotFoundError,
    InvalidScoreError,
    LastScenarioError,
    ScenarioNotFoundError,
    ScoringEndpointError,
    SwotScorerError,
)

_STATUS_BY_ERROR: dict[type[SwotScorerError], int] = {
    ScenarioNotFoundError: status.HTTP_404_NOT_FOUND,
    CriterionNotFoundError: status.HTTP_404_NOT_FOUND,
    LastScenarioError: status.HTTP_409_CONFLICT,
    # Literal: the Starlette constant name changed across releases
    InvalidScoreError: 422,
    ScoringEndpointError: status.HTTP_502_BAD_GATEWAY,
}


def to_http_exception(error: SwotScorerError) -> HTTPException:
    """Mapea la excepción a su código HTTP (500 si no está registrada)."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
