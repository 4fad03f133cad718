"""Contrato request/response del endpoint externo de scoring."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from swot_scorer.scoring.scale import FIBONACCI_SCALE

SCORING_MODE = "deep_research"


class CriterionPayload(BaseModel):
    """Par {id, text} enviado por criterio. El score nunca se envía."""
    id: str
    text: str


class ScenarioPayload(BaseModel):
    name: str
    description: str = ""


class CriteriaPayload(BaseModel):
    S: list[CriterionPayload]
    W: list[CriterionPayload]
    O: list[CriterionPayload]
    T: list[CriterionPayload]


class ScoringRequest(BaseModel):
    """Body de POST <endpoint>."""
    scenario: ScenarioPayload
    criteria: CriteriaPayload
    scale: list[int] = Field(default_factory=lambda: list(FIBONACCI_SCALE))
    mode: Literal["deep_research"] | None = SCORING_MODE


class ScoringResponse(BaseModel):
    """
    Respuesta 2xx del endpoint, validada en el borde.

    Cada área puede faltar; los valores quedan sin tipar porque un valor no
    numérico no invalida la respuesta, solo deja ese criterio sin cambios.
    """

    model_config = ConfigDict(extra="ignore")

    S: dict[str, Any] = Field(default_factory=dict)
    W: dict[str, Any] = Field(default_factory=dict)
    O: dict[str, Any] = Field(default_factory=dict)
    T: dict[str, Any] = Field(default_factory=dict)


class JudgedScores(BaseModel):
    """Respuesta del lado servicio: solo valores de la escala."""
    S: dict[str, int] = Field(default_factory=dict)
    W: dict[str, int] = Field(default_factory=dict)
    O: dict[str, int] = Field(default_factory=dict)
    T: dict[str, int] = Field(default_factory=dict)
