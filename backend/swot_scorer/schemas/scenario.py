"""
Domain models: areas, criteria, scenarios, weights and the app snapshot.

All models are frozen. Updates go through ``model_copy`` so every store
mutation yields a new snapshot instead of editing shared objects.
"""

from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swot_scorer.scoring.scale import is_allowed_score


class Area(str, Enum):
    """Las cuatro áreas SWOT, en orden fijo."""
    STRENGTH = "S"
    WEAKNESS = "W"
    OPPORTUNITY = "O"
    THREAT = "T"

    @property
    def label(self) -> str:
        return AREA_LABELS[self]


AREA_LABELS: dict[Area, str] = {
    Area.STRENGTH: "Strengths",
    Area.WEAKNESS: "Weaknesses",
    Area.OPPORTUNITY: "Opportunities",
    Area.THREAT: "Threats",
}

AREAS: tuple[Area, ...] = tuple(Area)


def empty_criteria() -> dict[Area, tuple["Criterion", ...]]:
    return {area: () for area in AREAS}


class Criterion(BaseModel):
    """Un criterio SWOT con score opcional."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Identificador opaco y estable.")
    text: str = Field(default="", description="Descripción libre del criterio.")
    score: Optional[int] = Field(
        default=None,
        description="0 o un valor de la escala; None = sin puntuar.",
    )

    @field_validator("score")
    @classmethod
    def validate_score(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not is_allowed_score(v):
            raise ValueError(f"score {v} is not 0 or a scale member")
        return v

    @property
    def is_scored(self) -> bool:
        return self.score is not None


class Scenario(BaseModel):
    """
    Escenario de decisión con sus criterios agrupados por área.

    Invariant: ``criteria`` always holds the four areas, each an ordered
    tuple in insertion order.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    description: str = Field(default="")
    files: tuple[str, ...] = Field(default=(), description="Nombres de adjuntos, sin contenido.")
    criteria: dict[Area, tuple[Criterion, ...]] = Field(default_factory=empty_criteria)

    @field_validator("criteria")
    @classmethod
    def ensure_all_areas(cls, v: dict[Area, tuple[Criterion, ...]]) -> dict[Area, tuple[Criterion, ...]]:
        """Completa las áreas ausentes y fija el orden S, W, O, T."""
        return {area: tuple(v.get(area, ())) for area in AREAS}

    def criteria_for(self, area: Area) -> tuple[Criterion, ...]:
        return self.criteria[area]

    def iter_criteria(self) -> Iterator[tuple[Area, Criterion]]:
        """Itera (área, criterio) en orden de área y de inserción."""
        for area in AREAS:
            for criterion in self.criteria[area]:
                yield area, criterion

    def find_criterion(self, area: Area, criterion_id: str) -> Optional[Criterion]:
        for criterion in self.criteria[area]:
            if criterion.id == criterion_id:
                return criterion
        return None

    def with_area(self, area: Area, criteria: tuple[Criterion, ...]) -> "Scenario":
        """Copia del escenario con los criterios de ``area`` reemplazados."""
        return self.model_copy(update={"criteria": {**self.criteria, area: tuple(criteria)}})

    @property
    def criteria_count(self) -> int:
        return sum(len(items) for items in self.criteria.values())


class Weights(BaseModel):
    """Pesos por área, compartidos por todos los escenarios al comparar."""

    model_config = ConfigDict(frozen=True)

    S: float = Field(default=1.0, allow_inf_nan=False)
    W: float = Field(default=-1.0, allow_inf_nan=False)
    O: float = Field(default=1.0, allow_inf_nan=False)
    T: float = Field(default=-1.0, allow_inf_nan=False)

    def for_area(self, area: Area) -> float:
        return getattr(self, area.value)

    @classmethod
    def uniform(cls) -> "Weights":
        """Todas las áreas suman igual (1/1/1/1)."""
        return cls(S=1.0, W=1.0, O=1.0, T=1.0)

    @classmethod
    def swot(cls) -> "Weights":
        """Fortalezas/oportunidades suman, debilidades/amenazas restan."""
        return cls(S=1.0, W=-1.0, O=1.0, T=-1.0)


WEIGHT_PRESETS = {
    "uniform": Weights.uniform,
    "swot": Weights.swot,
}


class AppState(BaseModel):
    """Snapshot inmutable del estado de la aplicación."""

    model_config = ConfigDict(frozen=True)

    scenarios: tuple[Scenario, ...] = Field(default=())
    weights: Weights = Field(default_factory=Weights.swot)
