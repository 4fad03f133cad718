from pydantic import BaseModel, ConfigDict, Field

from swot_scorer.schemas.scenario import Area


class ScenarioStatistics(BaseModel):
    """Estadísticas derivadas de un escenario; se recalculan en cada lectura."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    means: dict[Area, float] = Field(description="Media de criterios puntuados por área")
    total: float = Field(description="Suma ponderada de las medias")


class RankedScenario(ScenarioStatistics):
    position: int = Field(ge=1, description="Posición 1-based en el ranking")


class RankingResponse(BaseModel):
    weights: dict[Area, float]
    ranking: list[RankedScenario] = Field(default_factory=list)
