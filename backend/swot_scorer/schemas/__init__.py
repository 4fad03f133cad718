from swot_scorer.schemas.scenario import (
    AREA_LABELS,
    AREAS,
    WEIGHT_PRESETS,
    AppState,
    Area,
    Criterion,
    Scenario,
    Weights,
)
from swot_scorer.schemas.requests import (
    AddCriteriaRequest,
    AttachFilesRequest,
    CreateScenarioRequest,
    EditCriterionRequest,
    SetScoreRequest,
    UpdateScenarioRequest,
    WeightsRequest,
)
from swot_scorer.schemas.scoring import (
    SCORING_MODE,
    CriteriaPayload,
    CriterionPayload,
    JudgedScores,
    ScenarioPayload,
    ScoringRequest,
    ScoringResponse,
)
from swot_scorer.schemas.statistics import RankedScenario, RankingResponse, ScenarioStatistics

__all__ = [
    "AREA_LABELS",
    "AREAS",
    "WEIGHT_PRESETS",
    "AppState",
    "Area",
    "Criterion",
    "Scenario",
    "Weights",
    "AddCriteriaRequest",
    "AttachFilesRequest",
    "CreateScenarioRequest",
    "EditCriterionRequest",
    "SetScoreRequest",
    "UpdateScenarioRequest",
    "WeightsRequest",
    "SCORING_MODE",
    "CriteriaPayload",
    "CriterionPayload",
    "JudgedScores",
    "ScenarioPayload",
    "ScoringRequest",
    "ScoringResponse",
    "RankedScenario",
    "RankingResponse",
    "ScenarioStatistics",
]
