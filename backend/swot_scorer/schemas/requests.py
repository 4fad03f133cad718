from typing import Optional

from pydantic import BaseModel, Field


class CreateScenarioRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)


class UpdateScenarioRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None


class AttachFilesRequest(BaseModel):
    names: list[str] = Field(..., min_length=1)


class AddCriteriaRequest(BaseModel):
    """Texto multilínea: un criterio por línea no vacía."""
    text: str = Field(..., min_length=1)


class EditCriterionRequest(BaseModel):
    text: str


class SetScoreRequest(BaseModel):
    """``score=None`` borra la puntuación."""
    score: Optional[int] = None


class WeightsRequest(BaseModel):
    S: float = Field(allow_inf_nan=False)
    W: float = Field(allow_inf_nan=False)
    O: float = Field(allow_inf_nan=False)
    T: float = Field(allow_inf_nan=False)
