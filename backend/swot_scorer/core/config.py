from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración centralizada del servicio con validación de tipos."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    cors_origins: list[str] = Field(default=["http://localhost:5173", "http://127.0.0.1:5173"])

    # Groq (juez por criterio del endpoint /api/ai-score)
    groq_api_key: str = Field(..., min_length=1)
    groq_model: str = Field(default="openai/gpt-oss-120b")
    judge_temperature: float = Field(default=0.2, ge=0.0, le=1.0)
    judge_max_text_chars: int = Field(default=2000, ge=50, le=20000)

    # Endpoint externo de scoring (lado cliente)
    scoring_endpoint_url: str = Field(default="http://localhost:8000/api/ai-score")
    scoring_timeout_seconds: float = Field(default=120.0, gt=0.0, le=900.0)
    error_body_max_chars: int = Field(default=2000, ge=100, le=100000)


@lru_cache
def get_settings() -> Settings:
    """Singleton cacheado para evitar recargar .env en cada request."""
    return Settings()


settings = get_settings()
