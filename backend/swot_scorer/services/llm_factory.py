from functools import lru_cache

from langchain_groq import ChatGroq

from swot_scorer.core.config import settings
from swot_scorer.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_llm(temperature: float = 0.0) -> ChatGroq:
    """
    Factory singleton para instancias de ChatGroq.

    El juez pide JSON compacto por criterio. Sin reintentos: un criterio cuyo juicio
    falla simplemente no aparece en la respuesta.
    """
    logger.info(f"Inicializando LLM: {settings.groq_model} (temp={temperature})")
    return ChatGroq(
        model=settings.groq_model,
        temperature=temperature,
        api_key=settings.groq_api_key,
        request_timeout=60,
        max_retries=0,
    )
