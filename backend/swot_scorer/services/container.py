"""
Dependency Injection Container.

Central place for the process-wide services: the scenario store, the LLM
behind the criterion judge, the httpx client and the scoring orchestrator.
Everything is created lazily and can be overridden in tests.

Example:
    from swot_scorer.services.container import get_container

    container = get_container()
    applied = await container.orchestrator.score_all(scenario, set_score)
"""

from functools import lru_cache
from typing import Optional

import httpx

from swot_scorer.core.config import settings
from swot_scorer.core.logging import ScoringLogger
from swot_scorer.scoring.orchestrator import ExternalScoringOrchestrator
from swot_scorer.services.judge import CriterionJudge, LLMProtocol
from swot_scorer.services.store import ScenarioStore


class DependencyContainer:
    """
    Centralized container for application dependencies.

    Attributes:
        _store: In-memory scenario store.
        _llm: LLM used by the criterion judge.
        _judge: Cached CriterionJudge.
        _http_client: Client used to reach the scoring endpoint.
        _orchestrator: Cached ExternalScoringOrchestrator.
    """

    def __init__(self) -> None:
        self._store: Optional[ScenarioStore] = None
        self._llm: Optional[LLMProtocol] = None
        self._judge: Optional[CriterionJudge] = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._orchestrator: Optional[ExternalScoringOrchestrator] = None

    @property
    def store(self) -> ScenarioStore:
        if self._store is None:
            self._store = ScenarioStore()
        return self._store

    @property
    def llm(self) -> LLMProtocol:
        if self._llm is None:
            # Import here so the Groq client is only built when judging
            from swot_scorer.services.llm_factory import get_llm
            self._llm = get_llm(temperature=settings.judge_temperature)
        return self._llm

    @property
    def judge(self) -> CriterionJudge:
        if self._judge is None:
            self._judge = CriterionJudge(
                llm=self.llm,
                logger=ScoringLogger("judge"),
                max_text_chars=settings.judge_max_text_chars,
            )
        return self._judge

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=settings.scoring_timeout_seconds)
        return self._http_client

    @property
    def orchestrator(self) -> ExternalScoringOrchestrator:
        if self._orchestrator is None:
            self._orchestrator = ExternalScoringOrchestrator(
                client=self.http_client,
                endpoint=settings.scoring_endpoint_url,
                logger=ScoringLogger("orchestrator"),
                body_max_chars=settings.error_body_max_chars,
            )
        return self._orchestrator

    def override_store(self, store: ScenarioStore) -> None:
        self._store = store

    def override_llm(self, mock_llm: LLMProtocol) -> None:
        """Override the LLM with a mock; the judge is rebuilt on next access."""
        self._llm = mock_llm
        self._judge = None

    def override_http_client(self, client: httpx.AsyncClient, endpoint: Optional[str] = None) -> None:
        """Point the orchestrator at a different client (e.g. ``httpx.MockTransport``)."""
        self._http_client = client
        self._orchestrator = None
        if endpoint is not None:
            self._orchestrator = ExternalScoringOrchestrator(
                client=client,
                endpoint=endpoint,
                logger=ScoringLogger("orchestrator"),
                body_max_chars=settings.error_body_max_chars,
            )

    async def aclose(self) -> None:
        """Close the httpx client if one was created."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._orchestrator = None


@lru_cache(maxsize=1)
def get_container() -> DependencyContainer:
    """Singleton DependencyContainer per process."""
    return DependencyContainer()


def reset_container() -> None:
    """Drop the singleton so the next ``get_container()`` starts fresh."""
    get_container.cache_clear()
