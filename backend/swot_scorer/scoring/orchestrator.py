"""
External scoring orchestration.

Sends one request per scenario to the scoring endpoint, validates the reply
at the boundary and writes snapped scores back through a callback.

The attempt is all-or-nothing at the transport level (rejection, transport
failure or a malformed body write nothing) but per-criterion tolerant on
success: omitted ids and non-numeric values leave the criterion unchanged.

Example:
    async with httpx.AsyncClient(timeout=120) as client:
        orchestrator = ExternalScoringOrchestrator(client, endpoint)
        applied = await orchestrator.score_all(
            scenario,
            lambda area, cid, score: store.set_score(scenario.id, area, cid, score),
        )
"""

import json
from enum import Enum
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from swot_scorer.core.exceptions import (
    EndpointRejectedError,
    EndpointUnreachableError,
    MalformedResponseError,
)
from swot_scorer.core.logging import ScoringLogger
from swot_scorer.schemas.scenario import AREAS, Area, Scenario
from swot_scorer.schemas.scoring import (
    SCORING_MODE,
    CriteriaPayload,
    CriterionPayload,
    ScenarioPayload,
    ScoringRequest,
    ScoringResponse,
)
from swot_scorer.scoring.scale import FIBONACCI_SCALE, is_finite_number, snap_to_scale

ScoreSetter = Callable[[Area, str, int], None]


class AttemptState(str, Enum):
    IDLE = "Idle"
    REQUESTING = "Requesting"
    APPLIED = "Applied"
    REJECTED = "Rejected"
    FAILED = "Failed"


def build_scoring_request(scenario: Scenario) -> ScoringRequest:
    """Build the outbound body. Only ``{id, text}`` per criterion is sent."""
    return ScoringRequest(
        scenario=ScenarioPayload(name=scenario.name, description=scenario.description),
        criteria=CriteriaPayload(**{
            area.value: [CriterionPayload(id=c.id, text=c.text) for c in scenario.criteria_for(area)]
            for area in AREAS
        }),
        scale=list(FIBONACCI_SCALE),
        mode=SCORING_MODE,
    )


class ExternalScoringOrchestrator:
    """
    Client side of the external scoring endpoint.

    The httpx client is injected: base URL, timeouts and auth belong to
    whoever builds it. Each call to ``score_all`` is a single attempt.

    Attributes:
        endpoint: URL the request is POSTed to.
        body_max_chars: Max chars of a rejection body kept in the message.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        logger: Optional[ScoringLogger] = None,
        body_max_chars: int = 2000,
    ) -> None:
        self._client = client
        self.endpoint = endpoint
        self._logger = logger or ScoringLogger("orchestrator")
        self.body_max_chars = body_max_chars

    async def request_scores(self, scenario: Scenario) -> ScoringResponse:
        """
        POST the scenario and return the validated response.

        Raises:
            EndpointUnreachableError: Transport-level failure.
            EndpointRejectedError: Non-2xx status.
            MalformedResponseError: 2xx body not matching the response shape.
        """
        payload = build_scoring_request(scenario).model_dump(mode="json")
        self._logger.transition(AttemptState.IDLE.value, AttemptState.REQUESTING.value)

        try:
            response = await self._client.post(self.endpoint, json=payload)
        except httpx.HTTPError as e:
            self._logger.transition(AttemptState.REQUESTING.value, AttemptState.FAILED.value, type(e).__name__)
            error = EndpointUnreachableError(endpoint=self.endpoint, original_error=e)
            self._logger.error(AttemptState.FAILED.value, error)
            raise error from e

        if not response.is_success:
            self._logger.transition(
                AttemptState.REQUESTING.value,
                AttemptState.REJECTED.value,
                f"HTTP {response.status_code}",
            )
            error = EndpointRejectedError(
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body=response.text,
                endpoint=self.endpoint,
                body_max_chars=self.body_max_chars,
            )
            self._logger.error(AttemptState.REJECTED.value, error)
            raise error

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._logger.transition(AttemptState.REQUESTING.value, AttemptState.FAILED.value, "invalid JSON")
            error = MalformedResponseError(
                "body is not valid JSON",
                endpoint=self.endpoint,
                details=response.text[: self.body_max_chars],
            )
            self._logger.error(AttemptState.FAILED.value, error)
            raise error from e

        if not isinstance(data, dict):
            self._logger.transition(AttemptState.REQUESTING.value, AttemptState.FAILED.value, "not an object")
            error = MalformedResponseError(
                f"expected a JSON object, got {type(data).__name__}",
                endpoint=self.endpoint,
            )
            self._logger.error(AttemptState.FAILED.value, error)
            raise error

        try:
            return ScoringResponse.model_validate(data)
        except ValidationError as e:
            self._logger.transition(AttemptState.REQUESTING.value, AttemptState.FAILED.value, "schema mismatch")
            error = MalformedResponseError(
                "area scores must be objects keyed by criterion id",
                endpoint=self.endpoint,
                details=str(e)[:500],
            )
            self._logger.error(AttemptState.FAILED.value, error)
            raise error from e

    async def score_all(self, scenario: Scenario, set_score: ScoreSetter) -> dict[Area, dict[str, int]]:
        """
        Score every criterion of ``scenario`` through the endpoint.

        Args:
            scenario: Snapshot of the scenario to score.
            set_score: Write callback ``(area, criterion_id, score)``.

        Returns:
            Snapped scores that were applied, per area.
        """
        self._logger.attempt_start(scenario.name, scenario.criteria_count, self.endpoint)

        result = await self.request_scores(scenario)

        # Validate and snap everything before the first write
        applied: dict[Area, dict[str, int]] = {area: {} for area in AREAS}
        skipped = 0
        for area, criterion in scenario.iter_criteria():
            area_scores = getattr(result, area.value)
            if criterion.id not in area_scores:
                skipped += 1
                self._logger.criterion_skipped(area.value, criterion.id, "missing from response")
                continue

            raw = area_scores[criterion.id]
            if not is_finite_number(raw):
                skipped += 1
                self._logger.criterion_skipped(area.value, criterion.id, f"non-numeric value {raw!r}")
                continue

            applied[area][criterion.id] = snap_to_scale(raw)

        for area, scores in applied.items():
            for criterion_id, snapped in scores.items():
                set_score(area, criterion_id, snapped)

        self._logger.transition(AttemptState.REQUESTING.value, AttemptState.APPLIED.value)
        self._logger.attempt_end(sum(len(v) for v in applied.values()), skipped)
        return applied
