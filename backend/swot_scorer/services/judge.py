"""
Criterion judge: the service side of the external scoring endpoint.

Each criterion text gets its own LLM call. Within one area the calls run
concurrently and are joined best-effort: a failed call drops that criterion
from the result instead of failing the batch. A reply without a numeric
score counts as raw 0, which snaps to the lowest scale member.

Example:
    judge = CriterionJudge(llm=get_llm(temperature=0.2))
    scores = await judge.score_request(request)
"""

import asyncio
import json
import re
from typing import Any, List, Optional, Protocol, runtime_checkable

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from swot_scorer.core.logging import ScoringLogger
from swot_scorer.schemas.scenario import AREAS, Area
from swot_scorer.schemas.scoring import CriterionPayload, ScoringRequest
from swot_scorer.scoring.prompts import CRITERION_JUDGE_PROMPT, CRITERION_USER_TEMPLATE
from swot_scorer.scoring.scale import is_finite_number, snap_to_scale


@runtime_checkable
class LLMProtocol(Protocol):
    """Cualquier LLM con ``ainvoke(messages)`` que devuelva un objeto con ``content``."""

    async def ainvoke(self, messages: List[BaseMessage]) -> Any:
        ...


def parse_json_response(response: str) -> dict | None:
    """Parsea respuesta JSON del LLM, manejando posibles errores de formato."""
    try:
        clean = response.strip()
        if clean.startswith("```"):
            clean = re.sub(r"```(?:json)?\n?", "", clean)
            clean = clean.rstrip("`")
        parsed = json.loads(clean)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JudgmentParseError(ValueError):
    """La respuesta del LLM no es un objeto JSON."""


class CriterionJudge:
    """
    Scores criterion texts one LLM call at a time.

    Attributes:
        max_text_chars: Criterion text is truncated to this length.
    """

    def __init__(
        self,
        llm: LLMProtocol,
        logger: Optional[ScoringLogger] = None,
        max_text_chars: int = 2000,
    ) -> None:
        self._llm = llm
        self._logger = logger or ScoringLogger("judge")
        self.max_text_chars = max_text_chars

    def _build_messages(self, text: str) -> List[BaseMessage]:
        return [
            SystemMessage(content=CRITERION_JUDGE_PROMPT),
            HumanMessage(content=CRITERION_USER_TEMPLATE.format(text=text[: self.max_text_chars])),
        ]

    async def judge(self, text: str) -> int:
        """
        Judge a single criterion and snap the result onto the scale.

        Raises:
            JudgmentParseError: The reply is not a JSON object.
            Exception: Whatever the LLM client raises.
        """
        response = await self._llm.ainvoke(self._build_messages(text))
        payload = parse_json_response(response.content or "")
        if payload is None:
            raise JudgmentParseError(f"unparseable judgment: {str(response.content)[:100]!r}")

        raw = payload.get("score")
        # NaN, Infinity y 1e400 cuentan como no numéricos
        if not is_finite_number(raw):
            raw = 0
        return snap_to_scale(raw)

    async def score_area(self, area: Area, criteria: List[CriterionPayload]) -> dict[str, int]:
        """Juzga todos los criterios de un área en paralelo; los fallos se omiten."""
        results = await asyncio.gather(
            *(self.judge(c.text) for c in criteria),
            return_exceptions=True,
        )

        scores: dict[str, int] = {}
        for criterion, result in zip(criteria, results):
            if isinstance(result, BaseException):
                self._logger.criterion_skipped(area.value, criterion.id, f"{type(result).__name__}: {result}")
                continue
            scores[criterion.id] = result

        self._logger.batch(area.label, len(criteria), len(scores))
        return scores

    async def score_request(self, request: ScoringRequest) -> dict[Area, dict[str, int]]:
        """Procesa las cuatro áreas de forma independiente, una tras otra."""
        self._logger.debug("judge", f"Scoring scenario '{request.scenario.name[:60]}'")
        out: dict[Area, dict[str, int]] = {}
        for area in AREAS:
            out[area] = await self.score_area(area, getattr(request.criteria, area.value))
        return out
