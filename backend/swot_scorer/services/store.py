"""
In-memory scenario store.

Holds the current ``AppState`` snapshot. Every mutation builds a new frozen
snapshot and swaps it in, so readers (ranking, the scoring orchestrator)
always work on a consistent state. Concurrent edits are not guarded: the
last write wins.
"""

import string
from typing import Iterable, Optional
from uuid import uuid4

from swot_scorer.core.exceptions import (
    CriterionNotFoundError,
    InvalidScoreError,
    LastScenarioError,
    ScenarioNotFoundError,
)
from swot_scorer.core.logging import get_logger
from swot_scorer.schemas.scenario import WEIGHT_PRESETS, AppState, Area, Criterion, Scenario, Weights
from swot_scorer.schemas.statistics import ScenarioStatistics
from swot_scorer.scoring.aggregation import compute_statistics, rank_scenarios
from swot_scorer.scoring.scale import is_allowed_score

logger = get_logger(__name__)


def new_id() -> str:
    return uuid4().hex[:8]


def default_scenario_name(index: int) -> str:
    """'Scenario A', 'Scenario B', ... según la posición."""
    letters = string.ascii_uppercase
    if index < len(letters):
        return f"Scenario {letters[index]}"
    return f"Scenario {index + 1}"


class ScenarioStore:
    """
    Application state holder for scenarios and weights.

    Starts with a single empty scenario and the S/O positive, W/T negative
    weights.

    Example:
        >>> store = ScenarioStore()
        >>> scenario = store.add_scenario("Relocate")
        >>> store.add_criteria_from_text(scenario.id, Area.STRENGTH, "Cheaper rent\\nCloser to clients")
        >>> store.ranking()[0].name
    """

    def __init__(self, initial: Optional[AppState] = None) -> None:
        if initial is None:
            initial = AppState(
                scenarios=(Scenario(id=new_id(), name=default_scenario_name(0)),),
                weights=Weights.swot(),
            )
        if not initial.scenarios:
            raise ValueError("AppState must hold at least one scenario")
        self._state = initial

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def snapshot(self) -> AppState:
        return self._state

    @property
    def weights(self) -> Weights:
        return self._state.weights

    def list_scenarios(self) -> tuple[Scenario, ...]:
        return self._state.scenarios

    def get_scenario(self, scenario_id: str) -> Scenario:
        for scenario in self._state.scenarios:
            if scenario.id == scenario_id:
                return scenario
        raise ScenarioNotFoundError(scenario_id)

    def statistics(self, scenario_id: str) -> ScenarioStatistics:
        state = self._state
        return compute_statistics(self.get_scenario(scenario_id), state.weights)

    def ranking(self) -> list[ScenarioStatistics]:
        state = self._state
        return rank_scenarios(state.scenarios, state.weights)

    # -------------------------------------------------------------------------
    # Snapshot commit
    # -------------------------------------------------------------------------

    def _commit(self, scenarios: Optional[tuple[Scenario, ...]] = None, weights: Optional[Weights] = None) -> None:
        update = {}
        if scenarios is not None:
            update["scenarios"] = scenarios
        if weights is not None:
            update["weights"] = weights
        self._state = self._state.model_copy(update=update)

    def _replace_scenario(self, updated: Scenario) -> Scenario:
        self.get_scenario(updated.id)
        self._commit(scenarios=tuple(
            updated if s.id == updated.id else s for s in self._state.scenarios
        ))
        return updated

    # -------------------------------------------------------------------------
    # Scenarios
    # -------------------------------------------------------------------------

    def add_scenario(self, name: Optional[str] = None) -> Scenario:
        scenarios = self._state.scenarios
        scenario = Scenario(
            id=new_id(),
            name=name if name is not None else default_scenario_name(len(scenarios)),
        )
        self._commit(scenarios=(*scenarios, scenario))
        logger.info(f"Scenario '{scenario.name}' created ({scenario.id})")
        return scenario

    def update_scenario(
        self,
        scenario_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Scenario:
        update = {}
        if name is not None:
            update["name"] = name
        if description is not None:
            update["description"] = description
        scenario = self.get_scenario(scenario_id)
        return self._replace_scenario(scenario.model_copy(update=update))

    def attach_files(self, scenario_id: str, names: Iterable[str]) -> Scenario:
        """Añade nombres de adjuntos; el contenido binario no se guarda."""
        scenario = self.get_scenario(scenario_id)
        return self._replace_scenario(scenario.model_copy(update={"files": (*scenario.files, *names)}))

    def remove_scenario(self, scenario_id: str) -> None:
        self.get_scenario(scenario_id)
        remaining = tuple(s for s in self._state.scenarios if s.id != scenario_id)
        if not remaining:
            raise LastScenarioError(scenario_id)
        self._commit(scenarios=remaining)
        logger.info(f"Scenario {scenario_id} deleted, {len(remaining)} remaining")

    # -------------------------------------------------------------------------
    # Criteria
    # -------------------------------------------------------------------------

    def add_criteria_from_text(self, scenario_id: str, area: Area, text: str) -> list[Criterion]:
        """
        Bulk import: one criterion per non-blank line, trimmed, appended in order.

        Returns:
            The created criteria (empty when ``text`` holds only blank lines).
        """
        scenario = self.get_scenario(scenario_id)
        lines = [line.strip() for line in text.split("\n")]
        created = [Criterion(id=new_id(), text=line) for line in lines if line]
        if not created:
            return []

        self._replace_scenario(scenario.with_area(area, (*scenario.criteria_for(area), *created)))
        logger.debug(f"{len(created)} criteria added to {scenario_id}/{area.value}")
        return created

    def _update_criterion(self, scenario_id: str, area: Area, criterion_id: str, **changes) -> Criterion:
        scenario = self.get_scenario(scenario_id)
        if scenario.find_criterion(area, criterion_id) is None:
            raise CriterionNotFoundError(scenario_id, area.value, criterion_id)

        updated: Optional[Criterion] = None
        items = []
        for criterion in scenario.criteria_for(area):
            if criterion.id == criterion_id:
                updated = criterion.model_copy(update=changes)
                items.append(updated)
            else:
                items.append(criterion)
        self._replace_scenario(scenario.with_area(area, tuple(items)))
        return updated

    def edit_criterion(self, scenario_id: str, area: Area, criterion_id: str, text: str) -> Criterion:
        return self._update_criterion(scenario_id, area, criterion_id, text=text)

    def delete_criterion(self, scenario_id: str, area: Area, criterion_id: str) -> None:
        scenario = self.get_scenario(scenario_id)
        if scenario.find_criterion(area, criterion_id) is None:
            raise CriterionNotFoundError(scenario_id, area.value, criterion_id)
        self._replace_scenario(scenario.with_area(
            area, tuple(c for c in scenario.criteria_for(area) if c.id != criterion_id)
        ))

    def set_score(self, scenario_id: str, area: Area, criterion_id: str, score: Optional[int]) -> Criterion:
        """
        Score write keyed by (scenario, area, criterion).

        ``None`` clears the score. Explicit values must be 0 or on the scale.
        """
        if score is not None and not is_allowed_score(score):
            raise InvalidScoreError(score)
        return self._update_criterion(scenario_id, area, criterion_id, score=score)

    # -------------------------------------------------------------------------
    # Weights
    # -------------------------------------------------------------------------

    def set_weights(self, weights: Weights) -> Weights:
        self._commit(weights=weights)
        return weights

    def apply_weights_preset(self, preset: str) -> Weights:
        try:
            factory = WEIGHT_PRESETS[preset]
        except KeyError:
            raise ValueError(
                f"Unknown weights preset: '{preset}'. Available: {', '.join(WEIGHT_PRESETS)}"
            ) from None
        return self.set_weights(factory())

