"""
Per-area means, weighted totals and ranking of scenarios.

Deterministic and read-only: nothing here mutates scenarios or weights, so
statistics can be recomputed from the current snapshot on every read.

Usage:
    stats = rank_scenarios(state.scenarios, state.weights)
    print(stats[0].name, stats[0].total)
"""

from typing import Iterable, Mapping

from swot_scorer.schemas.scenario import AREAS, Area, Scenario, Weights
from swot_scorer.schemas.statistics import ScenarioStatistics


def _mean(values: list[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_means(scenario: Scenario) -> dict[Area, float]:
    """
    Mean score per area over scored criteria only.

    Unscored criteria are excluded from both sum and count. An explicit 0
    is a real score and does count. An area with nothing scored yields 0.
    """
    return {
        area: _mean([c.score for c in scenario.criteria_for(area) if c.is_scored])
        for area in AREAS
    }


def compute_total(means: Mapping[Area, float], weights: Weights) -> float:
    """Dot product of the per-area means with the area weights."""
    return sum(means[area] * weights.for_area(area) for area in AREAS)


def compute_statistics(scenario: Scenario, weights: Weights) -> ScenarioStatistics:
    means = compute_means(scenario)
    return ScenarioStatistics(
        id=scenario.id,
        name=scenario.name,
        means=means,
        total=compute_total(means, weights),
    )


def rank_scenarios(scenarios: Iterable[Scenario], weights: Weights) -> list[ScenarioStatistics]:
    """
    Statistics for every scenario, sorted by total descending.

    ``sorted`` is stable with ``reverse=True`` as well, so tied totals keep
    their input order.
    """
    stats = [compute_statistics(scenario, weights) for scenario in scenarios]
    return sorted(stats, key=lambda s: s.total, reverse=True)
