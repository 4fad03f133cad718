from swot_scorer.services.container import DependencyContainer, get_container, reset_container
from swot_scorer.services.judge import CriterionJudge
from swot_scorer.services.store import ScenarioStore

__all__ = [
    "CriterionJudge",
    "DependencyContainer",
    "ScenarioStore",
    "get_container",
    "reset_container",
]
