from swot_scorer.core.config import Settings, get_settings, settings
from swot_scorer.core.logging import ScoringLogger, get_logger

__all__ = ["Settings", "ScoringLogger", "get_logger", "get_settings", "settings"]
