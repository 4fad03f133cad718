import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Directorio de logs (backend/logs/)
_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

# Símbolos para visualizar el flujo
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "skip": "◇",
}


def _configure_root_logger(level: LogLevel) -> None:
    """Configura el logger raíz con handlers de consola y archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    # Silenciar loggers ruidosos de terceros
    noisy_loggers = [
        "watchfiles",
        "watchfiles.main",
        "httpx",
        "httpcore",
        "httpcore.http11",
        "httpcore.connection",
        "groq",
        "urllib3",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Rotación diaria, mantiene 7 días
    try:
        _LOG_DIR.mkdir(exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            _LOG_DIR / "swot_scorer.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError:
        # Sin permisos de escritura: solo consola
        pass

    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Retorna un logger configurado para el módulo especificado.

    Uso:
        from swot_scorer.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Mensaje")
    """
    from swot_scorer.core.config import settings

    _configure_root_logger(settings.log_level)
    return logging.getLogger(name)


class ScoringLogger:
    """Logger especializado para trazabilidad de los intentos de scoring."""

    def __init__(self, component: str):
        self._logger = get_logger(f"scoring.{component}")
        self.component = component

    def attempt_start(self, scenario_name: str, criteria_count: int, endpoint: str) -> None:
        """Log inicio de un intento de scoring externo."""
        self._logger.info(
            f"{FLOW_SYMBOLS['start']}══ SCORING START | scenario='{scenario_name[:60]}' "
            f"| criteria={criteria_count} | endpoint={endpoint}"
        )

    def transition(self, from_state: str, to_state: str, detail: str | None = None) -> None:
        """Log de transición Idle → Requesting → Applied/Rejected/Failed."""
        suffix = f" | {detail}" if detail else ""
        self._logger.info(f"{FLOW_SYMBOLS['node']} {from_state} {FLOW_SYMBOLS['arrow']} {to_state}{suffix}")

    def attempt_end(self, applied: int, skipped: int) -> None:
        self._logger.info(
            f"{FLOW_SYMBOLS['end']}══ SCORING COMPLETE | applied={applied} | unchanged={skipped}"
        )

    def criterion_skipped(self, area: str, criterion_id: str, reason: str) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['skip']} [{area}] {criterion_id} left unchanged: {reason}")

    def batch(self, area: str, requested: int, answered: int) -> None:
        """Log de un lote de juicios por área."""
        self._logger.info(f"{FLOW_SYMBOLS['node']} [{area}] {answered}/{requested} criteria judged")

    def error(self, stage: str, error: Exception) -> None:
        self._logger.error(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] ERROR: {type(error).__name__}: {error}")

    def debug(self, stage: str, message: str) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [{stage}] {message}")
