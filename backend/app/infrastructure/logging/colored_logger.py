"""Colored pipeline logger: ANSI-colored console tracing of the query engine.

Each stage of query understanding gets its own color so a single request
can be followed through the terminal at a glance.

Color scheme:
    🟡 Yellow : Correction / normalization
    🔵 Blue   : Intent detection
    🟣 Magenta: Screener filter extraction
    🟠 Cyan   : Card ranking
    🟢 Green  : Suggestions / catalog
    🔴 Red    : Errors
    ⚪ Gray   : Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Query Stage Definitions ──────────────────────────────────────────

class PipelineStage:
    """Query engine stages with colors and icons."""

    CORRECT = ("CORRECT", _Colors.YELLOW, "✏️")
    NORMALIZE = ("NORMALIZE", _Colors.YELLOW, "🔤")
    INTENT = ("INTENT", _Colors.BLUE, "🎯")
    FILTERS = ("FILTERS", _Colors.MAGENTA, "🧮")
    RANK = ("RANK", _Colors.CYAN, "📊")
    SUGGEST = ("SUGGEST", _Colors.GREEN, "💡")
    CATALOG = ("CATALOG", _Colors.GREEN, "🗂️")
    PIPELINE = ("PIPELINE", _Colors.WHITE, "⚙️")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for query engine stages.

    Usage:
        log = PipelineLogger("QueryEngine")
        log.step_start(PipelineStage.INTENT, "Detecting intents", query="pe < 15")
        log.detail("valuation_check", confidence=0.95)
        log.step_complete(PipelineStage.INTENT, "3 intents")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def enabled(self) -> bool:
        """True when INFO records would be emitted; lets callers skip costly formatting."""
        return self._logger.isEnabledFor(logging.INFO)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the start of a stage with its color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _kv(kwargs))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the successful completion of a stage."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _kv(kwargs))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a stage error in red."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        self._logger.info(f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}" + _kv(kwargs, dim=True))

    def stats(self, **kwargs: Any) -> None:
        """Log statistics / timing information."""
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed milliseconds.

        Usage:
            with log.timed_step(PipelineStage.RANK, "Ranking cards"):
                results = service.smart_search(query)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.step_error(stage, f"{message} failed after {elapsed_ms:.1f}ms", error=e)
            raise
        else:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.step_complete(stage, f"{message} in {elapsed_ms:.1f}ms")


def _kv(values: dict[str, Any], *, dim: bool = False) -> str:
    if not values:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in values.items())
    shade = _Colors.DIM if dim else _Colors.GRAY
    return f" {shade}({details}){_Colors.RESET}"
