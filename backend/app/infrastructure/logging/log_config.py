"""Centralized logging configuration.

Applies per-category log levels from Settings so that the per-query
pipeline trace of the engine can be silenced without affecting the
catalog loader or the web server.

Usage:
    from app.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in main.py or lifespan)
"""

import logging
import sys

from app.config import Settings, get_settings


# ── Settings field → logger names ───────────────────────────────────
#
# The pipeline loggers ("QueryEngine", "SuggestionEngine") are named after
# their PipelineLogger component, not their module, so they are listed
# explicitly next to the service package.

_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_engine": ("app.application.services", "QueryEngine", "SuggestionEngine"),
    "log_level_catalog": ("app.infrastructure.catalog", "CardCatalog"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}

_FORMAT = "%(levelname)-8s %(name)s | %(message)s"


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Configure logging levels from application settings.

    Returns the level applied to each configured logger name (the root
    logger under ``"root"``). Safe to call more than once: a handler is only
    attached when the root logger has none.
    """
    settings = settings or get_settings()
    applied: dict[str, int] = {"root": _parse_level(settings.log_level)}

    root = logging.getLogger()
    root.setLevel(applied["root"])
    # uvicorn installs its own handlers; tests and scripts do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, engine=%s, catalog=%s, uvicorn=%s",
        settings.log_level,
        settings.log_level_engine,
        settings.log_level_catalog,
        settings.log_level_uvicorn,
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
