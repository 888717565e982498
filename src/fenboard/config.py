from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from fenboard.utils.logger import get_logger, set_level

logger = get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_DEFAULT_LOG_LEVEL = "INFO"

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(slots=True)
class NotationSettings:
    """Parser and logging configuration."""

    # Digits 1-8 in a row stand for that many empty squares when enabled.
    accept_run_lengths: bool = field(
        default_factory=lambda: _env_flag("FENBOARD_ACCEPT_RUN_LENGTHS")
    )
    log_level: str = field(default_factory=lambda: os.getenv("FENBOARD_LOG_LEVEL", _DEFAULT_LOG_LEVEL))


def get_settings() -> NotationSettings:
    """Return settings read from the environment and any ``.env`` file."""
    load_dotenv()
    return NotationSettings()


def configure_logging(settings: NotationSettings | None = None) -> NotationSettings:
    """Apply the configured log level to the package logger.

    An unknown level name falls back to INFO with a warning, so a bad
    FENBOARD_LOG_LEVEL never stops the package from importing.
    """
    settings = settings or get_settings()
    try:
        set_level(settings.log_level)
    except ValueError:
        set_level(_DEFAULT_LOG_LEVEL)
        logger.warning(
            "Unknown log level %r, using %s", settings.log_level, _DEFAULT_LOG_LEVEL
        )
    return settings


__all__ = ["NotationSettings", "configure_logging", "get_settings"]
