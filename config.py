"""Runtime configuration from environment variables."""

from __future__ import annotations

import logging
import os

from textual.logging import TextualHandler

from models import Config


log = logging.getLogger(__name__)

VIEWS = ("calendar", "summary")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(environ: dict[str, str] | None = None) -> Config:
    """Build a Config from ARBETSTID_* variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    config = Config()

    if start_view := env.get("ARBETSTID_START_VIEW"):
        if start_view in VIEWS:
            config.start_view = start_view
        else:
            log.warning("Unknown start view %r, using %s", start_view, config.start_view)

    if notes_width := env.get("ARBETSTID_NOTES_WIDTH"):
        try:
            width = int(notes_width)
            if width < 1:
                raise ValueError(notes_width)
            config.notes_width = width
        except ValueError:
            log.warning("Invalid notes width %r, using %d", notes_width, config.notes_width)

    if log_level := env.get("ARBETSTID_LOG_LEVEL"):
        if log_level.upper() in LOG_LEVELS:
            config.log_level = log_level.upper()
        else:
            log.warning("Unknown log level %r, using %s", log_level, config.log_level)

    return config


def configure_logging(config: Config) -> None:
    """Send log records to the Textual devtools console."""
    logging.basicConfig(
        level=config.log_level,
        handlers=[TextualHandler()],
        force=True,
    )
