"""Logging setup shared by the CLI and the API."""

import logging

from .config import Settings, get_settings

VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(settings: Settings | None = None, level: str | None = None) -> None:
    """Configure root logging from settings, or an explicit level."""
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    numeric = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=numeric,
        format=VERBOSE_FORMAT if settings.debug or numeric <= logging.DEBUG else DEFAULT_FORMAT,
    )
