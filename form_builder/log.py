"""
Form Builder - Logging Setup

Applies LogSettings to the standard logging module.
"""

import logging

from form_builder.config import get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)


def configure_logging(settings=None) -> None:
    """Configure root logging from settings (level and text/json format)."""
    settings = settings or get_settings()
    fmt = JSON_FORMAT if settings.log.format == "json" else TEXT_FORMAT
    logging.basicConfig(level=getattr(logging, settings.log.level), format=fmt)
