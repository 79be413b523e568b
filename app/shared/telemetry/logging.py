"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import RequestContextFilter

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
)


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO. Output goes
    to stdout with the current request ID on every line. SQLAlchemy engine
    logging stays at WARNING unless DATABASE_ECHO is set, so search
    sub-queries do not flood the log.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
