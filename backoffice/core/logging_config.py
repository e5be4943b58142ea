# backoffice/core/logging_config.py
"""
Logging setup for the back office.

Application loggers (`backoffice.*`) follow LOG_LEVEL; the database drivers,
HTTP clients and the browser tooling used by the UI campaign only report
warnings.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

QUIET_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "asyncpg",
    "aiosqlite",
    "httpx",
    "httpcore",
    "urllib3",
    "selenium",
    "WDM",
)


def configure_logging(level: str = None):
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    app_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=app_level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("backoffice").setLevel(app_level)
    logging.getLogger(__name__).debug("Logging configured at level %s", level_name)


configure_logging()
