# core/logging_config.py
import logging
from typing import Optional

from core.config import settings

LOGGER_NAME = "tenancy"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP clients under supabase and stripe log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "stripe")


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """Configure the `tenancy` logger at `level` (defaults to LOG_LEVEL)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # uvicorn --reload imports this module again; keep one handler
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


logger = setup_logger()
