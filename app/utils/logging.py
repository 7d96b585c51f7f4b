# app/utils/logging.py
import logging
import sys

from app.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def _build_logger(name: str) -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:  # reloads must not stack handlers
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    log.propagate = False
    return log

logger = _build_logger("receipts")
