from __future__ import annotations

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "phrasesieve"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler to the ``phrasesieve`` logger and set its level.

    Respects env var PHRASESIEVE_LOG_LEVEL if `level` is None. Calling it again
    only updates the level; records still propagate to the root logger.
    """
    lvl = (level or os.environ.get("PHRASESIEVE_LOG_LEVEL") or "INFO").upper()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, lvl, logging.INFO))
    if not any(getattr(h, "_phrasesieve", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        handler._phrasesieve = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
