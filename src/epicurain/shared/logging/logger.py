from __future__ import annotations

import logging

from epicurain.shared.config.settings import settings

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging() -> None:
    lvl = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=lvl, format=_FORMAT)
    # Reduce verbosity of noisy loggers
    for noisy in ("httpx", "httpcore", "multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
