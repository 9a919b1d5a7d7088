"""
utils/diagnostics.py

Diagnostic sink for a vocabulary build.

verbosity 0 and 1 log at INFO, verbosity 2 adds DEBUG progress lines.
The sink is a log file when one is given, stderr otherwise. A log file that
cannot be opened raises ResourceUnavailable before anything is counted.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from ..errors import ResourceUnavailable

LOGGER_NAME = "vocab_count_pipeline"
LOG_FORMAT = "%(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbosity: int = 2, log_file: Optional[str | Path] = None) -> logging.Handler:
    if log_file is not None:
        try:
            handler: logging.Handler = logging.FileHandler(str(log_file), mode="w", encoding="utf-8")
        except OSError as e:
            raise ResourceUnavailable("log file", str(log_file), e.strerror or str(e)) from e
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbosity > 1 else logging.INFO)
    logger.propagate = False
    return handler


def close_logging() -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
