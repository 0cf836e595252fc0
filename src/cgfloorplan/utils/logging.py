"""
Package logger. Library modules log through children of ``cgfloorplan``;
only entry points install handlers.
"""

from __future__ import annotations

import logging
from typing import Union

logger = logging.getLogger("cgfloorplan")

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level."""
    for handler in list(logger.handlers):
        if getattr(handler, "_cgfloorplan", False):
            logger.removeHandler(handler)

    # Binds the current sys.stderr.
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._cgfloorplan = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
