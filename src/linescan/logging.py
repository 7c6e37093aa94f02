"""Library logger. The package never installs handlers; applications do."""

from __future__ import annotations

import logging

LOGGER_NAME = "linescan"


def logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


__all__ = ["logger", "LOGGER_NAME"]
