"""Centralized logging configuration for the application."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_DEV_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
_PROD_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'


def setup_logging(
    level: str = "INFO",
    environment: str = "development",
    stream: TextIO | None = None,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Root log level (e.g. "DEBUG", "INFO", "WARNING").
        environment: One of "development", "staging", "production".
            Dev uses human-readable format; others use structured JSON-like format.
        stream: Destination for log records. Defaults to ``sys.stderr`` so
            that log output never mixes with command output on stdout.
    """
    fmt = _DEV_FORMAT if environment == "development" else _PROD_FORMAT

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Remove existing handlers to avoid duplicate output
    root.handlers.clear()
    root.addHandler(handler)
