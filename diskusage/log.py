"""Diagnostic stream for the command-line tool.

Warnings and errors go to stderr with a short label, keeping stdout for the
report only.
"""
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "diskusage"


class LabelFormatter(logging.Formatter):
    """Prefix each record with a human label for its level."""

    LABELS = {
        logging.DEBUG: "Debug",
        logging.INFO: "Info",
        logging.WARNING: "Warning",
        logging.ERROR: "Error",
        logging.CRITICAL: "Error",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        label = self.LABELS.get(record.levelno)
        if label:
            message = f"{label}: {message}"
        return message


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(LabelFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
