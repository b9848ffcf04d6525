"""Logging setup for the command line."""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = 'duplicate_classes'
ENV_LOG_LEVEL = 'DUPLICATE_CLASSES_LOG_LEVEL'


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _resolve_level() -> int:
    raw = os.environ.get(ENV_LOG_LEVEL, '').strip().upper()
    if raw:
        level = getattr(logging, raw, None)
        if isinstance(level, int):
            return level
    return logging.INFO


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> logging.Logger:
    """Route duplicate_classes.* records to stderr. --verbose/--quiet win over the env."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _resolve_level()
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if not any(isinstance(h, _StderrHandler) for h in root.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)
    return root
