"""Coloured log line formatter."""

from __future__ import annotations

import logging

COLOR_PANIC = "\x1b[1;31m"
COLOR_FATAL = "\x1b[1;31m"
COLOR_ERROR = "\x1b[31m"
COLOR_WARN = "\x1b[33m"
COLOR_INFO = "\x1b[37m"
COLOR_DEBUG = "\x1b[32m"
COLOR_TRACE = "\x1b[36m"
COLOR_RESET = "\x1b[0m"

_COLORS = {
    logging.CRITICAL: COLOR_FATAL,
    logging.ERROR: COLOR_ERROR,
    logging.WARNING: COLOR_WARN,
    logging.INFO: COLOR_INFO,
    logging.DEBUG: COLOR_DEBUG,
}


def level_color(levelno: int) -> str:
    """Return the terminal colour code for a logging level."""
    if levelno in _COLORS:
        return _COLORS[levelno]
    if 0 < levelno < logging.DEBUG:
        return COLOR_TRACE
    return COLOR_INFO


class LogFormat(logging.Formatter):
    """Formats records as a coloured ``[LEVEL] message`` line."""

    def format(self, record: logging.LogRecord) -> str:
        return "".join(
            (
                level_color(record.levelno),
                "[",
                record.levelname.upper(),
                "] ",
                record.getMessage(),
                " \n",
                COLOR_RESET,
            )
        )