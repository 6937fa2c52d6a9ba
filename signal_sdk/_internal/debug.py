"""Opt-in debug logging for the SDK.

Each debug-enabled client gets its own stderr logger. The logger is created
directly rather than through logging.getLogger(), so it is never registered
with the logging manager and turning it on never changes the shared
"signal_sdk" logger that applications configure.
"""

import logging
import sys

DEBUG_LOGGER_NAME = "signal_sdk.debug"
DEBUG_PREFIX = "[signal-sdk]"


def create_debug_logger() -> logging.Logger:
    """Return a private logger that writes DEBUG records to stderr."""
    debug_logger = logging.Logger(DEBUG_LOGGER_NAME, logging.DEBUG)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{DEBUG_PREFIX} %(message)s"))
    debug_logger.addHandler(handler)
    return debug_logger


def close_debug_logger(debug_logger: logging.Logger) -> None:
    """Detach and close the handlers of a logger from create_debug_logger()."""
    for handler in list(debug_logger.handlers):
        debug_logger.removeHandler(handler)
        handler.close()
