"""Logging setup shared by the search engine, loaders and CLI.

Every module obtains its logger through :func:`get_logger`, which hangs it
under the ``gridpaths`` root logger. The root carries one stdout handler;
child loggers stay at NOTSET and follow the root level. Search internals log
at DEBUG (search bounds and totals, skipped duplicates), sessions and the
CLI at INFO.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "gridpaths"

#: Default record layout: timestamp, short module path, level, message.
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

#: Level used when neither ``--verbose`` nor ``--quiet`` is given.
DEFAULT_LEVEL = logging.INFO

_configured = False


def setup_root_logger(
    level: int = DEFAULT_LEVEL,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single gridpaths handler to the root ``gridpaths`` logger.

    Later calls do nothing until :func:`reset_logging` runs.

    Args:
        level: Root level, INFO unless given.
        format_string: Record format, ``DEFAULT_FORMAT`` unless given.
        handler: Handler to install, a stdout StreamHandler unless given.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog listens on the stdlib root logger
    root.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name`` under the gridpaths root (level NOTSET)."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the gridpaths root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI's ``--verbose`` / ``--quiet`` flags to a log level.

    ``verbose`` wins when both are set: DEBUG, else WARNING for ``quiet``,
    else ``DEFAULT_LEVEL``.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return DEFAULT_LEVEL


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Set the global level from CLI flags and return it."""
    level = level_for_flags(verbose, quiet)
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Log search internals (expansions, duplicates skipped)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to ``DEFAULT_LEVEL``."""
    set_global_log_level(DEFAULT_LEVEL)


def reset_logging() -> None:
    """Drop the gridpaths handler and level (used by tests)."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
