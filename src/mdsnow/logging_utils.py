"""Logging setup for the mdsnow command line.

Library modules only create module loggers under the ``mdsnow`` namespace
and never attach handlers, so applications embedding the converter decide
where records go. The CLI calls :func:`configure_logging` once at startup to
send the package's records to stderr, leaving stdout to converted output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mdsnow"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a second configure call replaces them
_HANDLER_FLAG = "_mdsnow_handler"


def resolve_log_level(log_level: int | str = "WARNING", verbose: bool = False, trace: bool = False) -> int:
    """Resolve the effective level from the CLI logging flags.

    ``trace`` wins over ``verbose``, which only applies while the level is
    still the WARNING default.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name
    """
    if trace:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    if verbose and log_level.upper() == "WARNING":
        return logging.DEBUG

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file receiving the same records.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured ``mdsnow`` logger.

    """
    resolved_level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    for handler in [h for h in package_logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.info("Logging to file: %s", log_file)

    return package_logger
