"""
Logging Configuration

Configures logging for the exporter. Output goes to stderr so that
stdout only carries the final result line of the CLI.

openpyxl reports unsupported workbook features (data validation,
conditional formatting extensions) through the ``warnings`` module;
those are captured and routed through the same handler.
"""

import logging
import sys

LOGGER_NAME = "yml_export"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging for the exporter.

    Args:
        verbose: If True, set level to DEBUG (skipped rows, defaulted cells)
        quiet: If True, set level to WARNING

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    # Library warnings (openpyxl) are only interesting in verbose runs
    logging.captureWarnings(True)
    warnings_logger = logging.getLogger("py.warnings")
    warnings_logger.handlers.clear()
    warnings_logger.addHandler(handler)
    warnings_logger.setLevel(logging.WARNING if verbose else logging.ERROR)
    warnings_logger.propagate = False

    return logger
