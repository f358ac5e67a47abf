"""Logger setup shared by the CLI and the pipeline stages."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "promptgen"
CONSOLE_FORMAT = "[promptgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``promptgen.<name>``, or the root promptgen logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route promptgen records to stderr and, when given, to ``log_file``.

    The file sink always records DEBUG so a failed run can be inspected
    afterwards without re-running with ``--verbose``.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False

    # main() may run several times in one process (tests); start clean.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT))

    if log_file is None:
        logger.setLevel(console_level)
        return logger

    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.addHandler(
        _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)
    )
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
