"""Logger setup shared by the simulator, library and UI."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "codimoji.log"


def setup_logger(
    name: str,
    log_level: str | int | None = None,
    enable_file_handler: bool = False,
) -> logging.Logger:
    """Create and configure a :class:`logging.Logger` instance.

    Parameters
    ----------
    name:
        Name of the logger to configure.
    log_level:
        Optional log level. If ``None`` the ``LOG_LEVEL`` environment variable
        is consulted, defaulting to ``"WARNING"`` so the terminal UI stays
        clean unless asked otherwise.
    enable_file_handler:
        Whether to attach a :class:`logging.FileHandler` writing to
        ``codimoji.log``.
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING")

    if isinstance(log_level, str):
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = log_level

    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    ):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if enable_file_handler and not any(
        isinstance(h, logging.FileHandler) for h in logger.handlers
    ):
        file_handler = logging.FileHandler(LOG_FILE_NAME)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
