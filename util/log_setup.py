"""Logging configuration for the preferences editor."""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "prefs_editor"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``prefs_editor`` logger tree.

    The TUI owns the terminal, so a log file replaces the console handler
    instead of adding to it. Console output goes to stderr.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s")
        )
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        if numeric_level <= logging.DEBUG:
            console_handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
            )
        else:
            console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root_logger.addHandler(console_handler)

    # prompt_toolkit runs on asyncio, which is noisy at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    return root_logger


__all__ = ["setup_logging", "ROOT_LOGGER"]
