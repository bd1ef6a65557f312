#!/usr/bin/env python3
"""
Passphrase Generator - Logger Module
Logging setup and user-facing error messages.

Generated passphrases and individual dice rolls are never logged. Log
records carry sizes, counts and entropy figures only.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "passgen"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

USER_FRIENDLY_MESSAGES = {
    "InvalidTarget": "The requested strength cannot be met. Use a positive --bits value or a --length of at least 1, at most 65535 units.",
    "InvalidDiceSpec": "Dice must have between 2 and 144 sides.",
    "InvalidRange": "Cannot sample from fewer than 2 values.",
    "EmptyDictionary": "The dictionary needs at least 2 distinct entries. Check the word list file.",
    "EntropySourceFailure": "The operating system random number generator is unavailable. No passphrase was generated.",
    "DictionaryLoadError": "Could not read the word list. Check that the file exists, is UTF-8 and is not too large.",
    "ConfigurationError": "Invalid option. Run with --help to see the accepted values.",
}


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """Configure the package logger

    Args:
        level: logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: optional path, appended to in UTF-8
        stream: console stream, stderr by default so stdout stays clean

    Returns:
        the configured package logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_path), encoding="utf-8", mode="a")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            # console logging still works
            logger.warning(f"Cannot open log file {log_file}: {e}")

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def close_logging() -> None:
    """Flush and detach every handler of the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)


def get_user_friendly_message(error: Exception) -> str:
    """Combine the generic advice for an error type with its detail."""
    base_message = USER_FRIENDLY_MESSAGES.get(
        type(error).__name__,
        "Unexpected error. Re-run with --verbose for details.",
    )
    detail = getattr(error, "message", None) or str(error)
    return f"{base_message}\n  Details: {detail}"
