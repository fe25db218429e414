"""Logging configuration for intent collection."""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

PACKAGE_LOGGER = "intent_context"
PROVIDER_LOGGER = "intent_context.providers"


def default_log_file() -> Path:
    return Path.home() / ".intent_context" / "logs" / "intent.log"


def setup_logging(
    debug: bool = False,
    log_file: Optional[Path] = None,
    quiet_providers: bool = True
) -> logging.Logger:
    """
    Configure the package logger.

    Console output goes to stderr so stdout stays free for the rendered
    prompt. Provider chatter (session picks, registry trial order) only
    reaches the console at WARNING unless debug is on; the rotating file
    always gets everything.

    Args:
        debug: Enable debug logging on the console
        log_file: Log file path (defaults to ~/.intent_context/logs/intent.log)
        quiet_providers: Raise provider console threshold to WARNING

    Returns:
        The configured package logger
    """
    console_level = logging.DEBUG if debug else logging.INFO

    if log_file is None:
        log_file = default_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    if quiet_providers and not debug:
        console_handler.addFilter(_ProviderThreshold(logging.WARNING))

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))

    package_logger.addHandler(console_handler)
    package_logger.addHandler(file_handler)

    package_logger.debug(f"Logging initialized (console={logging.getLevelName(console_level)}, file={log_file})")
    return package_logger


class _ProviderThreshold(logging.Filter):
    """Drop provider records below a level; pass everything else."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == PROVIDER_LOGGER or record.name.startswith(PROVIDER_LOGGER + "."):
            return record.levelno >= self.level
        return True
