import atexit
import logging
import logging.handlers
import os
from pathlib import (
    Path,
)
import queue
import sys
import threading
from typing import (
    Any,
)

ROOT_LOGGER_NAME = "ipfskit"

DEBUG_ENV_VAR = "IPFSKIT_DEBUG"
DEBUG_FILE_ENV_VAR = "IPFSKIT_DEBUG_FILE"

# Create a log queue
log_queue: "queue.Queue[Any]" = queue.Queue()

# Store the current listener to stop it on exit
_current_listener: logging.handlers.QueueListener | None = None

# Event to track when the listener is ready
_listener_ready = threading.Event()

# Default format for log messages
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_debug_modules(debug_str: str) -> dict[str, int]:
    """
    Parse the IPFSKIT_DEBUG environment variable into module log levels.

    Format examples:
    - "DEBUG"  # All modules at DEBUG level
    - "ipfskit.merkle.parser:DEBUG"  # Only the parser at DEBUG
    - "merkle.parser:DEBUG"  # Same as above, ipfskit prefix is optional
    - "merkle:DEBUG,codec:INFO"  # Multiple modules
    """
    module_levels: dict[str, int] = {}

    if not debug_str or debug_str.isspace():
        return module_levels

    # A plain level with no module applies to everything
    if ":" not in debug_str and debug_str.strip().upper() in logging._nameToLevel:
        return {"": getattr(logging, debug_str.strip().upper())}

    for part in debug_str.split(","):
        if part.count(":") != 1:
            continue

        module, level = part.split(":")
        level = level.strip().upper()

        if level not in logging._nameToLevel:
            continue

        module = module.strip()
        if module.startswith(f"{ROOT_LOGGER_NAME}."):
            module = module[len(ROOT_LOGGER_NAME) + 1 :]
        module = module.replace("/", ".").strip(".")

        module_levels[module] = getattr(logging, level)

    return module_levels


def _disable_logging() -> None:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    root_logger.propagate = False
    _listener_ready.set()


def setup_logging() -> None:
    """
    Set up logging configuration based on environment variables.

    Environment Variables:
        IPFSKIT_DEBUG
            Controls logging levels. Examples:
            - "DEBUG" (all modules at DEBUG level)
            - "ipfskit.merkle.parser:DEBUG" (only the parser at DEBUG)
            - "merkle.parser:DEBUG" (same as above, ipfskit prefix optional)
            - "merkle:DEBUG,codec:INFO" (multiple modules)

        IPFSKIT_DEBUG_FILE
            If set, log records are also written to this file. Records always
            go to stderr once IPFSKIT_DEBUG is set.

    When IPFSKIT_DEBUG is unset or holds no valid level, the ``ipfskit``
    logger is left at WARNING with no handlers and does not propagate.
    """
    global _current_listener

    _listener_ready.clear()

    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None

    module_levels = _parse_debug_modules(os.environ.get(DEBUG_ENV_VAR, ""))
    if not module_levels:
        _disable_logging()
        return

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    handlers: list[logging.StreamHandler[Any] | logging.FileHandler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    log_file = os.environ.get(DEBUG_FILE_ENV_VAR)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    queue_handler = logging.handlers.QueueHandler(log_queue)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(queue_handler)
    root_logger.propagate = False
    root_logger.setLevel(module_levels.get("", logging.INFO))

    for module, level in module_levels.items():
        if module:
            logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{module}")
            logger.handlers.clear()
            logger.addHandler(queue_handler)
            logger.setLevel(level)
            logger.propagate = False  # Prevent message duplication

    # Start the listener after all loggers are configured
    _current_listener = logging.handlers.QueueListener(
        log_queue, *handlers, respect_handler_level=True
    )
    _current_listener.start()

    _listener_ready.set()


@atexit.register
def cleanup_logging() -> None:
    """Clean up logging resources on exit."""
    global _current_listener
    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None
