"""Structured logging configuration with color-coded component prefixes."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Color codes for terminal output
COLORS = {
    "SESSION": "\033[37m",  # White
    "STARTUP": "\033[36m",  # Cyan
    "SHUTDOWN": "\033[34m",  # Blue
    "LOCKFILE": "\033[32m",  # Green
    "CONFIG": "\033[90m",  # Gray
    "ERROR": "\033[31m",  # Red
    "WARNING": "\033[33m",  # Yellow
    "RESET": "\033[0m",  # Reset
}

# Logger name prefixes mapped to the component shown in the prefix
PACKAGE_NAMES = {
    "sessionboot": "SESSION",
    "sessionboot.main": "SESSION",
    "sessionboot.config": "CONFIG",
    "sessionboot.managers": "LOCKFILE",
    "sessionboot.core.startup": "STARTUP",
    "sessionboot.core.override": "STARTUP",
    "sessionboot.core.shutdown": "SHUTDOWN",
}


def get_package_name(logger_name: str) -> str:
    """Extract component name from logger name."""
    if logger_name in PACKAGE_NAMES:
        return PACKAGE_NAMES[logger_name]

    # Longest matching prefix wins
    for prefix in sorted(PACKAGE_NAMES, key=len, reverse=True):
        if logger_name.startswith(prefix + "."):
            return PACKAGE_NAMES[prefix]

    return "SESSION"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds color-coded component prefixes."""

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt or "%(message)s")
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        package = get_package_name(record.name)

        color = COLORS.get(package, COLORS["SESSION"])
        reset = COLORS["RESET"] if self.use_colors else ""

        if self.use_colors:
            prefix = f"{color}[{package}]{reset}"
        else:
            prefix = f"[{package}]"

        record.message = record.getMessage()

        if record.levelno >= logging.ERROR:
            level_name = f"{COLORS['ERROR']}[ERROR]{reset}" if self.use_colors else "[ERROR]"
            return f"{prefix} {level_name} {record.message}"
        if record.levelno >= logging.WARNING:
            level_name = f"{COLORS['WARNING']}[WARN]{reset}" if self.use_colors else "[WARN]"
            return f"{prefix} {level_name} {record.message}"
        return f"{prefix} {record.message}"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "package": get_package_name(record.name),
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data)


_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    use_colors: bool = True,
    json_format: bool = False,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Setup logging for the ``sessionboot`` logger tree.

    Only the package logger is configured: the interactive session belongs
    to the user, so the root logger is left alone.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        use_colors: Whether to use colored output
        json_format: Whether to output JSON format
        log_file: Optional file path for logging
        force: If True, reconfigure even if already initialized
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return

    numeric_level = getattr(logging, level.upper())
    package_logger = logging.getLogger("sessionboot")
    package_logger.setLevel(numeric_level)
    # Records go to the handlers below only, never to the user's root handlers
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    if json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))

    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    _logging_initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
