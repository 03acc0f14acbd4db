"""Validators shared by the settings model and the session option table."""

from typing import Any
from urllib.parse import urlparse

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_index_url(url: str, field_name: str = "url") -> str:
    """Validate a package index URL.

    Args:
        url: Index URL, e.g. ``https://pypi.org/simple``
        field_name: Name used in error messages

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        ValueError: If the URL is empty, not http(s), or has no host
    """
    if not url or not url.strip():
        raise ValueError(f"{field_name} is required")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"{field_name} must be an http(s) index URL, got {url!r}")
    if not parsed.netloc:
        raise ValueError(f"{field_name} has no host: {url!r}")

    return url


def validate_positive_integer(value: Any, field_name: str = "value") -> int:
    """Coerce ``value`` to an int of at least 1. Booleans are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a whole number, not a boolean")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a whole number, got {value!r}") from None
    if number < 1:
        raise ValueError(f"{field_name} must be at least 1, got {number}")
    return number


def validate_log_level(level: str) -> str:
    """Upper-case ``level`` and check it names a standard logging level."""
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {normalized} (expected one of {', '.join(LOG_LEVELS)})"
        )
    return normalized


def validate_non_empty_string(value: str, field_name: str = "value") -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} cannot be empty")
    return stripped


def validate_decimal_mark(value: str) -> str:
    """Validate a single-character decimal mark."""
    if not isinstance(value, str) or len(value) != 1 or value.isalnum():
        raise ValueError(f"Invalid decimal mark: {value!r}")
    return value
