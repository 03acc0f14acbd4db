"""Config module exports."""

from sessionboot.config.settings import BootstrapSettings
from sessionboot.config.validators import (
    validate_decimal_mark,
    validate_log_level,
    validate_non_empty_string,
    validate_positive_integer,
    validate_index_url,
)

__all__ = [
    "BootstrapSettings",
    # Validators
    "validate_index_url",
    "validate_positive_integer",
    "validate_log_level",
    "validate_non_empty_string",
    "validate_decimal_mark",
]
