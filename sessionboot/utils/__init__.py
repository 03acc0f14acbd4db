"""Utils module exports."""

from sessionboot.utils.exceptions import (
    ActivationError,
    ConfigurationError,
    ExitHookError,
    InitializationError,
    LockManagerError,
    OverrideScriptError,
    SessionBootstrapError,
    SnapshotError,
)
from sessionboot.utils.logging_config import get_logger, setup_logging
from sessionboot.utils.path_utils import ProjectLayout

__all__ = [
    # Exceptions
    "SessionBootstrapError",
    "ConfigurationError",
    "LockManagerError",
    "ActivationError",
    "InitializationError",
    "SnapshotError",
    "OverrideScriptError",
    "ExitHookError",
    # Layout
    "ProjectLayout",
    # Logging
    "get_logger",
    "setup_logging",
]
