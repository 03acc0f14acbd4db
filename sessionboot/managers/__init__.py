"""Lock manager exports."""

from sessionboot.managers.base import BaseLockManager
from sessionboot.managers.pip_lock import PipLockManager
from sessionboot.managers.registry import (
    create_manager,
    list_managers,
    register_manager,
    unregister_manager,
)

__all__ = [
    "BaseLockManager",
    "PipLockManager",
    # Registry
    "register_manager",
    "create_manager",
    "list_managers",
    "unregister_manager",
]
