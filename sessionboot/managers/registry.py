"""Lock manager registry.

``LOCK_MANAGER`` selects a manager by name at startup. Names are
case-insensitive, so ``Pip`` and ``pip`` refer to the same manager.
"""

from typing import Callable, TypeVar

from sessionboot.managers.base import BaseLockManager
from sessionboot.utils.exceptions import ConfigurationError
from sessionboot.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseLockManager)

_manager_registry: dict[str, type[BaseLockManager]] = {}


def _normalize(name: str) -> str:
    key = name.strip().casefold()
    if not key:
        raise ConfigurationError("Lock manager name cannot be empty")
    return key


def register_manager(name: str) -> Callable[[type[T]], type[T]]:
    """Class decorator registering a lock manager under ``name``.

    Example:
        @register_manager("pip")
        class PipLockManager(BaseLockManager):
            ...
    """
    key = _normalize(name)

    def decorator(cls: type[T]) -> type[T]:
        previous = _manager_registry.get(key)
        if previous is not None and previous is not cls:
            logger.warning(
                f"Lock manager '{key}' already registered by {previous.__name__}, "
                f"replacing with {cls.__name__}"
            )
        _manager_registry[key] = cls
        return cls

    return decorator


def unregister_manager(name: str) -> bool:
    """Remove a manager; False if it was not registered."""
    return _manager_registry.pop(_normalize(name), None) is not None


def list_managers() -> list[str]:
    return sorted(_manager_registry)


def create_manager(name: str, **kwargs) -> BaseLockManager:
    """Instantiate the manager registered under ``name``.

    Raises:
        ConfigurationError: If no manager is registered under that name
    """
    manager_class = _manager_registry.get(_normalize(name))
    if manager_class is None:
        raise ConfigurationError(
            f"Lock manager '{name}' is not registered (available: {', '.join(list_managers())})"
        )
    return manager_class(**kwargs)
