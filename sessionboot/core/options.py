"""Session option table and the frozen configuration built from it."""

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Optional

from sessionboot.config.settings import BootstrapSettings
from sessionboot.config.validators import (
    validate_decimal_mark,
    validate_positive_integer,
    validate_index_url,
)
from sessionboot.managers.base import BaseLockManager
from sessionboot.utils.constants import (
    DEFAULT_CONTRASTS,
    DEFAULT_DECIMAL_MARK,
    DEFAULT_DISPLAY_DIGITS,
    DEFAULT_MISSING_VALUE_ACTION,
    OptionKey,
)
from sessionboot.utils.path_utils import ProjectLayout


class LockState(str, Enum):
    """Outcome of the startup lockfile step."""

    HOST = "host"
    PREINSTALLED = "preinstalled"
    INITIALIZED = "initialized"
    INIT_SKIPPED = "init_skipped"
    INIT_FAILED = "init_failed"
    UNMANAGED = "unmanaged"


class SessionOptions(MutableMapping):
    """Mutable option table used while the session is being set up.

    Activation and override scripts receive this object as ``options``
    and may write to it. It is frozen into ``SessionConfig.options`` once
    startup finishes.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: dict[str, Any] = dict(initial or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SessionOptions({self._values!r})"

    def set_repository_url(self, url: str) -> None:
        self[OptionKey.REPOSITORY_URL] = validate_index_url(url, field_name="repository_url")

    def set_install_workers(self, workers: int) -> None:
        self[OptionKey.INSTALL_WORKERS] = validate_positive_integer(
            workers, field_name="install_workers"
        )

    def apply_reproducibility_defaults(self) -> None:
        """Pin the numeric and formatting options that affect results."""
        self[OptionKey.COERCE_STRINGS_TO_CATEGORIES] = False
        self[OptionKey.CONTRASTS] = DEFAULT_CONTRASTS
        self[OptionKey.MISSING_VALUE_ACTION] = DEFAULT_MISSING_VALUE_ACTION
        self[OptionKey.DISPLAY_DIGITS] = DEFAULT_DISPLAY_DIGITS
        self[OptionKey.DECIMAL_MARK] = validate_decimal_mark(DEFAULT_DECIMAL_MARK)

    def freeze(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._values))


@dataclass(frozen=True)
class SessionConfig:
    """Read-only result of session startup, passed to shutdown."""

    settings: BootstrapSettings
    layout: ProjectLayout
    options: Mapping[str, Any]
    lock_state: LockState
    cache_dir: Optional[Path] = None
    manager: Optional[BaseLockManager] = None
    exit_hook: Optional[Callable[[], Any]] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def in_container(self) -> bool:
        return self.settings.in_container

    @property
    def repository_url(self) -> Optional[str]:
        return self.options.get(OptionKey.REPOSITORY_URL)

    @property
    def install_workers(self) -> Optional[int]:
        return self.options.get(OptionKey.INSTALL_WORKERS)
