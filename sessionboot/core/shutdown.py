"""Session shutdown: exit-time lockfile snapshot and the user exit hook."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from sessionboot.config.settings import BootstrapSettings
from sessionboot.core.options import SessionConfig
from sessionboot.utils.exceptions import ExitHookError
from sessionboot.utils.logging_config import get_logger

logger = get_logger(__name__)


class SnapshotStatus(str, Enum):
    """Outcome of the exit-time snapshot."""

    SKIPPED_CI = "skipped_ci"
    SKIPPED_HOST = "skipped_host"
    SKIPPED_DISABLED = "skipped_disabled"
    SKIPPED_MISSING = "skipped_missing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class HookStatus(str, Enum):
    """Outcome of the user exit hook."""

    NONE = "none"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ShutdownReport:
    """What happened during shutdown."""

    snapshot: SnapshotStatus
    hook: HookStatus = HookStatus.NONE
    warnings: list[str] = field(default_factory=list)

    @property
    def snapshot_attempted(self) -> bool:
        return self.snapshot in (SnapshotStatus.SUCCEEDED, SnapshotStatus.FAILED)


def shutdown_session(
    config: SessionConfig,
    environ: Optional[Mapping[str, str]] = None,
    on_exit: Optional[Callable[[], Any]] = None,
) -> ShutdownReport:
    """Snapshot dependencies if appropriate, then run the exit hook.

    The environment is read again here, so CI and AUTO_SNAPSHOT changes
    made during the session are honoured. Never raises for a failed
    snapshot or hook.

    Args:
        config: Configuration returned by ``init_session``
        environ: Environment to read (defaults to ``os.environ``)
        on_exit: Exit hook; overrides one captured from the override script

    Returns:
        ShutdownReport describing both steps
    """
    settings, warnings = BootstrapSettings.from_environ_or_defaults(
        os.environ if environ is None else environ
    )
    for message in warnings:
        logger.warning(message)

    report = ShutdownReport(snapshot=_snapshot(config, settings, warnings), warnings=warnings)

    hook = on_exit if on_exit is not None else config.exit_hook
    if hook is not None:
        report.hook = _run_exit_hook(hook, warnings)

    return report


def _snapshot(
    config: SessionConfig, settings: BootstrapSettings, warnings: list[str]
) -> SnapshotStatus:
    layout = config.layout

    if settings.in_ci:
        logger.debug("CI detected, leaving the lockfile untouched")
        return SnapshotStatus.SKIPPED_CI

    if not config.in_container:
        logger.debug("Host session, leaving the lockfile untouched")
        return SnapshotStatus.SKIPPED_HOST

    if not settings.auto_snapshot_enabled:
        logger.debug("AUTO_SNAPSHOT disabled, skipping snapshot")
        return SnapshotStatus.SKIPPED_DISABLED

    if not (layout.lockfile.exists() and layout.activation_script.exists()):
        return SnapshotStatus.SKIPPED_MISSING

    if config.manager is None:
        logger.debug("No lock manager was set up at startup, skipping snapshot")
        return SnapshotStatus.SKIPPED_MISSING

    try:
        lockfile = config.manager.snapshot(layout, prompt=False)
    except Exception as e:
        message = f"Lockfile snapshot failed: {e}"
        logger.warning(message)
        warnings.append(message)
        return SnapshotStatus.FAILED

    logger.info(
        f"Lockfile updated: {lockfile}. Commit it with: "
        f"git add {lockfile.name} && git commit -m 'Update lockfile'"
    )
    return SnapshotStatus.SUCCEEDED


def _call_hook(hook: Callable[[], Any]) -> None:
    try:
        hook()
    except Exception as e:
        raise ExitHookError(f"{type(e).__name__}: {e}") from e


def _run_exit_hook(hook: Callable[[], Any], warnings: list[str]) -> HookStatus:
    """Run the user hook so that its failure cannot block exit."""
    try:
        _call_hook(hook)
    except ExitHookError as e:
        message = f"Error in exit hook: {e}"
        logger.warning(message)
        warnings.append(message)
        return HookStatus.FAILED
    return HookStatus.SUCCEEDED
