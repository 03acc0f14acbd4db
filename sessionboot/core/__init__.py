"""Core module exports."""

from sessionboot.core.options import LockState, SessionConfig, SessionOptions
from sessionboot.core.override import run_local_override
from sessionboot.core.shutdown import (
    HookStatus,
    ShutdownReport,
    SnapshotStatus,
    shutdown_session,
)
from sessionboot.core.startup import init_session

__all__ = [
    "init_session",
    "shutdown_session",
    "run_local_override",
    "SessionConfig",
    "SessionOptions",
    "LockState",
    "ShutdownReport",
    "SnapshotStatus",
    "HookStatus",
]
