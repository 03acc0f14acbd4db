"""Shared fixtures: a recording lock manager and project roots."""

from pathlib import Path

import pytest

from sessionboot.managers.base import BaseLockManager
from sessionboot.utils.exceptions import ActivationError, InitializationError, SnapshotError
from sessionboot.utils.path_utils import ProjectLayout

ACTIVATION_MIRROR = "https://mirror.example.com/from-lockfile"


class RecordingLockManager(BaseLockManager):
    """Lock manager that records calls instead of running pip."""

    def __init__(self, cache_dir=None, fail_on=()):
        super().__init__(cache_dir=cache_dir)
        self.calls = []
        self.fail_on = set(fail_on)

    def activate(self, script, options):
        self.calls.append("activate")
        if "activate" in self.fail_on:
            raise ActivationError("activation exploded", manager=self.name)
        # Mimic an activation script that restores the lockfile's repository
        options["repository_url"] = ACTIVATION_MIRROR
        self.activated = True

    def configure(self, consent=True, auto_snapshot=False):
        self.calls.append("configure")
        super().configure(consent=consent, auto_snapshot=auto_snapshot)

    def init(self, layout, bare=True):
        self.calls.append("init")
        if "init" in self.fail_on:
            raise InitializationError("pip is unreachable", manager=self.name)

    def snapshot(self, layout, prompt=False):
        self.calls.append("snapshot")
        if "snapshot" in self.fail_on:
            raise SnapshotError("disk full", manager=self.name)
        layout.lockfile.write_text("snap\n", encoding="utf-8")
        return layout.lockfile


@pytest.fixture
def manager():
    return RecordingLockManager()


@pytest.fixture
def project(tmp_path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def layout(project) -> ProjectLayout:
    return ProjectLayout.for_root(project)


@pytest.fixture
def container_env(tmp_path) -> dict:
    """Container environment whose known project path does not exist."""
    return {
        "CONTAINER_FLAG": "true",
        "KNOWN_PROJECT_PATH": str(tmp_path / "no-such-project"),
    }


@pytest.fixture
def host_env(tmp_path) -> dict:
    return {"KNOWN_PROJECT_PATH": str(tmp_path / "no-such-project")}


def write_activation_script(layout: ProjectLayout, body: str = "") -> None:
    layout.activation_script.parent.mkdir(parents=True, exist_ok=True)
    layout.activation_script.write_text(body, encoding="utf-8")
