"""pip-backed lock manager.

Keeps a project-local library under ``lockenv/library`` and records the
installed distributions with ``pip freeze``.
"""

import os
import platform
import runpy
import subprocess
import sys
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Callable, Optional

from sessionboot.managers.base import BaseLockManager
from sessionboot.managers.registry import register_manager
from sessionboot.utils.constants import (
    LIBRARY_DIR_NAME,
    PIP_CACHE_DIR_ENV,
    PIP_FREEZE_TIMEOUT_SECONDS,
    PIP_NO_INPUT_ENV,
)
from sessionboot.utils.exceptions import ActivationError, InitializationError, SnapshotError
from sessionboot.utils.logging_config import get_logger
from sessionboot.utils.path_utils import ProjectLayout

logger = get_logger(__name__)

ACTIVATION_TEMPLATE = '''"""Put the project-local library first on sys.path."""

import sys
from pathlib import Path

_library = Path(__file__).resolve().parent / "library"
if _library.is_dir() and str(_library) not in sys.path:
    sys.path.insert(0, str(_library))
'''


@register_manager("pip")
class PipLockManager(BaseLockManager):
    """Lock manager that snapshots with ``pip freeze``.

    Attributes:
        python: Interpreter used to run pip
        timeout: Seconds allowed for each pip invocation
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        python: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        timeout: int = PIP_FREEZE_TIMEOUT_SECONDS,
    ):
        """Initialize pip lock manager.

        Args:
            cache_dir: pip cache directory passed to every invocation
            python: Interpreter path (defaults to the running one)
            runner: Callable with the ``subprocess.run`` signature
            timeout: Seconds allowed for each pip invocation
        """
        super().__init__(cache_dir=cache_dir)
        self.python = python or sys.executable
        self.timeout = timeout
        self._runner = runner

    def activate(self, script: Path, options: MutableMapping[str, Any]) -> None:
        library = script.parent / LIBRARY_DIR_NAME
        logger.debug(f"Running activation script {script}")
        try:
            runpy.run_path(
                str(script),
                init_globals={"options": options, "library_path": str(library)},
                run_name="__activate__",
            )
        except Exception as e:
            raise ActivationError(
                f"Activation script {script} failed: {e}", manager=self.name
            ) from e
        self.activated = True

    def init(self, layout: ProjectLayout, bare: bool = True) -> None:
        logger.info(f"Initializing lockfile management in {layout.root}")
        try:
            layout.library_dir.mkdir(parents=True, exist_ok=True)
            if self.cache_dir is not None:
                Path(self.cache_dir).mkdir(parents=True, exist_ok=True)
            if not layout.activation_script.exists():
                layout.activation_script.write_text(ACTIVATION_TEMPLATE, encoding="utf-8")
        except OSError as e:
            raise InitializationError(
                f"Could not create {layout.manager_dir}: {e}", manager=self.name
            ) from e

        if not bare:
            self._run_pip(
                ["install", "--target", str(layout.library_dir), str(layout.root)],
                error_class=InitializationError,
            )

        # Implicit snapshot: record whatever is already installed
        try:
            self.snapshot(layout, prompt=False)
        except SnapshotError as e:
            raise InitializationError(f"Initial snapshot failed: {e}", manager=self.name) from e

    def snapshot(self, layout: ProjectLayout, prompt: bool = False) -> Path:
        args = ["freeze", "--disable-pip-version-check"]
        if layout.library_dir.is_dir() and any(layout.library_dir.iterdir()):
            args += ["--path", str(layout.library_dir)]

        result = self._run_pip(args, error_class=SnapshotError, prompt=prompt)
        # pip order keeps "# Editable install" comments next to their -e lines
        requirements = [line.rstrip() for line in result.stdout.splitlines() if line.strip()]

        lockfile = layout.lockfile
        tmp_path = lockfile.with_name(lockfile.name + ".tmp")
        try:
            tmp_path.write_text(self._render_lockfile(requirements), encoding="utf-8")
            os.replace(tmp_path, lockfile)
        except OSError as e:
            raise SnapshotError(f"Could not write {lockfile}: {e}", manager=self.name) from e

        logger.debug(f"Wrote {len(requirements)} requirements to {lockfile}")
        return lockfile

    def _render_lockfile(self, requirements: list[str]) -> str:
        header = f"# Locked with pip freeze on Python {platform.python_version()}\n"
        return header + "".join(f"{req}\n" for req in requirements)

    def _run_pip(
        self,
        args: list[str],
        error_class: type[Exception],
        prompt: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run ``python -m pip`` and translate failures into ``error_class``."""
        env = dict(os.environ)
        if not prompt:
            env[PIP_NO_INPUT_ENV] = "1"
        if self.cache_dir is not None:
            env[PIP_CACHE_DIR_ENV] = str(self.cache_dir)

        cmd = [self.python, "-m", "pip", *args]
        try:
            return self._runner(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
                env=env,
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise error_class(f"pip {args[0]} failed: {detail}", manager=self.name) from e
        except subprocess.TimeoutExpired as e:
            raise error_class(
                f"pip {args[0]} timed out after {self.timeout}s", manager=self.name
            ) from e
        except OSError as e:
            raise error_class(f"Could not run {self.python}: {e}", manager=self.name) from e
