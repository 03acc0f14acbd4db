"""Session startup: option table, repository mirrors and lockfile activation."""

from collections.abc import MutableMapping
from pathlib import Path
from typing import Optional

from sessionboot.config.settings import BootstrapSettings
from sessionboot.core.options import LockState, SessionConfig, SessionOptions
from sessionboot.core.override import run_local_override
from sessionboot.managers.base import BaseLockManager
from sessionboot.managers.registry import create_manager
from sessionboot.utils.constants import (
    BINARY_REPOSITORY_URL,
    CACHE_PATH_ENV,
    LOCKFILE_NAME,
    PIP_CACHE_DIR_ENV,
    PIP_INDEX_URL_ENV,
    PIP_NO_INPUT_ENV,
    PIP_PREFER_BINARY_ENV,
    SOURCE_REPOSITORY_URL,
    OptionKey,
)
from sessionboot.utils.env_utils import detect_core_count, is_running_in_docker
from sessionboot.utils.exceptions import ConfigurationError, OverrideScriptError
from sessionboot.utils.logging_config import get_logger
from sessionboot.utils.path_utils import ProjectLayout, is_real_project, resolve_cache_dir

logger = get_logger(__name__)


def init_session(
    environ: MutableMapping[str, str],
    project_root: str | Path,
    manager: Optional[BaseLockManager] = None,
) -> SessionConfig:
    """Configure the session and return its frozen configuration.

    Nothing recoverable is raised: a failing manager or override script
    is logged as a warning and recorded in ``SessionConfig.warnings``.

    Args:
        environ: Process environment; pip defaults and the cache path are
            published into it
        project_root: Directory holding the lockfile and override script
        manager: Lock manager to use instead of the one named by LOCK_MANAGER

    Returns:
        SessionConfig for the rest of the session and for shutdown
    """
    settings, warnings = BootstrapSettings.from_environ_or_defaults(environ)
    for message in warnings:
        logger.warning(message)
    layout = ProjectLayout.for_root(project_root)
    options = SessionOptions()

    options[OptionKey.QUIT_SAVES_WORKSPACE] = False
    options[OptionKey.INSTALL_PROMPTS] = False
    options[OptionKey.COMPILE_FROM_SOURCE] = "never"
    options.set_install_workers(detect_core_count())

    if settings.in_container:
        options.set_repository_url(BINARY_REPOSITORY_URL)
    else:
        options.set_repository_url(SOURCE_REPOSITORY_URL)
    _publish_install_defaults(options, environ)

    cache_dir = None
    if settings.in_container:
        manager, cache_dir, lock_state = _bootstrap_lockfile(
            settings, layout, options, environ, manager, warnings
        )
    else:
        logger.info("Host session: lockfile management is disabled outside the container")
        if is_running_in_docker():
            logger.debug("/.dockerenv exists but CONTAINER_FLAG is not 'true'")
        lock_state = LockState.HOST

    options.apply_reproducibility_defaults()

    exit_hook = None
    if layout.local_override.is_file():
        try:
            exit_hook = run_local_override(layout.local_override, options)
        except OverrideScriptError as e:
            _warn(warnings, f"Error in local override {e.path}: {e}")

    _publish_install_defaults(options, environ)

    return SessionConfig(
        settings=settings,
        layout=layout,
        options=options.freeze(),
        lock_state=lock_state,
        cache_dir=cache_dir,
        manager=manager,
        exit_hook=exit_hook,
        warnings=tuple(warnings),
    )


def _bootstrap_lockfile(
    settings: BootstrapSettings,
    layout: ProjectLayout,
    options: SessionOptions,
    environ: MutableMapping[str, str],
    manager: Optional[BaseLockManager],
    warnings: list[str],
) -> tuple[Optional[BaseLockManager], Path, LockState]:
    """Container-only lockfile handling. Returns (manager, cache_dir, state)."""
    cache_dir = resolve_cache_dir(settings.cache_path_override, layout)
    for key in (CACHE_PATH_ENV, PIP_CACHE_DIR_ENV):
        if not environ.get(key, "").strip():
            environ[key] = str(cache_dir)

    if manager is None:
        try:
            manager = create_manager(settings.lock_manager, cache_dir=cache_dir)
        except ConfigurationError as e:
            _warn(warnings, f"Lockfile management disabled: {e}")
            options.set_repository_url(BINARY_REPOSITORY_URL)
            return None, cache_dir, LockState.UNMANAGED
    elif manager.cache_dir is None:
        manager.cache_dir = cache_dir

    # Activation must precede every other manager call
    if layout.activation_script.is_file():
        try:
            manager.activate(layout.activation_script, options)
        except Exception as e:
            _warn(warnings, f"Activation failed, continuing without project library: {e}")

    manager.configure(consent=True, auto_snapshot=False)

    if not layout.lockfile.exists():
        if settings.auto_init_enabled and is_real_project(layout, settings.known_project_path):
            try:
                manager.init(layout, bare=True)
                lock_state = LockState.INITIALIZED
                logger.info(f"Initialized lockfile management ({manager.name}) in {layout.root}")
            except Exception as e:
                _warn(
                    warnings,
                    f"Automatic lockfile initialization failed: {e}. Initialize the project "
                    f"manually, e.g. `python -m pip freeze > {LOCKFILE_NAME}`",
                )
                lock_state = LockState.INIT_FAILED
        else:
            logger.info("No lockfile found; automatic initialization skipped")
            lock_state = LockState.INIT_SKIPPED
    else:
        # Dependencies were restored when the image was built
        logger.debug(f"{LOCKFILE_NAME} present, skipping restore")
        lock_state = LockState.PREINSTALLED

    # Activation may have replaced the repository; ours wins
    options.set_repository_url(BINARY_REPOSITORY_URL)
    return manager, cache_dir, lock_state


def _publish_install_defaults(options: SessionOptions, environ: MutableMapping[str, str]) -> None:
    """Expose install options to downstream pip invocations."""
    repository_url = options.get(OptionKey.REPOSITORY_URL)
    if repository_url:
        environ[PIP_INDEX_URL_ENV] = str(repository_url)
    if not options.get(OptionKey.INSTALL_PROMPTS, False):
        environ[PIP_NO_INPUT_ENV] = "1"
    if options.get(OptionKey.COMPILE_FROM_SOURCE) == "never":
        environ[PIP_PREFER_BINARY_ENV] = "1"


def _warn(warnings: list[str], message: str) -> None:
    logger.warning(message)
    warnings.append(message)
