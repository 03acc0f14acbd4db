"""Entry point wiring startup and shutdown into the interpreter lifecycle.

Typical use from a ``PYTHONSTARTUP`` file or ``sitecustomize``::

    import sessionboot
    sessionboot.install()
"""

import atexit
import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Callable, Optional

from sessionboot.config import BootstrapSettings
from sessionboot.core import SessionConfig, init_session, shutdown_session
from sessionboot.utils import get_logger, setup_logging

logger = get_logger(__name__)

_installed_config: Optional[SessionConfig] = None


def install(
    environ: Optional[MutableMapping[str, str]] = None,
    project_root: Optional[str | Path] = None,
    on_exit: Optional[Callable[[], Any]] = None,
    register: Callable[..., Any] = atexit.register,
) -> SessionConfig:
    """Bootstrap the session once and schedule the shutdown phase.

    Args:
        environ: Environment to read and publish into (defaults to ``os.environ``)
        project_root: Project directory (defaults to the working directory)
        on_exit: Hook to run after the exit-time snapshot
        register: Exit-callback registrar, ``atexit.register`` by default

    Returns:
        The session configuration; repeated calls return the first one
    """
    global _installed_config

    if _installed_config is not None:
        return _installed_config

    if environ is None:
        environ = os.environ
    if project_root is None:
        project_root = Path.cwd()

    # Invalid values are reported by init_session
    settings, _ = BootstrapSettings.from_environ_or_defaults(environ)

    setup_logging(
        level=settings.log_level,
        use_colors=settings.log_use_colors,
        json_format=settings.log_json_format,
        log_file=settings.log_file,
    )

    config = init_session(environ, project_root)
    register(shutdown_session, config, environ, on_exit)
    logger.debug(f"Session bootstrapped ({config.lock_state.value}), shutdown hook registered")

    _installed_config = config
    return config


def reset() -> None:
    """Forget the installed session so ``install`` runs again."""
    global _installed_config
    _installed_config = None
