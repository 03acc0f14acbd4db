"""Execution of the user's local override script."""

import runpy
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Callable, Optional

from sessionboot.utils.constants import EXIT_HOOK_NAME
from sessionboot.utils.exceptions import OverrideScriptError
from sessionboot.utils.logging_config import get_logger

logger = get_logger(__name__)


def run_local_override(
    path: Path, options: MutableMapping[str, Any]
) -> Optional[Callable[[], Any]]:
    """Execute a local override script against the option table.

    The script sees the table as ``options``. A callable it defines under
    the name ``on_exit`` is returned so it can run at shutdown.

    Args:
        path: Override script to execute
        options: Session option table the script may update

    Returns:
        The script's exit hook, or None

    Raises:
        OverrideScriptError: If the script fails to compile or raises
    """
    logger.debug(f"Running local override {path}")
    try:
        namespace = runpy.run_path(
            str(path), init_globals={"options": options}, run_name="__sessionrc__"
        )
    except Exception as e:
        raise OverrideScriptError(
            f"{type(e).__name__}: {e}", path=str(path)
        ) from e

    hook = namespace.get(EXIT_HOOK_NAME)
    if hook is not None and not callable(hook):
        logger.warning(f"Ignoring non-callable '{EXIT_HOOK_NAME}' defined in {path}")
        return None
    return hook
