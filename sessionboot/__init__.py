"""Session bootstrapper package."""

__version__ = "0.1.0"
__author__ = "sessionboot"
__description__ = (
    "Startup and exit hooks for analysis sessions: repository mirrors, "
    "reproducibility options and lockfile snapshots"
)

from sessionboot.core import init_session, shutdown_session
from sessionboot.main import install

__all__ = ["init_session", "shutdown_session", "install"]
