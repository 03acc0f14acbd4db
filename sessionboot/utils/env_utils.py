"""Environment and system utilities."""

import os


def is_running_in_docker(marker: str = "/.dockerenv") -> bool:
    """Check if running inside a Docker container."""
    return os.path.exists(marker)


def detect_core_count() -> int:
    """Number of logical cores on the host, at least 1."""
    return os.cpu_count() or 1
