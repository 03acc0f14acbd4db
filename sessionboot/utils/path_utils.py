"""Path utilities for project layout and cache resolution."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sessionboot.utils.constants import (
    ACTIVATION_SCRIPT_NAME,
    CACHE_DIR_NAME,
    LIBRARY_DIR_NAME,
    LOCAL_OVERRIDE_NAME,
    LOCKFILE_NAME,
    MANAGER_DIR_NAME,
    PROJECT_DESCRIPTOR_NAME,
)


@dataclass(frozen=True)
class ProjectLayout:
    """Files and directories the bootstrapper consults under a project root."""

    root: Path

    @classmethod
    def for_root(cls, root: str | Path) -> "ProjectLayout":
        return cls(root=Path(root))

    @property
    def lockfile(self) -> Path:
        return self.root / LOCKFILE_NAME

    @property
    def manager_dir(self) -> Path:
        return self.root / MANAGER_DIR_NAME

    @property
    def activation_script(self) -> Path:
        return self.manager_dir / ACTIVATION_SCRIPT_NAME

    @property
    def library_dir(self) -> Path:
        return self.manager_dir / LIBRARY_DIR_NAME

    @property
    def default_cache_dir(self) -> Path:
        return self.manager_dir / CACHE_DIR_NAME

    @property
    def project_descriptor(self) -> Path:
        return self.root / PROJECT_DESCRIPTOR_NAME

    @property
    def local_override(self) -> Path:
        return self.root / LOCAL_OVERRIDE_NAME


def resolve_cache_dir(override: Optional[str], layout: ProjectLayout) -> Path:
    """Resolve the package cache directory.

    Args:
        override: Externally supplied cache path, if any
        layout: Project layout providing the default location

    Returns:
        The override when non-empty, otherwise the default under the project
    """
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return layout.default_cache_dir


def is_real_project(layout: ProjectLayout, known_project_path: Optional[str]) -> bool:
    """Check for evidence that the root is an actual project.

    Either the project descriptor exists under the root, or the configured
    known project path exists on this machine.
    """
    if layout.project_descriptor.is_file():
        return True
    if known_project_path:
        return Path(known_project_path).exists()
    return False
