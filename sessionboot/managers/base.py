"""Lock manager base class and interface."""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Optional

from sessionboot.utils.path_utils import ProjectLayout


class BaseLockManager(ABC):
    """Abstract base class for dependency lockfile managers."""

    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = cache_dir
        self.name = self.__class__.__name__.replace("LockManager", "").lower()
        self.consent_given = False
        self.auto_snapshot = True
        self.activated = False

    @abstractmethod
    def activate(self, script: Path, options: MutableMapping[str, Any]) -> None:
        """Run the activation script, wiring the project library into the session.

        Args:
            script: Path to the activation script
            options: Session option table the script may update

        Raises:
            ActivationError: If the script fails
        """
        pass

    def configure(self, consent: bool = True, auto_snapshot: bool = False) -> None:
        """Record consent and whether the manager may snapshot on its own."""
        self.consent_given = consent
        self.auto_snapshot = auto_snapshot

    @abstractmethod
    def init(self, layout: ProjectLayout, bare: bool = True) -> None:
        """Initialize a new project without prompting.

        Args:
            layout: Project layout to initialize
            bare: Do not install anything, only record what is present

        Raises:
            InitializationError: If initialization fails
        """
        pass

    @abstractmethod
    def snapshot(self, layout: ProjectLayout, prompt: bool = False) -> Path:
        """Write the installed dependency set to the lockfile.

        Args:
            layout: Project layout holding the lockfile
            prompt: Whether the user may be asked to confirm

        Returns:
            Path of the written lockfile

        Raises:
            SnapshotError: If the lockfile could not be written
        """
        pass
