"""Custom exceptions for the session bootstrapper."""


class SessionBootstrapError(Exception):
    """Base exception for all errors."""

    pass


class ConfigurationError(SessionBootstrapError):
    """Configuration validation or loading error."""

    pass


class LockManagerError(SessionBootstrapError):
    """Base exception for dependency lock manager errors."""

    def __init__(self, message: str, manager: str = None):
        super().__init__(message)
        self.manager = manager


class ActivationError(LockManagerError):
    """Activation script failed to run."""

    pass


class InitializationError(LockManagerError):
    """First-time project initialization failed."""

    pass


class SnapshotError(LockManagerError):
    """Writing the lockfile failed."""

    pass


class OverrideScriptError(SessionBootstrapError):
    """Local override script raised while executing."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class ExitHookError(SessionBootstrapError):
    """User exit hook raised."""

    pass
