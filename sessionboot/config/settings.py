"""Pydantic settings with environment variable support."""

from collections.abc import Mapping
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sessionboot.config.validators import validate_log_level, validate_non_empty_string
from sessionboot.utils.constants import (
    DEFAULT_KNOWN_PROJECT_PATH,
    DEFAULT_LOCK_MANAGER,
    TRUE_LITERAL,
)


class BootstrapSettings(BaseSettings):
    """Session bootstrap settings.

    Flags are kept as raw strings: only the literal ``"true"`` enables
    them, so ``"1"`` or ``"TRUE"`` leave a flag off.
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Session mode
    container_flag: str = Field(
        default="",
        alias="CONTAINER_FLAG",
        description="Set to 'true' when running inside the project container",
    )
    cache_path_override: Optional[str] = Field(
        default=None,
        alias="CACHE_PATH_OVERRIDE",
        description="Package cache directory (defaults to lockenv/cache under the project)",
    )

    # Lockfile management
    auto_init: str = Field(default=TRUE_LITERAL, alias="AUTO_INIT")
    auto_snapshot: str = Field(default=TRUE_LITERAL, alias="AUTO_SNAPSHOT")
    lock_manager: str = Field(
        default=DEFAULT_LOCK_MANAGER,
        alias="LOCK_MANAGER",
        description="Registered lock manager name",
    )
    known_project_path: Optional[str] = Field(
        default=DEFAULT_KNOWN_PROJECT_PATH,
        alias="KNOWN_PROJECT_PATH",
        description="Fixed path whose existence marks a real project when no descriptor exists",
    )

    # CI detection (presence-based)
    ci: str = Field(default="", alias="CI")
    ci_platform: str = Field(default="", alias="CI_PLATFORM")

    # Logging settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_use_colors: bool = Field(default=True, alias="LOG_USE_COLORS")
    log_json_format: bool = Field(default=False, alias="LOG_JSON_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "BootstrapSettings":
        """Build settings from an explicit mapping, ignoring os.environ."""
        return cls(**cls._collect(environ))

    @classmethod
    def from_environ_or_defaults(
        cls, environ: Mapping[str, str]
    ) -> tuple["BootstrapSettings", list[str]]:
        """Like ``from_environ``, but invalid values fall back to their defaults.

        Returns:
            Tuple of (settings, one message per variable that was replaced)
        """
        values = cls._collect(environ)
        try:
            return cls(**values), []
        except ValidationError as e:
            invalid = cls._invalid_keys(e)

        messages = []
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in invalid or name in invalid:
                messages.append(
                    f"Ignoring invalid {key}={values[key]!r}, using {field.default!r}"
                )
                values[key] = field.get_default(call_default_factory=True)
        if not messages:
            return cls(**cls._collect({})), [f"Invalid session settings, using defaults: {invalid}"]
        return cls(**values), messages

    @classmethod
    def _collect(cls, environ: Mapping[str, str]) -> dict:
        # Every field is passed explicitly so the process environment never leaks in
        values = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in environ:
                values[key] = environ[key]
            else:
                values[key] = field.get_default(call_default_factory=True)
        return values

    @staticmethod
    def _invalid_keys(error: ValidationError) -> set[str]:
        return {str(err["loc"][0]) for err in error.errors() if err["loc"]}

    @property
    def in_container(self) -> bool:
        return self.container_flag == TRUE_LITERAL

    @property
    def auto_init_enabled(self) -> bool:
        return self.auto_init == TRUE_LITERAL

    @property
    def auto_snapshot_enabled(self) -> bool:
        return self.auto_snapshot == TRUE_LITERAL

    @property
    def in_ci(self) -> bool:
        """Either the generic CI signal or the platform-specific one is set."""
        return self.ci != "" or self.ci_platform != ""

    @field_validator("lock_manager")
    @classmethod
    def validate_lock_manager(cls, v: str) -> str:
        """Validate lock manager name."""
        return validate_non_empty_string(v, field_name="LOCK_MANAGER").lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)

