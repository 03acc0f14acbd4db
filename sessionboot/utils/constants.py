"""Session-wide constants: mirrors, project layout and option defaults."""

# Package repository mirrors
BINARY_REPOSITORY_URL: str = "https://packagemanager.posit.co/pypi/latest/simple"
SOURCE_REPOSITORY_URL: str = "https://pypi.org/simple"

# Project layout (relative to the project root)
LOCKFILE_NAME: str = "requirements.lock"
MANAGER_DIR_NAME: str = "lockenv"
ACTIVATION_SCRIPT_NAME: str = "activate.py"
LIBRARY_DIR_NAME: str = "library"
CACHE_DIR_NAME: str = "cache"
PROJECT_DESCRIPTOR_NAME: str = "pyproject.toml"
LOCAL_OVERRIDE_NAME: str = ".sessionrc.py"

# Fallback signal for "this is a real project" when no descriptor exists
DEFAULT_KNOWN_PROJECT_PATH: str = "/project"

# Environment flags
TRUE_LITERAL: str = "true"
CACHE_PATH_ENV: str = "CACHE_PATH_OVERRIDE"

# Variables published for downstream pip invocations
PIP_INDEX_URL_ENV: str = "PIP_INDEX_URL"
PIP_NO_INPUT_ENV: str = "PIP_NO_INPUT"
PIP_PREFER_BINARY_ENV: str = "PIP_PREFER_BINARY"
PIP_CACHE_DIR_ENV: str = "PIP_CACHE_DIR"

# Lock manager
DEFAULT_LOCK_MANAGER: str = "pip"
PIP_FREEZE_TIMEOUT_SECONDS: int = 120

# Reproducibility defaults
DEFAULT_CONTRASTS: tuple[str, str] = ("treatment", "polynomial")
DEFAULT_MISSING_VALUE_ACTION: str = "omit"
DEFAULT_DISPLAY_DIGITS: int = 7
DEFAULT_DECIMAL_MARK: str = "."

# Name of the callable an override script may define to run at exit
EXIT_HOOK_NAME: str = "on_exit"


class OptionKey:
    """Keys of the session option table."""

    QUIT_SAVES_WORKSPACE = "quit_saves_workspace"
    INSTALL_PROMPTS = "install_prompts"
    COMPILE_FROM_SOURCE = "compile_from_source"
    INSTALL_WORKERS = "install_workers"
    REPOSITORY_URL = "repository_url"
    COERCE_STRINGS_TO_CATEGORIES = "coerce_strings_to_categories"
    CONTRASTS = "contrasts"
    MISSING_VALUE_ACTION = "missing_value_action"
    DISPLAY_DIGITS = "display_digits"
    DECIMAL_MARK = "decimal_mark"
