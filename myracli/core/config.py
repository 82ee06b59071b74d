"""
Configuration Management.

Loads secrets from config/.env (or the environment) and settings from
config/settings/*.yaml.

Secrets (.env / environment):
    MYRA_API_KEY, MYRA_API_SECRET

Settings (YAML):
    application.yaml   - App identity, remote API base URL, language, timeout
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from myracli.core.config_schema import ApplicationSchema, LoggingSchema

# Source checkout root, used when the working directory is outside the project.
_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    if (_PACKAGE_ROOT / ".project_root").exists():
        return _PACKAGE_ROOT
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from config/.env or MYRA_* environment variables."""

    api_key: str = ""
    api_secret: str = ""

    model_config = SettingsConfigDict(
        env_prefix="MYRA_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_base_url() -> tuple[str, float]:
    """
    Get the remote API base URL and timeout from application.yaml.

    The base URL includes the language segment and the rapi prefix,
    e.g. https://api.myracloud.com/en/rapi.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    api = get_app_config().application.api
    base_url = f"{api.base_url.rstrip('/')}/{api.language}/rapi"
    return base_url, float(api.timeout)
