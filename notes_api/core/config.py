"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional per-machine
overrides from environment variables or config/.env.

Settings (YAML):
    application.yaml - App identity, server, cors, timeouts
    logging.yaml     - Logging configuration
    features.yaml    - Feature flags
    notes.yaml       - Note field limits

Overrides (NOTES_* environment variables or config/.env):
    NOTES_SERVER_HOST, NOTES_SERVER_PORT, NOTES_LOG_LEVEL, NOTES_ENVIRONMENT
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notes_api.core.config_schema import (
    ApplicationSchema,
    FeaturesSchema,
    LoggingSchema,
    NotesSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
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
    """Process-level overrides. Unset fields fall back to the YAML values."""

    server_host: str | None = None
    server_port: int | None = None
    log_level: str | None = None
    environment: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
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
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")
        self._features = _load_validated(FeaturesSchema, "features.yaml")
        self._notes = _load_validated(NotesSchema, "notes.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def features(self) -> FeaturesSchema:
        """Feature flags."""
        return self._features

    @property
    def notes(self) -> NotesSchema:
        """Note field limits."""
        return self._notes


@lru_cache
def get_settings() -> Settings:
    """Get cached overrides. Reads config/.env when it exists."""
    env_path = find_project_root() / "config" / ".env"
    if env_path.exists():
        return Settings(_env_file=str(env_path))
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_environment() -> str:
    """Effective environment name (override first, then application.yaml)."""
    return get_settings().environment or get_app_config().application.environment


def get_server_address() -> tuple[str, int]:
    """
    Get the host and port the server binds to.

    Returns:
        Tuple of (host, port), overrides applied.
    """
    server = get_app_config().application.server
    settings = get_settings()
    return settings.server_host or server.host, settings.server_port or server.port


def get_server_base_url() -> tuple[str, float]:
    """
    Get the server base URL and client timeout.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    host, port = get_server_address()
    timeout = float(get_app_config().application.timeouts.external_api)
    return f"http://{host}:{port}", timeout
