"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_float, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .manifest import ManifestConfig, get_manifest_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "ManifestConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_manifest_config",
    "get_storage_config",
    "optional_env_float",
    "require_env_var",
    "require_env_vars",
]
