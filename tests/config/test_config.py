from __future__ import annotations

from pathlib import Path

import pytest

from launchsync.config import (
    ConfigurationError,
    MissingConfigurationError,
    get_database_config,
    get_manifest_config,
    get_storage_config,
    optional_env_float,
    require_env_var,
    require_env_vars,
)
from launchsync.config.manifest import DEFAULT_MANIFEST_URL, DEFAULT_TABLE_SELECTOR


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.delenv("MISSING_B", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_float(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_TIMEOUT", raising=False)
    assert optional_env_float("EXAMPLE_TIMEOUT", 3.5) == 3.5

    monkeypatch.setenv("EXAMPLE_TIMEOUT", "12")
    assert optional_env_float("EXAMPLE_TIMEOUT", 3.5) == 12.0

    monkeypatch.setenv("EXAMPLE_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="EXAMPLE_TIMEOUT"):
        optional_env_float("EXAMPLE_TIMEOUT", 3.5)


def test_manifest_config_requires_contact(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LAUNCHSYNC_CONTACT", raising=False)

    with pytest.raises(MissingConfigurationError, match="LAUNCHSYNC_CONTACT"):
        get_manifest_config()


def test_manifest_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHSYNC_CONTACT", "ops@example.com")
    monkeypatch.delenv("LAUNCHSYNC_MANIFEST_URL", raising=False)
    monkeypatch.delenv("LAUNCHSYNC_MANIFEST_TIMEOUT", raising=False)
    monkeypatch.delenv("LAUNCHSYNC_MANIFEST_TABLE", raising=False)

    config = get_manifest_config()

    assert config.url == DEFAULT_MANIFEST_URL
    assert config.table_selector == DEFAULT_TABLE_SELECTOR
    assert config.user_agent.startswith("launchsync/")
    assert config.user_agent.endswith("(ops@example.com)")
    assert config.required_cells == 7


def test_manifest_config_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHSYNC_CONTACT", "ops@example.com")
    monkeypatch.setenv("LAUNCHSYNC_MANIFEST_URL", "https://mirror.test/manifest")
    monkeypatch.setenv("LAUNCHSYNC_MANIFEST_TIMEOUT", "7.5")
    monkeypatch.setenv("LAUNCHSYNC_MANIFEST_TABLE", "table.manifest")

    config = get_manifest_config()

    assert config.url == "https://mirror.test/manifest"
    assert config.timeout_seconds == 7.5
    assert config.table_selector == "table.manifest"


def test_storage_config_uses_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LAUNCHSYNC_DATA_DIR", str(tmp_path / "data"))

    storage = get_storage_config()

    expected = tmp_path.resolve() / "data" / "launchsync.db"
    assert storage.database_uri() == f"sqlite+pysqlite:///{expected}"
    assert (tmp_path / "data").is_dir()


def test_database_uri_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LAUNCHSYNC_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")
    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"

    monkeypatch.delenv("DATABASE_URI")
    assert get_database_config().uri.endswith("launchsync.db")
