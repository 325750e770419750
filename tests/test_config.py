"""Tests for houseledger.config."""

import os
import stat
from pathlib import Path

import pytest

from houseledger.config import DB_PATH_ENV, create_default_config, get_settings, load_config, save_config
from houseledger.domain.errors import ValidationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(DB_PATH_ENV, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


class TestDefaultConfig:
    """Tests for create_default_config and load_config."""

    def test_creates_readable_config_with_private_permissions(self, tmp_path: Path) -> None:
        """Should write a TOML file only the owner can read."""
        path = tmp_path / "config" / "houseledger" / "config.toml"

        create_default_config(path)

        assert load_config(path)["ledger"]["page_size"] == 10
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError like open() does."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")


class TestGetSettings:
    """Tests for get_settings."""

    def test_defaults_without_config(self, tmp_path: Path) -> None:
        """Should fall back to defaults and the XDG data path."""
        settings = get_settings(tmp_path / "missing.toml")

        assert settings.page_size == 10
        assert settings.currency_symbol == "$"
        assert settings.db_path == tmp_path / "data" / "houseledger" / "houseledger.db"

    def test_reads_config_values(self, tmp_path: Path) -> None:
        """Should use values from the config file."""
        path = tmp_path / "config.toml"
        save_config(
            {"ledger": {"page_size": 25, "currency_symbol": "R$"}, "storage": {"db_path": str(tmp_path / "x.db")}},
            path,
        )

        settings = get_settings(path)

        assert settings.page_size == 25
        assert settings.currency_symbol == "R$"
        assert settings.db_path == tmp_path / "x.db"

    def test_environment_overrides_db_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer HOUSELEDGER_DB over the config file."""
        path = tmp_path / "config.toml"
        save_config({"storage": {"db_path": str(tmp_path / "x.db")}}, path)
        monkeypatch.setenv(DB_PATH_ENV, str(tmp_path / "env.db"))

        assert get_settings(path).db_path == tmp_path / "env.db"

    def test_invalid_page_size(self, tmp_path: Path) -> None:
        """Should reject an invalid configured page size."""
        path = tmp_path / "config.toml"
        save_config({"ledger": {"page_size": 0}}, path)

        with pytest.raises(ValidationError):
            get_settings(path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        """Should report a broken file as a config ValidationError."""
        path = tmp_path / "config.toml"
        path.write_text("[ledger\npage_size = ")

        with pytest.raises(ValidationError) as exc_info:
            get_settings(path)

        assert exc_info.value.field == "config"
        assert "not valid TOML" in str(exc_info.value)

    @pytest.mark.parametrize("content", ['ledger = "x"', "storage = 3", "[storage]\ndb_path = 42"])
    def test_wrongly_shaped_config(self, tmp_path: Path, content: str) -> None:
        """Should reject sections that are not tables and non-string paths."""
        path = tmp_path / "config.toml"
        path.write_text(content)

        with pytest.raises(ValidationError) as exc_info:
            get_settings(path)

        assert exc_info.value.field == "config"
