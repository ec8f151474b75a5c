"""Unit tests for settings.json handling."""

import json

import pytest

from financepro.sdk import config


class TestConfigDir:
    def test_env_var_wins(self, isolated_config):
        assert config.get_config_dir() == isolated_config
        assert config.get_settings_path() == isolated_config / "settings.json"

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("FINANCEPRO_CONFIG_PATH")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.get_config_dir() == tmp_path / "financepro"


class TestSettings:
    """Reading and writing individual settings."""

    def test_empty_when_no_file(self):
        assert config.load_settings() == {}
        assert config.get_setting("tax_year") is None
        assert config.get_setting("tax_year", 1) == 1

    def test_set_parses_value(self, isolated_config):
        path = config.set_setting("tax_year", "2025")
        assert path == isolated_config / "settings.json"
        assert json.loads(path.read_text()) == {"tax_year": 2025}

    def test_set_unknown_key(self):
        with pytest.raises(KeyError):
            config.set_setting("favourite_colour", "blue")

    def test_set_unparseable_value(self):
        with pytest.raises(ValueError):
            config.set_setting("compounding_frequency", "monthly")

    def test_unset(self):
        config.set_setting("emergency_fund_months", 6)
        assert config.unset_setting("emergency_fund_months") is True
        assert config.unset_setting("emergency_fund_months") is False
        assert config.load_settings() == {}

    def test_other_settings_survive_update(self):
        config.set_setting("tax_year", 2025)
        config.set_setting("compounding_frequency", 4)
        assert config.load_settings() == {"tax_year": 2025, "compounding_frequency": 4}


class TestResolution:
    """Explicit value, then settings, then default."""

    def test_tax_year_default(self):
        assert config.get_tax_year() == config.DEFAULT_TAX_YEAR

    def test_tax_year_from_settings(self):
        config.set_setting("tax_year", 2025)
        assert config.get_tax_year() == 2025

    def test_explicit_tax_year_wins(self):
        config.set_setting("tax_year", 2025)
        assert config.get_tax_year(2024) == 2024

    def test_bundled_rules_dir(self):
        rules_dir = config.get_tax_rules_dir()
        assert (rules_dir / "2024.yaml").exists()
        assert (rules_dir / "regions.yaml").exists()

    def test_custom_rules_dir(self, tmp_path):
        config.set_setting("tax_rules_dir", str(tmp_path))
        assert config.get_tax_rules_dir() == tmp_path
