"""Shared fixtures: isolate every test from the user's real settings."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point FINANCEPRO_CONFIG_PATH at an empty per-test directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("FINANCEPRO_CONFIG_PATH", str(config_dir))
    return config_dir
