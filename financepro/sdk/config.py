"""Configuration management for FinancePro.

Settings live in settings.json in the config directory and hold
machine-specific preferences:
   - tax_year: which tax_rules/<year>.yaml to apply by default
   - tax_rules_dir: directory with custom rules files (optional)
   - compounding_frequency: default periods per year for growth projections
   - emergency_fund_months: default months of expenses to hold in reserve

Config directory resolution:
1. FINANCEPRO_CONFIG_PATH environment variable (if set)
2. ~/.config/financepro/ (XDG_CONFIG_HOME fallback)

The engine itself never reads settings; the CLI and MCP server resolve
them and pass explicit values in.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

APP_NAME = "financepro"
SETTINGS_FILENAME = "settings.json"

DEFAULT_TAX_YEAR = 2024
DEFAULT_COMPOUNDING_FREQUENCY = 12

# Keys accepted by 'financepro settings set', with their value parsers
KNOWN_SETTINGS = {
    "tax_year": int,
    "tax_rules_dir": str,
    "compounding_frequency": int,
    "emergency_fund_months": int,
}


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. FINANCEPRO_CONFIG_PATH environment variable
    2. ~/.config/financepro/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("FINANCEPRO_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    logger.debug("Saved settings to %s", settings_file)
    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json, or default if unset."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a known setting, parsing string values to the expected type.

    Raises:
        KeyError: If key is not a known setting
        ValueError: If value cannot be parsed for that key
    """
    if key not in KNOWN_SETTINGS:
        raise KeyError(f"Unknown setting '{key}'. Known settings: {', '.join(sorted(KNOWN_SETTINGS))}")
    parsed = KNOWN_SETTINGS[key](value)
    settings = load_settings()
    settings[key] = parsed
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was present."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_tax_year(year: Optional[int] = None) -> int:
    """Resolve the tax year: explicit value, then settings, then default."""
    if year is not None:
        return int(year)
    return int(get_setting("tax_year", DEFAULT_TAX_YEAR))


def get_tax_rules_dir() -> Path:
    """Get the tax rules directory.

    Uses the tax_rules_dir setting if present, else the rules bundled with
    the package.
    """
    custom = get_setting("tax_rules_dir")
    if custom:
        return Path(custom).expanduser()
    return Path(__file__).parent.parent / "tax_rules"
