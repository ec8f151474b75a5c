"""Tax rules loading from tax_rules/<year>.yaml."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_tax_rules_dir
from ..errors import TaxRulesError, describe_validation_error
from .schemas import RegionRules, TaxRules

logger = logging.getLogger(__name__)

REGIONS_FILENAME = "regions.yaml"


def get_available_years(rules_dir: Optional[Path] = None) -> list[int]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = Path(rules_dir) if rules_dir else get_tax_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise TaxRulesError(f"Tax rules file not found: {path}")
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise TaxRulesError(f"Tax rules file is empty or not a mapping: {path}")
    return data


@lru_cache(maxsize=None)
def _load_tax_rules_cached(year: int, rules_dir: str) -> TaxRules:
    config_file = Path(rules_dir) / f"{year}.yaml"
    logger.debug("Loading tax rules from %s", config_file)
    data = _read_yaml(config_file)
    try:
        rules = TaxRules.model_validate(data)
    except ValidationError as e:
        raise TaxRulesError(f"Invalid tax rules in {config_file}: {describe_validation_error(e)}") from e
    if rules.year != year:
        raise TaxRulesError(f"{config_file} declares year {rules.year}, expected {year}")
    return rules


def load_tax_rules(year: Union[int, str], rules_dir: Optional[Path] = None) -> TaxRules:
    """Load and validate tax rules for a year.

    Rules are cached per (year, directory); the returned model is frozen.

    Raises:
        TaxRulesError: If the file is missing or fails validation
    """
    rules_dir = Path(rules_dir) if rules_dir else get_tax_rules_dir()
    return _load_tax_rules_cached(int(year), str(rules_dir))


@lru_cache(maxsize=None)
def _load_region_rules_cached(rules_dir: str) -> RegionRules:
    path = Path(rules_dir) / REGIONS_FILENAME
    if not path.exists():
        logger.debug("No %s in %s; ZIP codes will not resolve", REGIONS_FILENAME, rules_dir)
        return RegionRules()
    data = _read_yaml(path)
    try:
        return RegionRules.model_validate(data)
    except ValidationError as e:
        raise TaxRulesError(f"Invalid region rules in {path}: {describe_validation_error(e)}") from e


def load_region_rules(rules_dir: Optional[Path] = None) -> RegionRules:
    """Load ZIP prefix to region mappings (empty if no regions.yaml)."""
    rules_dir = Path(rules_dir) if rules_dir else get_tax_rules_dir()
    return _load_region_rules_cached(str(rules_dir))
