"""Location code to region key resolution.

Accepts either a two-letter state key ("CA", "tx") or a US ZIP code
("94105", "94105-1234"). ZIP codes are mapped by their three-digit prefix
using the ranges in tax_rules/regions.yaml.
"""

import re
from typing import Optional

from ..errors import UnresolvedRegion
from .schemas import RegionRules

_ZIP_RE = re.compile(r"^(\d{3})\d{2}(-\d{4})?$")
_REGION_RE = re.compile(r"^[A-Za-z]{2}$")


class RegionResolver:
    """Maps location codes onto region keys."""

    def __init__(self, rules: Optional[RegionRules] = None):
        self._ranges = sorted(
            (rules or RegionRules()).zip_prefixes, key=lambda r: r.first
        )

    def region_for_zip_prefix(self, prefix: int) -> Optional[str]:
        for entry in self._ranges:
            if entry.first <= prefix <= entry.last:
                return entry.region.upper()
        return None

    def resolve(self, location_code: Optional[str], strict: bool = False) -> Optional[str]:
        """Resolve a location code to an upper-case region key.

        Args:
            location_code: ZIP code or two-letter region key
            strict: Raise UnresolvedRegion instead of returning None

        Returns:
            Region key, or None if the code is blank or not recognized
        """
        code = (location_code or "").strip()
        region = None
        if _REGION_RE.match(code):
            region = code.upper()
        else:
            match = _ZIP_RE.match(code)
            if match:
                region = self.region_for_zip_prefix(int(match.group(1)))

        if region is None and strict:
            raise UnresolvedRegion(location_code)
        return region
