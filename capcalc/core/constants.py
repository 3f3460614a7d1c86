# capcalc/core/constants.py
"""Rates and unit conversion factors used by the capacity estimate.

The table is immutable; regional variants and tests build a new one with
:meth:`CapacityConstants.with_overrides` and pass it to ``calculate``.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

# 1 ping = 3.3058 m²
PING_TO_SQM = 3.3058


@dataclass(frozen=True)
class CapacityConstants:
    # environmental base rate q (kcal/h per ping)
    BASE_KCAL_PER_PING: float = 500
    TIN_ROOF_KCAL_PER_PING: float = 750

    # unit conversions
    KCAL_TO_BTU: float = 4
    KCAL_TO_KW: float = 1 / 860  # reference only; kW is shown as totalWatts / 1000
    KCAL_TO_WATT: float = 1000 / 860
    BTU_TO_TON: float = 12000

    # ceiling height above which the height factor kicks in (m, exclusive)
    STANDARD_HEIGHT: float = 3.2

    # additive surcharges on the total load
    WEST_SUN: float = 0.15
    TIN_ROOF: float = 0.25  # on top of the tin-roof base rate
    TOP_FLOOR: float = 0.15
    LARGE_WINDOW: float = 0.10

    HEIGHT_FACTOR: float = 1.1
    PERSON_KCAL: float = 100  # per occupant above BASE_PEOPLE
    BASE_PEOPLE: int = 3

    def with_overrides(self, overrides: Mapping[str, Any]) -> "CapacityConstants":
        """Return a copy with selected constants replaced.

        Keys must be field names of this table; values must be numeric.
        """
        known = {f.name for f in fields(self)}
        changes: Dict[str, float] = {}
        for key, value in overrides.items():
            if key not in known:
                raise KeyError(f"Unknown capacity constant: {key}")
            if isinstance(value, bool):
                raise ValueError(f"Constant {key} must be numeric, got {value!r}")
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"Constant {key} must be numeric, got {value!r}") from None
            changes[key] = int(number) if key == "BASE_PEOPLE" else number
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONSTANTS = CapacityConstants()
