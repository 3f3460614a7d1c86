# capcalc/core/calculation.py
"""Air-conditioning capacity estimate for a single room.

    Q = A × q × H_factor  (+ occupants above the base count)  × multiplier

A  room area in ping
q  environmental base rate (kcal/h per ping), higher under a tin roof
H  height correction, applied only above the standard ceiling height

The percentage surcharges are summed into one multiplier. A tin roof
counts twice: once through q and once through its own surcharge.

Rounding happens only when the result set is built; intermediate values
are kept at full precision.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .constants import DEFAULT_CONSTANTS, PING_TO_SQM, CapacityConstants
from .models import CalculationFactors, CalculationInputs, CalculationResults


@dataclass(frozen=True)
class AreaConversion:
    square_meters: float
    ping: float


def _ceil(x: float):
    # NaN/inf pass through unchanged so the estimate never raises
    return math.ceil(x) if math.isfinite(x) else x


def _round_half_up(x: float):
    return math.floor(x + 0.5) if math.isfinite(x) else x


def height_correction_applies(height: float, constants: CapacityConstants = DEFAULT_CONSTANTS) -> bool:
    return height > constants.STANDARD_HEIGHT


def calculate(
    inputs: CalculationInputs,
    constants: CapacityConstants = DEFAULT_CONSTANTS,
) -> CalculationResults:
    c = constants

    q = c.TIN_ROOF_KCAL_PER_PING if inputs.is_tin_roof else c.BASE_KCAL_PER_PING
    h_factor = c.HEIGHT_FACTOR if height_correction_applies(inputs.height, c) else 1.0

    total_kcal = inputs.area * q * h_factor

    # occupants are added in kcal before the percentage surcharges
    if inputs.people_count > c.BASE_PEOPLE:
        total_kcal += (inputs.people_count - c.BASE_PEOPLE) * c.PERSON_KCAL

    multiplier = 1.0
    if inputs.is_west_sun:
        multiplier += c.WEST_SUN
    if inputs.is_top_floor:
        multiplier += c.TOP_FLOOR
    if inputs.has_large_windows:
        multiplier += c.LARGE_WINDOW
    if inputs.is_tin_roof:
        multiplier += c.TIN_ROOF

    total_kcal *= multiplier

    total_btu = total_kcal * c.KCAL_TO_BTU
    total_watt = total_kcal * c.KCAL_TO_WATT
    tons = total_btu / c.BTU_TO_TON

    return CalculationResults(
        # baseline for display only: no height factor, no surcharges
        base_kcal=_round_half_up(inputs.area * q),
        total_kcal=_ceil(total_kcal),
        total_watts=_ceil(total_watt),
        recommended_btu=_ceil(total_btu),
        taiwan_tons=round(tons, 2),
        factors=CalculationFactors(
            height_multiplier=round(h_factor, 2),
            environmental_multiplier=round(multiplier, 2),
        ),
    )


def total_kw(results: CalculationResults) -> float:
    """Display value in kW, derived from the rounded watt figure."""
    return round(results.total_watts / 1000, 2)


def load_breakdown(results: CalculationResults) -> List[Tuple[str, float]]:
    """Split the total into the baseline and everything added on top of it."""
    return [
        ("Base load", results.base_kcal),
        ("Additional load", results.total_kcal - results.base_kcal),
    ]


def area_from_dimensions(length_m: float, width_m: float, ping_to_sqm: float = PING_TO_SQM) -> AreaConversion:
    square_meters = length_m * width_m
    return AreaConversion(square_meters=square_meters, ping=square_meters / ping_to_sqm)
