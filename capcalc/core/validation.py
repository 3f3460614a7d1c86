# capcalc/core/validation.py
"""Input checks applied by callers before running the estimate.

``calculate`` itself accepts any number. The form and the session use this
module to reject rooms that cannot exist.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional, Sequence

from .calculation import calculate
from .constants import DEFAULT_CONSTANTS, CapacityConstants
from .models import CalculationInputs, CalculationResults


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


class InvalidInput(ValueError):
    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__("; ".join(f"{i.field}: {i.message}" for i in self.issues))


def _check_positive(name: str, value, issues: List[ValidationIssue]) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        issues.append(ValidationIssue(name, f"must be a number, got {value!r}"))
    elif not math.isfinite(value):
        issues.append(ValidationIssue(name, "must be finite"))
    elif value <= 0:
        issues.append(ValidationIssue(name, "must be greater than 0"))


def validate_inputs(inputs: CalculationInputs) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _check_positive("area", inputs.area, issues)
    _check_positive("height", inputs.height, issues)

    people = inputs.people_count
    if isinstance(people, bool) or not isinstance(people, Integral):
        issues.append(ValidationIssue("people_count", f"must be a whole number, got {people!r}"))
    elif people < 0:
        issues.append(ValidationIssue("people_count", "must not be negative"))
    return issues


def calculate_checked(
    inputs: CalculationInputs,
    constants: Optional[CapacityConstants] = None,
) -> CalculationResults:
    """Validate, then calculate. Raises :class:`InvalidInput`."""
    issues = validate_inputs(inputs)
    if issues:
        raise InvalidInput(issues)
    return calculate(inputs, constants or DEFAULT_CONSTANTS)
