# capcalc/services/session.py
from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional

from ..core.calculation import area_from_dimensions, calculate
from ..core.constants import DEFAULT_CONSTANTS, CapacityConstants
from ..core.models import CalculationInputs, CalculationResults
from ..core.validation import ValidationIssue, validate_inputs
from .logger import get_logger


class CalculatorSession:
    """Holds the current room and recalculates on every change.

    Results are replaced wholesale; invalid inputs keep the last good
    results and expose the problems in ``issues``.
    """

    def __init__(
        self,
        inputs: Optional[CalculationInputs] = None,
        constants: Optional[CapacityConstants] = None,
        on_results: Optional[Callable[[CalculationResults], None]] = None,
    ) -> None:
        self._log = get_logger()
        self.inputs: CalculationInputs = inputs or CalculationInputs()
        self.constants: CapacityConstants = constants or DEFAULT_CONSTANTS
        self.results: Optional[CalculationResults] = None
        self.issues: List[ValidationIssue] = []
        self.length_m: float = 0.0
        self.width_m: float = 0.0
        self._on_results = on_results
        self.recalculate()

    def recalculate(self) -> Optional[CalculationResults]:
        issues = validate_inputs(self.inputs)
        self.issues = issues
        if issues:
            self._log.warning(
                "Not recalculating, invalid inputs: %s",
                ", ".join(f"{i.field} {i.message}" for i in issues),
            )
            return self.results

        self.results = calculate(self.inputs, self.constants)
        self._log.debug("Recalculated %s -> %s kcal/h", self.inputs, self.results.total_kcal)
        if self._on_results is not None:
            self._on_results(self.results)
        return self.results

    def update(self, **changes) -> Optional[CalculationResults]:
        """Replace some input fields and recalculate."""
        self.inputs = replace(self.inputs, **changes)
        return self.recalculate()

    def apply_form(self, inputs: CalculationInputs, keep_area: bool = False) -> Optional[CalculationResults]:
        """Take a full set of form values.

        With ``keep_area`` the current area is kept at full precision; the
        form only shows it rounded when length × width drive it.
        """
        if keep_area:
            inputs = replace(inputs, area=self.inputs.area)
        self.inputs = inputs
        return self.recalculate()

    def set_constants(self, constants: CapacityConstants) -> Optional[CalculationResults]:
        self.constants = constants
        return self.recalculate()

    def set_dimensions(self, length_m: float, width_m: float) -> Optional[CalculationResults]:
        """Store room length/width; the area follows once both are positive."""
        self.length_m = length_m
        self.width_m = width_m
        if length_m > 0 and width_m > 0:
            conv = area_from_dimensions(length_m, width_m)
            return self.update(area=conv.ping)
        return self.results

    def reset(self) -> Optional[CalculationResults]:
        self.inputs = CalculationInputs()
        self.length_m = 0.0
        self.width_m = 0.0
        return self.recalculate()
