# capcalc/utils/qt.py
from PyQt5.QtCore import QObject, pyqtSignal


class CalculatorSignals(QObject):
    """Application-wide signals so widgets and services stay decoupled."""
    # Emitted with the new CalculationInputs whenever a form field changes
    inputs_changed = pyqtSignal(object)
    # Emitted with the fresh CalculationResults after every recalculation
    results_changed = pyqtSignal(object)
    # Emitted when the constants table is replaced (settings overrides)
    constants_changed = pyqtSignal(object)


signals = CalculatorSignals()
