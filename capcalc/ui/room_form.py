# capcalc/ui/room_form.py
from __future__ import annotations

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QWidget, QFormLayout, QDoubleSpinBox, QSpinBox, QCheckBox, QLabel,
    QVBoxLayout, QHBoxLayout, QGroupBox, QPushButton, QGridLayout
)

from ..core.calculation import area_from_dimensions, height_correction_applies
from ..core.constants import DEFAULT_CONSTANTS, CapacityConstants
from ..core.models import CalculationInputs


class RoomForm(QWidget):
    """
    Room geometry + risk factor editor.
    Emits `inputsEdited(CalculationInputs)` on every change; the caller owns
    validation and recalculation.
    """
    inputsEdited = pyqtSignal(object)
    dimensionsEdited = pyqtSignal(float, float)
    resetRequested = pyqtSignal()

    FLAGS = [
        ("is_west_sun", "Strong west sun (+15%)"),
        ("is_tin_roof", "Tin roof (+25%, 750 kcal/h per ping)"),
        ("is_top_floor", "Top floor (+15%)"),
        ("has_large_windows", "Large windows / glass walls (+10%)"),
    ]

    def __init__(self, constants: CapacityConstants = DEFAULT_CONSTANTS, parent=None):
        super().__init__(parent)
        self._constants = constants
        self._flag_boxes: dict[str, QCheckBox] = {}

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(12)

        # ---- Room geometry ---------------------------------------------------
        geo = QGroupBox("Room")
        form = QFormLayout(geo)
        form.setLabelAlignment(Qt.AlignRight)

        dims = QWidget()
        dl = QHBoxLayout(dims)
        dl.setContentsMargins(0, 0, 0, 0)
        self.sp_length = self._double_spin(0.0, 1000.0, 2, " m")
        self.sp_width = self._double_spin(0.0, 1000.0, 2, " m")
        dl.addWidget(self.sp_length)
        dl.addWidget(QLabel("×"))
        dl.addWidget(self.sp_width)
        self._dims = dims
        form.addRow("Length × width:", dims)

        self.lbl_dims = QLabel("")
        self.lbl_dims.setStyleSheet("color: #2563eb;")
        form.addRow("", self.lbl_dims)

        self.sp_area = self._double_spin(-1e6, 1e6, 2, " ping")
        form.addRow("Floor area:", self.sp_area)
        form.addRow("", QLabel("1 ping = 3.3058 m²"))

        self.sp_height = self._double_spin(-100.0, 100.0, 2, " m")
        self.sp_height.setSingleStep(0.1)
        form.addRow("Ceiling height:", self.sp_height)

        self.lbl_height_note = QLabel("")
        self.lbl_height_note.setStyleSheet("color: #d97706;")
        form.addRow("", self.lbl_height_note)

        self.sp_people = QSpinBox()
        self.sp_people.setRange(-1000, 1000)
        form.addRow("Usual occupants:", self.sp_people)

        root.addWidget(geo)

        # ---- Risk factors -----------------------------------------------------
        risks = QGroupBox("Heat load factors")
        grid = QGridLayout(risks)
        for i, (key, label) in enumerate(self.FLAGS):
            cb = QCheckBox(label)
            cb.stateChanged.connect(self._emit_inputs)
            grid.addWidget(cb, i // 2, i % 2)
            self._flag_boxes[key] = cb

        self.lbl_tin_note = QLabel(
            "Tin roof raises the base rate and also adds its own surcharge."
        )
        self.lbl_tin_note.setWordWrap(True)
        self.lbl_tin_note.setStyleSheet("color: #b91c1c;")
        self.lbl_tin_note.setVisible(False)
        grid.addWidget(self.lbl_tin_note, 2, 0, 1, 2)
        root.addWidget(risks)

        btn_reset = QPushButton("Reset")
        btn_reset.clicked.connect(self.resetRequested.emit)
        root.addWidget(btn_reset, 0, Qt.AlignRight)
        root.addStretch(1)

        # live wiring
        self.sp_area.valueChanged.connect(self._emit_inputs)
        self.sp_height.valueChanged.connect(self._emit_inputs)
        self.sp_people.valueChanged.connect(self._emit_inputs)
        self.sp_length.valueChanged.connect(self._emit_dimensions)
        self.sp_width.valueChanged.connect(self._emit_dimensions)

        self.set_inputs(CalculationInputs())

    @staticmethod
    def _double_spin(lo: float, hi: float, decimals: int, suffix: str) -> QDoubleSpinBox:
        sp = QDoubleSpinBox()
        sp.setRange(lo, hi)
        sp.setDecimals(decimals)
        sp.setSuffix(suffix)
        sp.setKeyboardTracking(True)
        return sp

    # --- data wiring ---------------------------------------------------------

    def set_constants(self, constants: CapacityConstants) -> None:
        self._constants = constants
        self._refresh_notes()

    def set_dimensions_enabled(self, enabled: bool) -> None:
        self._dims.setEnabled(enabled)
        self.sp_area.setReadOnly(enabled)

    def get_inputs(self) -> CalculationInputs:
        return CalculationInputs(
            area=self.sp_area.value(),
            height=self.sp_height.value(),
            people_count=self.sp_people.value(),
            **{k: cb.isChecked() for k, cb in self._flag_boxes.items()},
        )

    def set_inputs(self, inputs: CalculationInputs, length_m: float = 0.0, width_m: float = 0.0) -> None:
        """Push values into the widgets without emitting change signals."""
        widgets = [self.sp_area, self.sp_height, self.sp_people, self.sp_length, self.sp_width,
                   *self._flag_boxes.values()]
        for w in widgets:
            w.blockSignals(True)
        self.sp_area.setValue(inputs.area)
        self.sp_height.setValue(inputs.height)
        self.sp_people.setValue(int(inputs.people_count))
        self.sp_length.setValue(length_m)
        self.sp_width.setValue(width_m)
        for key, cb in self._flag_boxes.items():
            cb.setChecked(bool(getattr(inputs, key)))
        for w in widgets:
            w.blockSignals(False)
        self._refresh_notes()

    def show_area(self, area_ping: float) -> None:
        self.sp_area.blockSignals(True)
        self.sp_area.setValue(area_ping)
        self.sp_area.blockSignals(False)
        self._refresh_notes()

    def _refresh_notes(self) -> None:
        c = self._constants
        if height_correction_applies(self.sp_height.value(), c):
            self.lbl_height_note.setText(
                f"Above {c.STANDARD_HEIGHT:g} m, height correction ×{c.HEIGHT_FACTOR:g}"
            )
        else:
            self.lbl_height_note.setText("")

        length, width = self.sp_length.value(), self.sp_width.value()
        if length > 0 and width > 0:
            conv = area_from_dimensions(length, width)
            self.lbl_dims.setText(f"Area: {conv.square_meters:.2f} m² = {conv.ping:.2f} ping")
        else:
            self.lbl_dims.setText("")

        self.lbl_tin_note.setVisible(self._flag_boxes["is_tin_roof"].isChecked())

    def _emit_inputs(self, *_):
        self._refresh_notes()
        self.inputsEdited.emit(self.get_inputs())

    def _emit_dimensions(self, *_):
        self._refresh_notes()
        self.dimensionsEdited.emit(self.sp_length.value(), self.sp_width.value())
