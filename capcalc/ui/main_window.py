# capcalc/ui/main_window.py
import json

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QAction, QCheckBox, QMessageBox, QInputDialog
)
from PyQt5.QtCore import Qt

from ..version import APP_NAME, APP_VERSION
from ..core.models import CalculationInputs
from ..services.logger import get_logger
from ..services.session import CalculatorSession
from ..services.settings import SettingsManager
from ..utils.qt import signals

from .room_form import RoomForm
from .results_panel import ResultsPanel


class MainWindow(QMainWindow):
    def __init__(self, settings: SettingsManager, parent=None):
        super().__init__(parent)
        self._log = get_logger()
        self.settings = settings

        self.setWindowTitle(APP_NAME)
        self.resize(900, 600)

        # ---- Widgets --------------------------------------------------------
        constants = self.settings.constants()
        self.form = RoomForm(constants, parent=self)
        self.results_panel = ResultsPanel(parent=self)

        central = QWidget()
        lay = QHBoxLayout(central)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self.form, 1)
        lay.addWidget(self.results_panel, 1)
        self.setCentralWidget(central)

        # ---- Signals --------------------------------------------------------
        signals.results_changed.connect(self.results_panel.show_results)
        signals.inputs_changed.connect(self._on_inputs_changed)
        signals.constants_changed.connect(self._on_constants_changed)

        self.form.inputsEdited.connect(signals.inputs_changed.emit)
        self.form.dimensionsEdited.connect(self._on_dimensions_changed)
        self.form.resetRequested.connect(self._on_reset)

        # Session computes once on construction; results land via the signal
        self.session = CalculatorSession(
            inputs=self.form.get_inputs(),
            constants=constants,
            on_results=signals.results_changed.emit,
        )

        # dimensions toggle
        self.cb_dims = QCheckBox("Enter length × width")
        self.cb_dims.setChecked(self.settings.use_dimensions)
        self.cb_dims.stateChanged.connect(self._toggle_dimensions)
        self.form.set_dimensions_enabled(self.settings.use_dimensions)
        self.statusBar().addPermanentWidget(self.cb_dims)
        self.statusBar().showMessage("Ready")

        self._build_menu()

    # ======================= Menu / Actions =================================
    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("File")

        act_reset = QAction("Reset", self)
        act_reset.triggered.connect(self._on_reset)
        filem.addAction(act_reset)

        act_edit = QAction("Edit regional constants…", self)
        act_edit.triggered.connect(self._edit_constants)
        filem.addAction(act_edit)

        act_reload = QAction("Reload regional constants", self)
        act_reload.triggered.connect(self._reload_constants)
        filem.addAction(act_reload)

        act_quit = QAction("Quit", self)
        act_quit.triggered.connect(self.close)
        filem.addAction(act_quit)

        helpm = m.addMenu("Help")
        act_about = QAction("About", self)
        act_about.triggered.connect(self._about)
        helpm.addAction(act_about)

    def _about(self):
        QMessageBox.information(
            self, f"About {APP_NAME}",
            f"{APP_NAME} {APP_VERSION}\n\nAir-conditioning capacity estimate "
            f"from room area, ceiling height, occupancy and heat load factors.\n\n"
            f"Settings: {self.settings.path}",
        )

    # ======================= Internals ======================================
    def _on_inputs_changed(self, inputs: CalculationInputs):
        # the area box is rounded for display; an unchanged box keeps the exact area
        keep_area = self.settings.use_dimensions or (
            round(inputs.area, 2) == round(self.session.inputs.area, 2)
        )
        self.session.apply_form(inputs, keep_area=keep_area)
        self._show_issues()

    def _on_dimensions_changed(self, length_m: float, width_m: float):
        self.session.set_dimensions(length_m, width_m)
        self.form.show_area(self.session.inputs.area)
        self._show_issues()

    def _on_constants_changed(self, constants):
        self.form.set_constants(constants)
        self.session.set_constants(constants)
        self._show_issues()

    def _on_reset(self):
        self.session.reset()
        self.form.set_inputs(self.session.inputs)
        self._show_issues()
        self.statusBar().showMessage("Inputs reset")

    def _edit_constants(self):
        current = json.dumps(self.settings.get("constants", {}), indent=2)
        text, ok = QInputDialog.getMultiLineText(
            self, "Regional constants",
            "Overrides as JSON, e.g. {\"TIN_ROOF_KCAL_PER_PING\": 800}:", current,
        )
        if not ok:
            return
        try:
            overrides = json.loads(text or "{}")
            if not isinstance(overrides, dict):
                raise ValueError("expected a JSON object")
            table = self.settings.set_constant_overrides(overrides)
        except (KeyError, ValueError) as e:
            self._log.warning("Rejected constants overrides: %s", e)
            QMessageBox.warning(self, "Invalid constants", f"Overrides not saved:\n\n{e}")
            return
        signals.constants_changed.emit(table)
        self.statusBar().showMessage("Regional constants updated")

    def _reload_constants(self):
        self.settings.load()
        signals.constants_changed.emit(self.settings.constants())
        self.statusBar().showMessage(f"Constants reloaded from {self.settings.path.name}")

    def _toggle_dimensions(self, state: int):
        enabled = state == Qt.Checked
        self.settings.use_dimensions = enabled
        self.form.set_dimensions_enabled(enabled)

    def _show_issues(self):
        self.results_panel.show_issues(self.session.issues)
        if self.session.issues:
            self.statusBar().showMessage("Check the highlighted inputs")
        else:
            self.statusBar().showMessage("Ready")
