# capcalc/ui/results_panel.py
from __future__ import annotations

from typing import List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QWidget, QFormLayout, QLabel, QVBoxLayout, QGroupBox

from ..core.calculation import load_breakdown, total_kw
from ..core.models import CalculationResults
from ..core.validation import ValidationIssue


class ResultsPanel(QWidget):
    """Read-only view of the latest CalculationResults."""

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        box = QGroupBox("Recommended capacity")
        form = QFormLayout(box)
        form.setLabelAlignment(Qt.AlignRight)

        self.lbl_kcal = QLabel("-")
        self.lbl_kcal.setStyleSheet("font-size: 22px; font-weight: 600; color: #0D4FA2;")
        self.lbl_kw = QLabel("-")
        self.lbl_tons = QLabel("-")
        self.lbl_btu = QLabel("-")
        self.lbl_h = QLabel("-")
        self.lbl_env = QLabel("-")
        self.lbl_base = QLabel("-")
        self.lbl_extra = QLabel("-")

        form.addRow("Heat load:", self.lbl_kcal)
        form.addRow("Power:", self.lbl_kw)
        form.addRow("Tons:", self.lbl_tons)
        form.addRow("BTU/h:", self.lbl_btu)
        form.addRow("Height factor:", self.lbl_h)
        form.addRow("Environment factor:", self.lbl_env)
        form.addRow("Base load:", self.lbl_base)
        form.addRow("Additional load:", self.lbl_extra)
        root.addWidget(box)

        self.lbl_advice = QLabel("")
        self.lbl_advice.setWordWrap(True)
        root.addWidget(self.lbl_advice)

        self.lbl_issues = QLabel("")
        self.lbl_issues.setWordWrap(True)
        self.lbl_issues.setStyleSheet("color: #b91c1c;")
        root.addWidget(self.lbl_issues)
        root.addStretch(1)

    def show_results(self, results: Optional[CalculationResults]) -> None:
        if results is None:
            return
        kw = total_kw(results)
        self.lbl_kcal.setText(f"{results.total_kcal:,} kcal/h")
        self.lbl_kw.setText(f"{kw:.2f} kW ({results.total_watts:,} W)")
        self.lbl_tons.setText(f"{results.taiwan_tons}")
        self.lbl_btu.setText(f"{results.recommended_btu:,}")
        self.lbl_h.setText(f"×{results.factors.height_multiplier}")
        self.lbl_env.setText(f"×{results.factors.environmental_multiplier}")

        (_, base), (_, extra) = load_breakdown(results)
        self.lbl_base.setText(f"{base:,} kcal/h")
        self.lbl_extra.setText(f"{extra:,} kcal/h")

        self.lbl_advice.setText(
            f"Choose an inverter unit rated above {results.total_kcal} kcal/h "
            f"(about {kw:.2f} kW). When in doubt, buy larger rather than smaller."
        )

    def show_issues(self, issues: List[ValidationIssue]) -> None:
        self.lbl_issues.setText("\n".join(f"{i.field}: {i.message}" for i in issues))
