"""
Data input panel (left side) for the Statistics Calculator.

Free-text box for the sample plus the Calculate, Clear and Load Example
buttons.  The panel only owns the widgets; the main window wires the
buttons to the calculation workflow.
"""

from typing import Sequence

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel,
    QPushButton, QPlainTextEdit,
)

from .constants import DARK_COLORS
from .formatting import format_values


class InputPanel(QWidget):
    """Left-side panel with the sample text box and action buttons."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        grp_data = QGroupBox("Data")
        data_layout = QVBoxLayout(grp_data)
        data_layout.setSpacing(4)

        hint = QLabel(
            "Enter numbers separated by commas, semicolons, spaces "
            "or new lines."
        )
        hint.setWordWrap(True)
        hint.setStyleSheet(f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;")
        data_layout.addWidget(hint)

        self._edt_data = QPlainTextEdit()
        self._edt_data.setPlaceholderText("e.g. 12, 15, 18, 22, 24")
        self._edt_data.setMinimumHeight(160)
        data_layout.addWidget(self._edt_data, 1)

        layout.addWidget(grp_data, 1)

        # ── Actions ──────────────────────────────────────────────────
        c = DARK_COLORS
        self._btn_calculate = QPushButton("Calculate")
        self._btn_calculate.setStyleSheet(
            f"QPushButton {{ background-color: {c['accent']}; "
            f"color: {c['bg']}; font-weight: bold; "
            f"font-size: 14px; padding: 10px; }}"
            f"QPushButton:hover {{ background-color: {c['accent_hover']}; }}"
        )
        layout.addWidget(self._btn_calculate)

        row = QHBoxLayout()
        row.setSpacing(4)
        self._btn_clear = QPushButton("Clear")
        self._btn_example = QPushButton("Load Example")
        row.addWidget(self._btn_clear)
        row.addWidget(self._btn_example)
        layout.addLayout(row)

    # ── Public API ───────────────────────────────────────────────────

    def text(self) -> str:
        return self._edt_data.toPlainText()

    def set_values(self, values: Sequence[float]) -> None:
        """Replace the text box contents with *values*, comma-separated."""
        self._edt_data.setPlainText(format_values(values))

    def clear(self) -> None:
        self._edt_data.clear()

    @property
    def calculate_button(self) -> QPushButton:
        return self._btn_calculate

    @property
    def clear_button(self) -> QPushButton:
        return self._btn_clear

    @property
    def example_button(self) -> QPushButton:
        return self._btn_example
