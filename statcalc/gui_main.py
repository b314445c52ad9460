"""
Main window for the Statistics Calculator.

Hosts the InputPanel (left) and ResultsTabsWidget (right) in a
horizontal splitter, with the notification banner above the tabs, a
menu bar and a status bar.  The window owns the calculation history;
the statistics engine itself is stateless.
"""

import os
import sys

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter,
    QFileDialog, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_DATE, APP_NAME, APP_VERSION
from .constants import NOTIFY_SUCCESS, SAMPLE_DATA
from .export import export_png
from .gui_input_panel import InputPanel
from .gui_notification import NotificationBanner
from .gui_results_tabs import ResultsTabsWidget
from .history import CalculationHistory
from .workflow import run_calculation, run_probability


class CalculatorMainWindow(QMainWindow):
    """Main window for the Statistics Calculator."""

    def __init__(self):
        super().__init__()
        self._history = CalculationHistory()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1000, 680)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready — enter data to begin")
        self._load_example()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        self._notification = NotificationBanner()
        main_layout.addWidget(self._notification)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._input_panel = InputPanel()
        self._input_panel.setMinimumWidth(280)
        self._input_panel.setMaximumWidth(420)

        self._tabs = ResultsTabsWidget()

        splitter.addWidget(self._input_panel)
        splitter.addWidget(self._tabs)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([320, 680])

        main_layout.addWidget(splitter, 1)

    def _setup_menu(self):
        menubar = self.menuBar()

        # ── File menu ────────────────────────────────────────────────
        file_menu = menubar.addMenu("File")

        act_export = QAction("Export Chart...", self)
        act_export.triggered.connect(lambda *_: self._export_chart())
        file_menu.addAction(act_export)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        # ── Examples menu ────────────────────────────────────────────
        examples_menu = menubar.addMenu("Examples")

        act_load_example = QAction("Load Example Data", self)
        act_load_example.triggered.connect(lambda *_: self._load_example())
        examples_menu.addAction(act_load_example)

        # ── Help menu ────────────────────────────────────────────────
        help_menu = menubar.addMenu("Help")

        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        # Lambda wrappers absorb the bool argument from clicked(bool)
        self._input_panel.calculate_button.clicked.connect(
            lambda *_: self._on_calculate()
        )
        self._input_panel.clear_button.clicked.connect(
            lambda *_: self._on_clear()
        )
        self._input_panel.example_button.clicked.connect(
            lambda *_: self._load_example()
        )
        self._tabs.probability_tab.calculate_button.clicked.connect(
            lambda *_: self._on_calculate_probability()
        )

    # ── Slots ────────────────────────────────────────────────────────

    def _notify(self, message: str, kind: str = NOTIFY_SUCCESS):
        self._notification.show_message(message, kind)
        self.statusBar().showMessage(message, 5000)

    def _load_example(self):
        self._input_panel.set_values(SAMPLE_DATA)
        self._notify("Example data loaded successfully!")

    def _on_clear(self):
        self._input_panel.clear()
        self._history.clear()
        self._tabs.clear_all(self._history)
        self._notify("Data cleared!")

    def _on_calculate(self):
        """Slot: parse the input, compute, and refresh every tab."""
        outcome = run_calculation(self._input_panel.text())
        for message in outcome.ignored:
            print(f"[statcalc] {message}", file=sys.stderr)
        if not outcome.ok:
            self._notify(outcome.message, outcome.kind)
            return

        try:
            self._tabs.show_calculation(outcome.sample, outcome.report)
        except Exception as exc:
            QMessageBox.critical(
                self, "Display Error",
                f"An error occurred while displaying results:\n\n{exc}",
            )
            return

        self._history.add(outcome.sample, outcome.report)
        self._tabs.show_history(self._history)
        self._notify(outcome.message, outcome.kind)

    def _on_calculate_probability(self):
        prob_tab = self._tabs.probability_tab
        outcome = run_probability(*prob_tab.get_inputs())
        if outcome.ok:
            prob_tab.show_result(outcome.result)
        self._notify(outcome.message, outcome.kind)

    def _export_chart(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'
        try:
            export_png(self._tabs.chart_figure, path)
            self.statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 5000
            )
        except (OSError, ValueError) as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Date: {APP_DATE}</p>"
            f"<p>Descriptive statistics for a list of numbers: count, "
            f"sum, mean, median, mode, population standard deviation "
            f"and variance, range, quartiles and IQR.</p>"
            f"<p>The probability tab evaluates the normal density. "
            f"Binomial and Poisson entries return fixed placeholder "
            f"values and are labelled as such.</p>",
        )
