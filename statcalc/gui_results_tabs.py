"""
Result tabs widget (right side) for the Statistics Calculator.

Four tabs:

- Results: one card per statistic
- Chart: matplotlib bar chart of the raw values, with navigation
  toolbar and export buttons
- History: the last ten calculations, newest first
- Probability: point probability evaluator
"""

import os
from typing import Optional, Sequence, Tuple

from PySide6.QtWidgets import (
    QTabWidget, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QFormLayout, QGroupBox, QFrame, QLabel, QPushButton, QLineEdit,
    QComboBox, QListWidget, QListWidgetItem, QFileDialog, QMessageBox,
)
from PySide6.QtGui import QColor

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .chart_values import render_value_bars
from .constants import (
    DARK_COLORS, PLOT_STYLE_DARK, DISTRIBUTION_OPTIONS, HISTORY_PLACEHOLDER,
    DEFAULT_PROB_X, DEFAULT_PROB_MEAN, DEFAULT_PROB_STD,
)
from .data_model import ProbabilityResult, StatisticsReport
from .export import export_png, copy_to_clipboard
from .formatting import format_probability, format_report_cards
from .history import CalculationHistory, preview, summary
from .theme import apply_plot_style

_CARD_COLUMNS = 4


class _ResultsTab(QWidget):
    """Grid of result cards, one per statistic."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self._grid = QGridLayout()
        self._grid.setSpacing(8)
        layout.addLayout(self._grid)
        layout.addStretch()

        self._placeholder = QLabel("Enter data and click \"Calculate\".")
        self._placeholder.setStyleSheet(f"color: {DARK_COLORS['fg_dim']};")
        self._grid.addWidget(self._placeholder, 0, 0)

    def show_report(self, report: StatisticsReport) -> None:
        self.clear()
        self._placeholder.setVisible(False)
        for i, (label, value) in enumerate(format_report_cards(report)):
            card = QFrame()
            card.setObjectName("resultCard")
            card_layout = QVBoxLayout(card)
            card_layout.setContentsMargins(10, 8, 10, 8)

            lbl = QLabel(label)
            lbl.setObjectName("resultLabel")
            val = QLabel(value)
            val.setObjectName("resultValue")
            val.setWordWrap(True)
            card_layout.addWidget(lbl)
            card_layout.addWidget(val)

            row, col = divmod(i, _CARD_COLUMNS)
            self._grid.addWidget(card, row, col)

    def clear(self) -> None:
        # Keep the placeholder, drop every card
        for i in reversed(range(self._grid.count())):
            widget = self._grid.itemAt(i).widget()
            if widget is not None and widget is not self._placeholder:
                self._grid.removeWidget(widget)
                widget.deleteLater()
        self._placeholder.setVisible(True)


class _ChartTab(QWidget):
    """Chart tab with figure canvas, toolbar, and export buttons."""

    def __init__(self, figsize=(7, 4), parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        toolbar_row = QHBoxLayout()
        toolbar_row.setSpacing(4)

        self._fig = Figure(figsize=figsize)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy to Clipboard")
        self._btn_copy.setFixedHeight(28)
        self._btn_copy.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.setFixedHeight(28)
        self._btn_export.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_export.clicked.connect(lambda *_: self._on_export())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

        self.show_sample(())

    @property
    def fig(self) -> Figure:
        return self._fig

    def show_sample(self, sample: Sequence[float],
                    report: Optional[StatisticsReport] = None) -> None:
        apply_plot_style(PLOT_STYLE_DARK)
        render_value_bars(self._fig, sample, report=report, for_export=False)
        self._canvas.draw_idle()

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage(
                "Chart copied to clipboard", 3000
            )
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")

    def _on_export(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'
        try:
            export_png(self._fig, path)
            self.window().statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 3000
            )
        except (OSError, ValueError) as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )


class _HistoryTab(QWidget):
    """Newest-first list mirroring a ``CalculationHistory``."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        self._list = QListWidget()
        self._list.setWordWrap(True)
        layout.addWidget(self._list)
        self.show_history(CalculationHistory())

    def show_history(self, history: CalculationHistory) -> None:
        self._list.clear()
        if not history:
            item = QListWidgetItem(HISTORY_PLACEHOLDER)
            item.setForeground(QColor(DARK_COLORS['fg_dim']))
            self._list.addItem(item)
            return
        for entry in history:
            self._list.addItem(
                QListWidgetItem(f"{preview(entry)}\n{summary(entry)}")
            )


class _ProbabilityTab(QWidget):
    """Distribution selector, parameter fields and result display."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        grp = QGroupBox("Point Probability")
        form = QFormLayout(grp)
        form.setSpacing(6)

        self._cmb_distribution = QComboBox()
        for key, label in DISTRIBUTION_OPTIONS:
            self._cmb_distribution.addItem(label, key)
        form.addRow("Distribution:", self._cmb_distribution)

        self._edt_x = QLineEdit(str(DEFAULT_PROB_X))
        self._edt_mean = QLineEdit(str(DEFAULT_PROB_MEAN))
        self._edt_std = QLineEdit(str(DEFAULT_PROB_STD))
        form.addRow("x:", self._edt_x)
        form.addRow("Mean (μ):", self._edt_mean)
        form.addRow("Std deviation (σ):", self._edt_std)

        self._btn_calculate = QPushButton("Calculate Probability")
        form.addRow(self._btn_calculate)
        layout.addWidget(grp)

        self._lbl_result = QLabel("—")
        self._lbl_result.setObjectName("probabilityValue")
        layout.addWidget(self._lbl_result)

        self._lbl_note = QLabel("")
        self._lbl_note.setWordWrap(True)
        self._lbl_note.setStyleSheet(
            f"color: {DARK_COLORS['yellow']}; font-size: 11px;"
        )
        layout.addWidget(self._lbl_note)
        layout.addStretch()

    @property
    def calculate_button(self) -> QPushButton:
        return self._btn_calculate

    def get_inputs(self) -> Tuple[str, str, str, str]:
        """Return ``(distribution, x_text, mean_text, std_text)``."""
        return (
            self._cmb_distribution.currentData(),
            self._edt_x.text(),
            self._edt_mean.text(),
            self._edt_std.text(),
        )

    def show_result(self, result: ProbabilityResult) -> None:
        self._lbl_result.setText(format_probability(result))
        if result.is_stub:
            self._lbl_note.setText(
                f"The {result.distribution} distribution is not implemented; "
                f"this is a fixed placeholder value, not a computed "
                f"probability."
            )
        else:
            self._lbl_note.setText("")


class ResultsTabsWidget(QTabWidget):
    """Tabbed container for results, chart, history and probability."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self._tab_results = _ResultsTab()
        self._tab_chart = _ChartTab()
        self._tab_history = _HistoryTab()
        self._tab_probability = _ProbabilityTab()

        self.addTab(self._tab_results, "Results")
        self.addTab(self._tab_chart, "Chart")
        self.addTab(self._tab_history, "History")
        self.addTab(self._tab_probability, "Probability")

    def show_calculation(self, sample: Sequence[float],
                         report: StatisticsReport) -> None:
        """Refresh cards and chart after a calculation."""
        self._tab_results.show_report(report)
        self._tab_chart.show_sample(sample, report)

    def show_history(self, history: CalculationHistory) -> None:
        self._tab_history.show_history(history)

    def clear_all(self, history: CalculationHistory) -> None:
        self._tab_results.clear()
        self._tab_chart.show_sample(())
        self._tab_history.show_history(history)

    @property
    def chart_figure(self) -> Figure:
        return self._tab_chart.fig

    @property
    def probability_tab(self) -> _ProbabilityTab:
        return self._tab_probability
