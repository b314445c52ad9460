"""
Raw-value bar chart for the Statistics Calculator.

One bar per observation in input order, labelled ``Value 1`` …
``Value N``, with the y axis anchored at zero.  When a report is
supplied, dashed reference lines mark the mean and the median.
"""

from typing import Optional, Sequence

import numpy as np
from matplotlib.figure import Figure

from .constants import (
    CHART_PALETTE, DARK_COLORS,
    EXPORT_TEXT_COLOR, EXPORT_BG_COLOR,
)
from .data_model import StatisticsReport


def render_value_bars(
    fig: Figure,
    sample: Sequence[float],
    *,
    report: Optional[StatisticsReport] = None,
    for_export: bool = False,
) -> None:
    """Render the sample as a bar chart on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    sample : sequence of float
        Observations in input order.
    report : StatisticsReport or None
        If given, mean and median reference lines are drawn.
    for_export : bool
        If ``True``, use light-theme colours.
    """
    fig.clf()
    pal = CHART_PALETTE
    text_color = EXPORT_TEXT_COLOR if for_export else DARK_COLORS['fg']

    ax = fig.add_subplot(111)

    values = np.asarray(sample, dtype=float)
    if values.size == 0:
        ax.text(0.5, 0.5, 'No data to display',
                transform=ax.transAxes, ha='center', va='center',
                color=text_color)
        ax.set_xticks([])
        ax.set_yticks([])
        return

    positions = np.arange(values.size)
    labels = [f"Value {i + 1}" for i in range(values.size)]

    ax.bar(
        positions, values,
        color=pal['bar_fill'], alpha=pal['bar_alpha'],
        edgecolor=pal['bar_edge'], linewidth=1,
        label='Data Values', zorder=3,
    )

    if report is not None:
        ax.axhline(
            report.mean, color=pal['mean_line'], linewidth=1.2,
            linestyle='--', zorder=4, label=f"Mean ({report.mean:.2f})",
        )
        ax.axhline(
            report.median, color=pal['median_line'], linewidth=1.2,
            linestyle=':', zorder=4, label=f"Median ({report.median:.2f})",
        )

    # Dense samples get every n-th label so ticks stay readable
    step = max(1, int(np.ceil(values.size / 20)))
    ax.set_xticks(positions[::step])
    ax.set_xticklabels(labels[::step], rotation=45, ha='right')

    # Bars start at zero; all-negative samples still need zero on top
    low, high = float(values.min()), float(values.max())
    ax.set_ylim(min(0.0, low * 1.05), max(0.0, high * 1.05) or 1.0)

    ax.set_xlabel("Observation", fontsize=8)
    ax.set_ylabel("Value", fontsize=8)
    ax.set_title(f"Data Values (n = {values.size})",
                 fontsize=10, fontweight='bold', color=text_color)

    legend = ax.legend(fontsize=7, framealpha=0.9)
    if for_export:
        legend.get_frame().set_facecolor(EXPORT_BG_COLOR)
    ax.grid(axis='y', linewidth=0.4, alpha=0.5, zorder=0)

    fig.tight_layout(pad=1.5)
