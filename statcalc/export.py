"""
Export utilities for the Statistics Calculator.

PNG export and clipboard copy of the value chart.  The dark GUI theme
is swapped for a white-background theme while the image is written and
restored afterwards inside ``try/finally``, so the on-screen chart is
never left in the export colours.
"""

import io

from matplotlib.figure import Figure

from .constants import (
    EXPORT_DPI, EXPORT_WIDTH_INCHES, CLIPBOARD_DPI,
    PLOT_STYLE_LIGHT, DARK_COLORS,
)

_DARK_FOREGROUNDS = frozenset((
    DARK_COLORS['fg'], DARK_COLORS['fg_dim'], DARK_COLORS['fg_bright'],
))


def _save_figure_state(fig: Figure) -> dict:
    """Capture every colour ``_apply_light_theme`` will change."""
    state = {'fig_facecolor': fig.get_facecolor(), 'axes_states': []}
    for ax in fig.get_axes():
        ax_state = {
            'facecolor': ax.get_facecolor(),
            'title_color': ax.title.get_color(),
            'xlabel_color': ax.xaxis.label.get_color(),
            'ylabel_color': ax.yaxis.label.get_color(),
            'spine_colors': {
                name: spine.get_edgecolor()
                for name, spine in ax.spines.items()
            },
            'xtick_label_colors': [t.get_color() for t in ax.get_xticklabels()],
            'ytick_label_colors': [t.get_color() for t in ax.get_yticklabels()],
            'grid_colors': [
                line.get_color()
                for line in ax.get_xgridlines() + ax.get_ygridlines()
            ],
            'text_colors': [t.get_color() for t in ax.texts],
            'xtick_mark_color': None,
            'ytick_mark_color': None,
        }
        # tick_params recolours marks and labels together, so the mark
        # colour is taken from the first major tick on each axis
        xticks = ax.xaxis.get_major_ticks()
        if xticks:
            ax_state['xtick_mark_color'] = xticks[0].tick1line.get_color()
        yticks = ax.yaxis.get_major_ticks()
        if yticks:
            ax_state['ytick_mark_color'] = yticks[0].tick1line.get_color()

        legend = ax.get_legend()
        if legend is not None:
            frame = legend.get_frame()
            ax_state['legend_facecolor'] = frame.get_facecolor()
            ax_state['legend_edgecolor'] = frame.get_edgecolor()
            ax_state['legend_text_colors'] = [
                t.get_color() for t in legend.get_texts()
            ]
        state['axes_states'].append(ax_state)
    return state


def _apply_light_theme(fig: Figure) -> None:
    light = PLOT_STYLE_LIGHT
    fig.set_facecolor(light['figure.facecolor'])

    for ax in fig.get_axes():
        ax.set_facecolor(light['axes.facecolor'])
        ax.title.set_color(light['text.color'])
        ax.xaxis.label.set_color(light['axes.labelcolor'])
        ax.yaxis.label.set_color(light['axes.labelcolor'])
        for spine in ax.spines.values():
            spine.set_edgecolor(light['axes.edgecolor'])
        ax.tick_params(axis='x', colors=light['xtick.color'])
        ax.tick_params(axis='y', colors=light['ytick.color'])

        for line in ax.get_xgridlines() + ax.get_ygridlines():
            line.set_color(light['grid.color'])

        legend = ax.get_legend()
        if legend is not None:
            frame = legend.get_frame()
            frame.set_facecolor(light['legend.facecolor'])
            frame.set_edgecolor(light['legend.edgecolor'])
            for text in legend.get_texts():
                text.set_color(light['text.color'])

        # Only dark-theme foregrounds are converted; explicit colours stay
        for text in ax.texts:
            if text.get_color() in _DARK_FOREGROUNDS:
                text.set_color(light['text.color'])


def _restore_figure_state(fig: Figure, state: dict) -> None:
    fig.set_facecolor(state['fig_facecolor'])

    for ax, ax_state in zip(fig.get_axes(), state['axes_states']):
        ax.set_facecolor(ax_state['facecolor'])
        ax.title.set_color(ax_state['title_color'])
        ax.xaxis.label.set_color(ax_state['xlabel_color'])
        ax.yaxis.label.set_color(ax_state['ylabel_color'])
        for name, color in ax_state['spine_colors'].items():
            ax.spines[name].set_edgecolor(color)

        # Marks first: tick_params also resets label colours, which are
        # restored individually afterwards
        if ax_state['xtick_mark_color'] is not None:
            ax.tick_params(axis='x', colors=ax_state['xtick_mark_color'])
        if ax_state['ytick_mark_color'] is not None:
            ax.tick_params(axis='y', colors=ax_state['ytick_mark_color'])

        for label, color in zip(ax.get_xticklabels(),
                                ax_state['xtick_label_colors']):
            label.set_color(color)
        for label, color in zip(ax.get_yticklabels(),
                                ax_state['ytick_label_colors']):
            label.set_color(color)
        for line, color in zip(ax.get_xgridlines() + ax.get_ygridlines(),
                               ax_state['grid_colors']):
            line.set_color(color)
        for text, color in zip(ax.texts, ax_state['text_colors']):
            text.set_color(color)

        legend = ax.get_legend()
        if legend is not None and 'legend_facecolor' in ax_state:
            frame = legend.get_frame()
            frame.set_facecolor(ax_state['legend_facecolor'])
            frame.set_edgecolor(ax_state['legend_edgecolor'])
            for text, color in zip(legend.get_texts(),
                                   ax_state['legend_text_colors']):
                text.set_color(color)


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> None:
    """Export *fig* as a light-theme PNG.

    The figure is temporarily resized to *width_inches* (aspect ratio
    kept) and recoloured; size and colours are restored even if
    ``savefig`` raises.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output path, normally ending in ``.png``.
    dpi : int
        Export resolution.
    width_inches : float
        Exported figure width.
    """
    state = _save_figure_state(fig)
    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)
        _apply_light_theme(fig)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)
        _restore_figure_state(fig, state)


def render_png_bytes(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bytes:
    """Return *fig* as light-theme PNG bytes without touching the disk."""
    buf = io.BytesIO()
    state = _save_figure_state(fig)
    try:
        _apply_light_theme(fig)
        fig.savefig(
            buf, format='png', dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
    finally:
        _restore_figure_state(fig, state)
    return buf.getvalue()


def copy_to_clipboard(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bool:
    """Copy *fig* to the system clipboard as an image.

    Returns ``True`` on success, ``False`` if no clipboard is available.
    """
    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QImage

    img = QImage()
    if not img.loadFromData(render_png_bytes(fig, dpi=dpi)):
        return False

    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False
    clipboard.setImage(img)
    return True
