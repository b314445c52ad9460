import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from statcalc.chart_values import render_value_bars
from statcalc.constants import DARK_COLORS, PLOT_STYLE_LIGHT
from statcalc.export import export_png, render_png_bytes

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _dark_chart():
    fig = Figure(figsize=(7, 4))
    fig.set_facecolor(DARK_COLORS['bg_alt'])
    render_value_bars(fig, [1, 4, 2, 8])
    fig.get_axes()[0].set_facecolor(DARK_COLORS['bg_widget'])
    return fig


def test_export_png_writes_file(tmp_path):
    fig = _dark_chart()
    out = tmp_path / "chart.png"
    export_png(fig, str(out), dpi=50)
    assert out.read_bytes().startswith(PNG_MAGIC)


def _tick_mark_colours(ax):
    return (
        to_hex(ax.xaxis.get_major_ticks()[0].tick1line.get_color()),
        to_hex(ax.yaxis.get_major_ticks()[0].tick1line.get_color()),
    )


def test_export_restores_size_and_colours(tmp_path):
    fig = _dark_chart()
    ax = fig.get_axes()[0]
    ax.tick_params(axis='both', colors=DARK_COLORS['fg_dim'])
    marks_before = _tick_mark_colours(ax)
    export_png(fig, str(tmp_path / "chart.png"), dpi=50, width_inches=3.0)
    assert fig.get_figwidth() == 7
    assert fig.get_figheight() == 4
    assert to_hex(fig.get_facecolor()) == DARK_COLORS['bg_alt']
    assert to_hex(ax.get_facecolor()) == DARK_COLORS['bg_widget']
    assert _tick_mark_colours(ax) == marks_before
    assert marks_before[0] != to_hex(PLOT_STYLE_LIGHT['xtick.color'])


def test_clipboard_render_restores_tick_marks():
    fig = _dark_chart()
    ax = fig.get_axes()[0]
    ax.tick_params(axis='both', colors=DARK_COLORS['fg_dim'])
    marks_before = _tick_mark_colours(ax)
    render_png_bytes(fig, dpi=50)
    assert _tick_mark_colours(ax) == marks_before


def test_export_restores_state_when_save_fails(tmp_path):
    fig = _dark_chart()
    missing_dir = tmp_path / "missing" / "chart.png"
    with pytest.raises(OSError):
        export_png(fig, str(missing_dir), dpi=50)
    assert to_hex(fig.get_facecolor()) == DARK_COLORS['bg_alt']
    assert to_hex(fig.get_facecolor()) != PLOT_STYLE_LIGHT['figure.facecolor']


def test_render_png_bytes():
    data = render_png_bytes(_dark_chart(), dpi=50)
    assert data.startswith(PNG_MAGIC)
