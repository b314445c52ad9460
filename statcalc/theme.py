"""
Theme and stylesheet for the Statistics Calculator.

Dark Catppuccin stylesheet for the Qt widgets (result cards, history
list, notification banner included) and a helper for switching the
matplotlib rcParams between the dark GUI style and the light export
style.
"""

from .constants import DARK_COLORS, NOTIFY_ERROR


def get_dark_stylesheet() -> str:
    """Generate the application-wide dark stylesheet."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QTabWidget::pane {{
        border: 1px solid {c['border']};
        background-color: {c['bg']};
    }}
    QTabBar::tab {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
        padding: 8px 16px;
        margin-right: 2px;
        border: 1px solid {c['border']};
        border-bottom: none;
        border-top-left-radius: 4px;
        border-top-right-radius: 4px;
    }}
    QTabBar::tab:selected {{
        background-color: {c['bg_widget']};
        color: {c['accent']};
        border-bottom: 2px solid {c['accent']};
    }}
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 6px;
        margin-top: 12px;
        padding-top: 16px;
        font-weight: bold;
        color: {c['accent']};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 12px;
        padding: 0 6px;
    }}
    QPushButton {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 16px;
        min-height: 24px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
        border-color: {c['accent']};
    }}
    QPushButton:pressed {{
        background-color: {c['accent']};
        color: {c['bg']};
    }}
    QLineEdit, QComboBox, QPlainTextEdit {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 4px 8px;
    }}
    QLineEdit:focus, QComboBox:focus, QPlainTextEdit:focus {{
        border-color: {c['accent']};
    }}
    QComboBox QAbstractItemView {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        selection-background-color: {c['selection']};
    }}
    QFrame#resultCard {{
        background-color: {c['bg_widget']};
        border: 1px solid {c['border']};
        border-radius: 8px;
    }}
    QLabel#resultLabel {{
        color: {c['fg_dim']};
        font-size: 11px;
    }}
    QLabel#resultValue {{
        color: {c['fg_bright']};
        font-size: 18px;
        font-weight: bold;
    }}
    QLabel#probabilityValue {{
        color: {c['accent']};
        font-size: 22px;
        font-weight: bold;
    }}
    QListWidget {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
    }}
    QListWidget::item {{
        padding: 6px;
        border-bottom: 1px solid {c['border']};
    }}
    QStatusBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
        border-top: 1px solid {c['border']};
    }}
    QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg']};
    }}
    QMenu {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
    }}
    QMenu::item:selected {{
        background-color: {c['selection']};
    }}
    QLabel {{
        color: {c['fg']};
    }}
    """


def notification_stylesheet(kind: str) -> str:
    """Banner style for a success or error notification."""
    c = DARK_COLORS
    background = c['red'] if kind == NOTIFY_ERROR else c['green']
    return (
        f"QLabel {{ background-color: {background}; color: {c['bg']}; "
        f"font-weight: bold; padding: 8px 14px; border-radius: 4px; }}"
    )


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
