"""
Constants for the Statistics Calculator.

Centralises the GUI colour palette, plot styles, font families,
history and notification settings, probability distribution options,
and the example sample loaded at startup.
"""

# ── Example sample (loaded on startup and by "Load Example") ─────────────
SAMPLE_DATA = (
    12, 15, 18, 22, 24, 27, 30, 32, 35, 40,
    42, 45, 48, 50, 52, 55, 58, 60, 62, 65,
)

# ── History ──────────────────────────────────────────────────────────────
HISTORY_LIMIT = 10
HISTORY_PREVIEW_VALUES = 5
HISTORY_PLACEHOLDER = (
    'No calculations yet. Enter data and click "Calculate" '
    'to see results here.'
)

# ── Notifications ────────────────────────────────────────────────────────
NOTIFICATION_MS = 3000
NOTIFY_SUCCESS = "success"
NOTIFY_ERROR = "error"

# ── Input parser ─────────────────────────────────────────────────────────
# Tokens listed in a single "dropped tokens" warning before truncation
MAX_REPORTED_TOKENS = 10

# ── Probability distributions ────────────────────────────────────────────
DIST_NORMAL = "normal"
DIST_BINOMIAL = "binomial"
DIST_POISSON = "poisson"

DISTRIBUTION_OPTIONS = [
    (DIST_NORMAL, "Normal"),
    (DIST_BINOMIAL, "Binomial (placeholder)"),
    (DIST_POISSON, "Poisson (placeholder)"),
]

# Placeholder values returned for distributions that are not implemented.
# These are NOT probability mass functions.
STUB_PROBABILITIES = {
    DIST_BINOMIAL: 0.5,
    DIST_POISSON: 0.3,
}

DEFAULT_PROB_X = 0.0
DEFAULT_PROB_MEAN = 0.0
DEFAULT_PROB_STD = 1.0

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark Catppuccin-inspired GUI colour palette ──────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'surface0':     '#313244',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'fg_bright':    '#ffffff',
    'accent':       '#89b4fa',
    'accent_hover': '#74c7ec',
    'green':        '#a6e3a1',
    'yellow':       '#f9e2af',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'overlay0':     '#6c7086',
    'selection':    '#45475a',
}

# ── Chart palette ────────────────────────────────────────────────────────
CHART_PALETTE = {
    'bar_fill':       '#4361EE',
    'bar_alpha':      0.7,
    'bar_edge':       '#4361EE',
    'mean_line':      '#F72585',
    'median_line':    '#4CC9F0',
}

# ── Export / light-theme text colours ────────────────────────────────────
EXPORT_TEXT_COLOR = '#333333'
EXPORT_BG_COLOR = '#ffffff'

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_WIDTH_INCHES = 6.0
CLIPBOARD_DPI = 150

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'legend.fontsize':   7,
    'grid.color':        DARK_COLORS['border'],
    'legend.facecolor':  DARK_COLORS['bg_widget'],
    'legend.edgecolor':  DARK_COLORS['border'],
}

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'grid.color':        '#cccccc',
    'legend.facecolor':  '#ffffff',
    'legend.edgecolor':  '#999999',
}
