import math

from matplotlib.ticker import FuncFormatter

# Plotly equivalents of the tick formatters below.
DISTANCE_TICKFORMAT = ".0f"
DEPTH_TICKFORMAT = ".2~f"


def format_distance_tick(value: float) -> str:
    if not math.isfinite(value):
        return ""
    return str(int(math.floor(value + 0.5)))


def format_depth_tick(value: float) -> str:
    """Two decimals with trailing zeros trimmed: 1.50 -> 1.5, 2.00 -> 2."""
    if not math.isfinite(value):
        return ""
    text = f"{value:.2f}"
    if text.endswith(".00"):
        return text[:-3]
    if text.endswith("0"):
        return text[:-1]
    return text


def fmt_distance_ticks(ax):
    ax.xaxis.set_major_formatter(FuncFormatter(lambda v, pos: format_distance_tick(v)))


def fmt_depth_ticks(ax):
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, pos: format_depth_tick(v)))
