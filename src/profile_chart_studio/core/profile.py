from __future__ import annotations

import math
from typing import Any, Optional, Sequence

import numpy as np

from profile_chart_studio.core.state import ChartState, DragTarget, Sample

# Plot-area margins in pixels; the figure layout and the drag inversion share them.
CHART_MARGIN = {"t": 20, "r": 30, "b": 50, "l": 60}

DEFAULT_DOMAIN = (-1.0, 1.0)


def parse_total_distance(text: object) -> Optional[float]:
    """Return the rescale target, or None when the text is blank, non-numeric or not positive."""
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        raw = str(text).strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def scale_distances(samples: Sequence[Sample], total: float) -> list[Sample]:
    """Rescale distances so the last sample sits at ``total``."""
    if not samples:
        return list(samples)
    span = samples[-1].distance
    with np.errstate(divide="ignore", invalid="ignore"):
        factor = np.float64(total) / np.float64(span)
        return [
            Sample(float(np.float64(s.distance) * factor), s.upper, s.lower)
            for s in samples
        ]


def stretched_samples(samples: Sequence[Sample], total_text: object) -> list[Sample]:
    total = parse_total_distance(total_text)
    if total is None:
        return list(samples)
    return scale_distances(samples, total)


def y_domain(samples: Sequence[Sample]) -> tuple[float, float]:
    """Shared y-axis range: [min(lower) - pad, max(upper) + pad].

    The pad is 10% of the range, or 1 when the range is zero. NaN entries are
    skipped; with nothing finite to measure the default (-1, 1) is used.
    """
    lower = np.asarray([s.lower for s in samples], dtype=float)
    upper = np.asarray([s.upper for s in samples], dtype=float)
    lower = lower[np.isfinite(lower)]
    upper = upper[np.isfinite(upper)]
    if lower.size == 0 and upper.size == 0:
        return DEFAULT_DOMAIN
    y_min = float(lower.min()) if lower.size else float(upper.min())
    y_max = float(upper.max()) if upper.size else float(lower.max())
    pad = (y_max - y_min) * 0.1
    if not pad or not math.isfinite(pad):
        pad = 1.0
    return y_min - pad, y_max + pad


def pixel_to_value(
    pointer_y: float,
    plot_top: float,
    plot_height: float,
    domain: tuple[float, float],
    margin_top: float = CHART_MARGIN["t"],
    margin_bottom: float = CHART_MARGIN["b"],
) -> Optional[float]:
    """Invert a pointer's vertical screen position into a y-axis value.

    ``plot_top`` and ``plot_height`` describe the chart element's bounding box;
    the margins locate the plotting area inside it. Returns None when the
    plotting area has no height.
    """
    height = float(plot_height) - margin_top - margin_bottom
    if height <= 0:
        return None
    offset = float(pointer_y) - float(plot_top) - margin_top
    domain_min, domain_max = domain
    value = domain_max - (offset / height) * (domain_max - domain_min)
    return max(domain_min, min(domain_max, value))


def apply_drag(samples: Sequence[Sample], target: DragTarget, value: float) -> list[Sample]:
    out = list(samples)
    if 0 <= target.index < len(out):
        out[target.index] = out[target.index].with_field(target.curve, float(value))
    return out


def drag_target_from_event(event: Any) -> Optional[DragTarget]:
    if not isinstance(event, dict):
        return None
    try:
        return DragTarget(str(event.get("curve")), int(event.get("index")))
    except (TypeError, ValueError):
        return None


def _pointer_value(state: ChartState, event: dict[str, Any]) -> Optional[float]:
    try:
        pointer_y = float(event["clientY"])
        plot_top = float(event["top"])
        plot_height = float(event["height"])
    except (KeyError, TypeError, ValueError):
        return None
    domain = y_domain(stretched_samples(state.samples, state.total_distance))
    return pixel_to_value(pointer_y, plot_top, plot_height, domain)


def handle_drag_event(state: ChartState, event: Optional[dict[str, Any]]) -> bool:
    """Apply one pointer event to ``state``; returns True when samples changed.

    ``start`` selects the dragged point, ``move`` rewrites its value from the
    pointer position and ``end`` clears the selection. Move and end events may
    repeat the curve and index chosen at start, and an end event may carry the
    final pointer position.
    """
    if not isinstance(event, dict):
        return False
    kind = str(event.get("kind") or "")
    if kind not in ("start", "move", "end"):
        return False
    if event.get("curve") is not None:
        target = drag_target_from_event(event)
        if target is not None and 0 <= target.index < len(state.samples):
            state.drag = target
    if kind == "start":
        return False

    changed = False
    if state.drag is not None and state.drag.index < len(state.samples):
        value = _pointer_value(state, event)
        if value is not None:
            state.samples = apply_drag(state.samples, state.drag, value)
            changed = True
    if kind == "end":
        state.drag = None
    return changed
