from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from profile_chart_studio.core.profile import stretched_samples, y_domain
from profile_chart_studio.core.state import ChartState

UPPER_COLOR = "#22c55e"
LOWER_COLOR = "#2563eb"
X_LABEL = "Distance (m)"
Y_LABEL = "Depth (m)"


@dataclass
class ProfileTrace:
    curve: str
    label: str
    color: str
    x: np.ndarray
    y: np.ndarray


@dataclass
class ProfilePlotData:
    traces: list[ProfileTrace] = field(default_factory=list)
    domain: tuple[float, float] = (-1.0, 1.0)
    x_label: str = X_LABEL
    y_label: str = Y_LABEL


def prepare_profile_plot(state: ChartState) -> ProfilePlotData:
    """Stretch distances, compute the shared y-domain and lay out both curves."""
    samples = stretched_samples(state.samples, state.total_distance)
    x = np.asarray([s.distance for s in samples], dtype=float)
    data = ProfilePlotData(domain=y_domain(samples))
    if state.show_upper:
        data.traces.append(
            ProfileTrace(
                curve="upper",
                label="Upper",
                color=UPPER_COLOR,
                x=x,
                y=np.asarray([s.upper for s in samples], dtype=float),
            )
        )
    data.traces.append(
        ProfileTrace(
            curve="lower",
            label="Lower",
            color=LOWER_COLOR,
            x=x,
            y=np.asarray([s.lower for s in samples], dtype=float),
        )
    )
    return data
