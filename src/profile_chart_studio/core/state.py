from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

CURVES = ("upper", "lower")
SAMPLE_FIELDS = ("distance", "upper", "lower")

DEFAULT_TOTAL_DISTANCE = "10"
DEFAULT_SHOW_UPPER = True


@dataclass(frozen=True)
class Sample:
    """One (distance, upper, lower) point of the profile."""

    distance: float
    upper: float
    lower: float

    def with_field(self, name: str, value: float) -> "Sample":
        if name not in SAMPLE_FIELDS:
            raise KeyError(f"Unknown sample field: {name}")
        return replace(self, **{name: value})

    def to_dict(self) -> dict[str, float]:
        return {"distance": self.distance, "upper": self.upper, "lower": self.lower}


DEMO_SAMPLES: tuple[Sample, ...] = (
    Sample(0.0, 0.0, -1.2),
    Sample(2.0, 0.0, -1.3),
    Sample(5.0, 0.0, -1.3),
    Sample(8.0, 0.0, -1.3),
    Sample(10.0, 0.0, -1.2),
)


@dataclass(frozen=True)
class DragTarget:
    curve: str
    index: int

    def __post_init__(self) -> None:
        if self.curve not in CURVES:
            raise ValueError(f"Unknown curve: {self.curve}")


@dataclass
class ChartState:
    """Profile chart view state; the drag target is never persisted."""

    samples: list[Sample] = field(default_factory=lambda: list(DEMO_SAMPLES))
    total_distance: str = DEFAULT_TOTAL_DISTANCE
    show_upper: bool = DEFAULT_SHOW_UPPER
    drag: Optional[DragTarget] = None

    def reset(self) -> None:
        self.samples = list(DEMO_SAMPLES)
        self.total_distance = DEFAULT_TOTAL_DISTANCE
        self.show_upper = DEFAULT_SHOW_UPPER
        self.drag = None


@dataclass
class DocumentState:
    template_name: str = ""
    template_text: str = ""
    data_name: str = ""
    data_text: str = "{}"
    error: Optional[str] = None


def set_total_distance(state: ChartState, text: object) -> None:
    state.total_distance = "" if text is None else str(text)


def set_show_upper(state: ChartState, show: bool) -> None:
    state.show_upper = bool(show)


def select_template(state: DocumentState, name: str, templates: Mapping[str, str]) -> None:
    state.template_name = str(name)
    state.template_text = templates[name]


def select_sample(state: DocumentState, name: str, samples: Mapping[str, str]) -> None:
    state.data_name = str(name)
    state.data_text = samples[name]
