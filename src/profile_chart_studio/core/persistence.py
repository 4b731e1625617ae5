from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any, MutableMapping

from profile_chart_studio.core.rows import coerce_number
from profile_chart_studio.core.state import (
    DEFAULT_SHOW_UPPER,
    DEFAULT_TOTAL_DISTANCE,
    DEMO_SAMPLES,
    ChartState,
    Sample,
)
from profile_chart_studio.utils.log import log_event

STORAGE_KEY = "profileChartState"


@dataclass
class LoadResult:
    """Outcome of reading the persisted slot.

    ``ok`` is False when nothing usable was stored; ``warnings`` lists every
    field that fell back to its default.
    """

    state: ChartState
    ok: bool
    source: str = "default"
    warnings: list[str] = field(default_factory=list)


def _jsonable_number(value: float) -> Any:
    return value if math.isfinite(value) else None


def dump_chart_state(state: ChartState) -> dict[str, Any]:
    return {
        "rows": [
            {
                "distance": _jsonable_number(s.distance),
                "upper": _jsonable_number(s.upper),
                "lower": _jsonable_number(s.lower),
            }
            for s in state.samples
        ],
        "totalDist": state.total_distance,
        "showUpper": bool(state.show_upper),
    }


def _rows_from_payload(rows: Any) -> list[Sample] | None:
    if not isinstance(rows, list):
        return None
    out: list[Sample] = []
    for item in rows:
        if not isinstance(item, dict):
            return None
        out.append(
            Sample(
                coerce_number(item.get("distance")),
                coerce_number(item.get("upper")),
                coerce_number(item.get("lower")),
            )
        )
    return out


def load_chart_state(raw: Any) -> LoadResult:
    """Build chart state from a stored payload, falling back field by field."""
    if raw is None:
        return LoadResult(state=ChartState(), ok=False, warnings=["No stored state."])
    if not isinstance(raw, dict):
        return LoadResult(
            state=ChartState(),
            ok=False,
            warnings=[f"Stored state is a {type(raw).__name__}, expected an object."],
        )

    warnings: list[str] = []
    rows = _rows_from_payload(raw.get("rows"))
    if rows is None:
        warnings.append("rows missing or malformed; using demo rows.")
        rows = list(DEMO_SAMPLES)
    total = raw.get("totalDist")
    if not isinstance(total, str):
        warnings.append("totalDist missing or not text; using default.")
        total = DEFAULT_TOTAL_DISTANCE
    show_upper = raw.get("showUpper")
    if not isinstance(show_upper, bool):
        warnings.append("showUpper missing or not a boolean; using default.")
        show_upper = DEFAULT_SHOW_UPPER
    state = ChartState(samples=rows, total_distance=total, show_upper=show_upper)
    return LoadResult(state=state, ok=True, source="stored", warnings=warnings)


class SlotStorage:
    """Single named slot in a key/value store holding JSON text.

    ``backend`` is any mutable mapping (browser storage bridge, a dict in
    tests). Reads never raise.
    """

    def __init__(self, backend: MutableMapping[str, str], key: str = STORAGE_KEY):
        self.backend = backend
        self.key = key

    def load(self) -> LoadResult:
        try:
            text = self.backend.get(self.key)
        except Exception as exc:
            log_event("persistence.load", f"storage unavailable: {exc}")
            return LoadResult(state=ChartState(), ok=False, warnings=[f"Storage unavailable: {exc}"])
        if text is None:
            return load_chart_state(None)
        try:
            raw = json.loads(text)
        except (TypeError, ValueError) as exc:
            log_event("persistence.load", f"malformed slot {self.key}: {exc}")
            return LoadResult(state=ChartState(), ok=False, warnings=[f"Malformed stored state: {exc}"])
        result = load_chart_state(raw)
        if result.warnings:
            log_event("persistence.load", "; ".join(result.warnings))
        return result

    def save(self, state: ChartState) -> None:
        self.backend[self.key] = json.dumps(dump_chart_state(state))

    def clear(self) -> None:
        self.backend.pop(self.key, None)
