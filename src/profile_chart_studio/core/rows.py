from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Sequence

from profile_chart_studio.core.state import SAMPLE_FIELDS, Sample


def coerce_number(value: Any) -> float:
    """Convert table input to float without rejecting anything.

    Blank text counts as 0; anything unparseable becomes NaN.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def add_row(samples: Sequence[Sample]) -> list[Sample]:
    last = samples[-1].distance if samples else None
    distance = 0.0 if last is None else last + 1
    return [*samples, Sample(distance, 0.0, 0.0)]


def delete_row(samples: Sequence[Sample], index: int) -> list[Sample]:
    return [s for i, s in enumerate(samples) if i != index]


def edit_row(samples: Sequence[Sample], index: int, field: str, value: Any) -> list[Sample]:
    if field not in SAMPLE_FIELDS:
        raise KeyError(f"Unknown sample field: {field}")
    out = list(samples)
    if 0 <= index < len(out):
        out[index] = out[index].with_field(field, coerce_number(value))
    return out


def sample_from_record(record: dict[str, Any]) -> Sample:
    return Sample(
        coerce_number(record.get("distance")),
        coerce_number(record.get("upper")),
        coerce_number(record.get("lower")),
    )


def table_records(samples: Sequence[Sample]) -> list[dict[str, Any]]:
    """Records for the editable table; NaN is shown as an empty cell."""
    out: list[dict[str, Any]] = []
    for i, s in enumerate(samples, start=1):
        rec: dict[str, Any] = {"order": i}
        for name, value in s.to_dict().items():
            rec[name] = value if math.isfinite(value) else None
        out.append(rec)
    return out


def _same(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b


def diff_table_edit(
    old: Sequence[Sample],
    records: Sequence[dict[str, Any]],
) -> list[tuple[str, int, Optional[str], Any]]:
    """Identify the row operations that turn ``old`` into ``records``.

    A table with one row fewer yields ``[("delete", index, None, None)]``.
    A table of the same length yields one ``("edit", index, field, raw)`` per
    changed cell, so a pasted block comes back as several edits. Anything
    else, including no change, yields an empty list.
    """
    if len(records) == len(old) - 1:
        for i, rec in enumerate(records):
            current = sample_from_record(rec)
            if not all(_same(getattr(current, f), getattr(old[i], f)) for f in SAMPLE_FIELDS):
                return [("delete", i, None, None)]
        return [("delete", len(old) - 1, None, None)]
    if len(records) != len(old):
        return []
    ops: list[tuple[str, int, Optional[str], Any]] = []
    for i, rec in enumerate(records):
        for name in SAMPLE_FIELDS:
            raw = rec.get(name)
            if not _same(coerce_number(raw), getattr(old[i], name)):
                ops.append(("edit", i, name, raw))
    return ops


def apply_table_ops(
    samples: Sequence[Sample],
    ops: Iterable[tuple[str, int, Optional[str], Any]],
) -> list[Sample]:
    out = list(samples)
    for kind, index, field, raw in ops:
        if kind == "delete":
            out = delete_row(out, index)
        else:
            out = edit_row(out, index, field, raw)
    return out
