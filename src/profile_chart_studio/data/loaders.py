from __future__ import annotations

import base64
import io
from typing import List, Sequence

import pandas as pd

from profile_chart_studio.core.state import SAMPLE_FIELDS, Sample

CSV_FILENAME = "profile.csv"


def decode_upload_contents(contents: str | None) -> str:
    """Decode a ``dcc.Upload`` data URL into text, tolerating legacy encodings."""
    if not contents:
        raise ValueError("No file content provided.")
    if "," not in contents:
        raise ValueError("Invalid upload payload.")
    _meta, b64 = contents.split(",", 1)
    raw = base64.b64decode(b64)
    for enc in ("utf-8-sig", "utf-8", "cp1252", "latin-1"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError("utf-8", raw, 0, 1, "Unable to decode uploaded text content.")


def _profile_columns(df: pd.DataFrame) -> pd.DataFrame:
    lookup = {str(c).strip().lower(): c for c in df.columns}
    if all(name in lookup for name in SAMPLE_FIELDS):
        out = df[[lookup[name] for name in SAMPLE_FIELDS]].copy()
    elif len(df.columns) >= 3:
        out = df.iloc[:, :3].copy()
    else:
        raise ValueError("CSV needs three columns: distance, upper, lower.")
    out.columns = list(SAMPLE_FIELDS)
    return out


def samples_from_csv_text(text: str) -> List[Sample]:
    """
    Accepts a CSV with either:
      A) a header naming distance, upper, lower (any order, extra columns ignored)
      B) any header, using the first three columns in that order

    Unparseable cells become NaN rather than failing the import.
    """
    df = pd.read_csv(io.StringIO(text), skipinitialspace=True)
    df = _profile_columns(df)
    for c in df.columns:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    values = df.to_numpy(dtype=float)
    return [Sample(float(d), float(u), float(lo)) for d, u, lo in values]


def samples_to_frame(samples: Sequence[Sample]) -> pd.DataFrame:
    return pd.DataFrame(
        [s.to_dict() for s in samples],
        columns=list(SAMPLE_FIELDS),
        dtype=float,
    )


def samples_to_csv_text(samples: Sequence[Sample]) -> str:
    return samples_to_frame(samples).to_csv(index=False)

