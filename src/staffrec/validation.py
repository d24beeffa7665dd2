from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from .errors import InvalidAreaError, InvalidFootfallError
from .io import AREA_ALIASES, FOOTFALL_ALIASES, resolve_field
from .logger import get_logger

logger = get_logger(__name__)

FLAG_COLUMNS = [
    "flag_area_missing",
    "flag_area_nonfinite",
    "flag_area_nonpositive",
    "flag_footfall_nonfinite",
    "flag_footfall_negative",
]


def to_number(value: Any) -> float:
    """
    Numeric coercion for form fields and CSV cells:
      None / "" / whitespace -> 0.0
      numeric text           -> float
      anything else          -> NaN
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return float("nan")


def validate_inputs(area: Any, footfall: Any) -> tuple[float, float]:
    """Single-store checks. Returns (area, footfall) as floats."""
    a = to_number(area)
    f = to_number(footfall)
    if not math.isfinite(a) or a <= 0:
        logger.warning("Rejected square footage %r", area)
        raise InvalidAreaError()
    if not math.isfinite(f) or f < 0:
        logger.warning("Rejected mall footfall %r", footfall)
        raise InvalidFootfallError()
    return a, f


def flag_batch_rows(rows: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Per-row data quality flags for a batch. Rows are never rejected;
    flagged rows still flow through the pipeline (NaN or inf in -> no recommendation out).
    """
    area_raw = [resolve_field(r, AREA_ALIASES) for r in rows]
    foot_raw = [resolve_field(r, FOOTFALL_ALIASES) for r in rows]

    df = pd.DataFrame({"area_raw": area_raw, "footfall_raw": foot_raw}, dtype=object)
    area = pd.Series([to_number(v) for v in area_raw], index=df.index, dtype=float)
    foot = pd.Series([to_number(v) for v in foot_raw], index=df.index, dtype=float)

    blank = df["area_raw"].map(lambda v: v is None or str(v).strip() == "").astype(bool)
    df["flag_area_missing"] = blank
    df["flag_area_nonfinite"] = ~np.isfinite(area)
    df["flag_area_nonpositive"] = (~blank) & np.isfinite(area) & (area <= 0)
    df["flag_footfall_nonfinite"] = ~np.isfinite(foot)
    df["flag_footfall_negative"] = np.isfinite(foot) & (foot < 0)
    df["any_flag"] = df[FLAG_COLUMNS].any(axis=1)

    return df


__all__ = ["FLAG_COLUMNS", "to_number", "validate_inputs", "flag_batch_rows"]
