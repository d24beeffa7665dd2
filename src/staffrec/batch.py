# src/staffrec/batch.py
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .errors import EmptyBatchError, NoResultsError
from .heuristic import predict_continuous
from .io import AREA_ALIASES, FOOTFALL_ALIASES, Record, resolve_field
from .logger import get_logger
from .staffing import RoundingPolicy, apply_policy
from .validation import flag_batch_rows, to_number

logger = get_logger(__name__)

CONTINUOUS_COLUMN = "predicted_continuous"
RECOMMENDED_COLUMN = "recommended_staff"


@dataclass(frozen=True)
class BatchSummary:
    rows: int
    flagged_rows: int
    total_recommended: int
    mean_recommended: float
    mean_continuous: float


# -----------------------------
# Core per-row computation
# -----------------------------
def _process_row(row: Mapping[str, Any], policy: RoundingPolicy) -> Record:
    area = to_number(resolve_field(row, AREA_ALIASES))
    footfall = to_number(resolve_field(row, FOOTFALL_ALIASES))

    cont = predict_continuous(area, footfall)
    out: Record = dict(row)
    out[CONTINUOUS_COLUMN] = round(cont, 3)
    out[RECOMMENDED_COLUMN] = apply_policy(cont, policy)
    return out


# -----------------------------
# Public API
# -----------------------------
def process_batch(rows: Optional[Sequence[Mapping[str, Any]]], policy: RoundingPolicy) -> List[Record]:
    """
    Applies the heuristic to every uploaded row with one shared rounding policy.

    Each output row is a copy of the input row plus:
      predicted_continuous (3 dp)
      recommended_staff (None when the inputs were not numeric)

    Order is preserved and no row is dropped.
    """
    if not rows:
        raise EmptyBatchError()

    out = [_process_row(r, policy) for r in rows]
    missing = sum(1 for r in out if r[RECOMMENDED_COLUMN] is None)
    logger.info("Processed batch: %d rows (%d without a recommendation), policy=%s", len(out), missing, policy)
    return out


def _encode_cell(value: Any) -> str:
    if isinstance(value, float):
        # NaN / inf have no JSON form: written as "" like a missing recommendation
        if not math.isfinite(value):
            value = None
        elif value.is_integer():
            value = int(value)
    return json.dumps("" if value is None else value, ensure_ascii=False, allow_nan=False)


def download_csv(results: Optional[Sequence[Mapping[str, Any]]]) -> str:
    """
    Serializes batch results to CSV text.

    Header = keys of the first row (all rows are assumed to share them).
    Each cell is JSON-encoded: strings double-quoted with backslash escapes,
    numbers bare (2.0 is written as 2), missing and non-finite values as "".
    This is not RFC 4180 quoting.
    """
    if not results:
        raise NoResultsError()

    headers = list(results[0].keys())
    lines = [",".join(headers)]
    for row in results:
        lines.append(",".join(_encode_cell(row.get(h)) for h in headers))
    return "\n".join(lines)


def summarize_batch(results: Sequence[Mapping[str, Any]]) -> BatchSummary:
    if not results:
        return BatchSummary(rows=0, flagged_rows=0, total_recommended=0, mean_recommended=np.nan, mean_continuous=np.nan)

    rec = np.array(
        [np.nan if r.get(RECOMMENDED_COLUMN) is None else float(r[RECOMMENDED_COLUMN]) for r in results],
        dtype=float,
    )
    cont = np.array([float(r.get(CONTINUOUS_COLUMN, np.nan)) for r in results], dtype=float)
    flags = flag_batch_rows(results)

    rec = rec[np.isfinite(rec)]
    cont = cont[np.isfinite(cont)]
    return BatchSummary(
        rows=len(results),
        flagged_rows=int(flags["any_flag"].sum()),
        total_recommended=int(np.sum(rec)),
        mean_recommended=float(np.mean(rec)) if rec.size else np.nan,
        mean_continuous=float(np.mean(cont)) if cont.size else np.nan,
    )


def results_frame(
    results: Sequence[Mapping[str, Any]],
    max_rows: Optional[int] = None,
    max_columns: Optional[int] = None,
) -> pd.DataFrame:
    """Preview table; columns follow the first row's key order."""
    if not results:
        return pd.DataFrame()

    columns = list(results[0].keys())
    if max_columns is not None:
        columns = columns[:max_columns]
    subset = results if max_rows is None else results[:max_rows]
    return pd.DataFrame([{c: r.get(c) for c in columns} for r in subset], columns=columns)


__all__ = [
    "CONTINUOUS_COLUMN",
    "RECOMMENDED_COLUMN",
    "BatchSummary",
    "process_batch",
    "download_csv",
    "summarize_batch",
    "results_frame",
]
