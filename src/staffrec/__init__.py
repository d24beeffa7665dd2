# src/staffrec/__init__.py
from __future__ import annotations

# -----------------------------
# Heuristic + rounding policy
# -----------------------------
from .heuristic import (
    predict_continuous,
    explain_estimate,
)

from .staffing import (
    RoundRule,
    ROUND_RULES,
    RoundingPolicy,
    RecommendationResult,
    apply_rounding,
    apply_policy,
    policy_from_form,
    compute_recommendation,
    result_to_dict,
)

# -----------------------------
# CSV batch pipeline
# -----------------------------
from .io import (
    ParsedCSV,
    parse_csv,
    read_batch_upload,
)

from .batch import (
    BatchSummary,
    process_batch,
    download_csv,
    summarize_batch,
    results_frame,
)

from .errors import (
    StaffingError,
    InvalidAreaError,
    InvalidFootfallError,
    EmptyBatchError,
    NoResultsError,
    CSVParseError,
)

__all__ = [
    # Heuristic
    "predict_continuous",
    "explain_estimate",
    # Rounding / single store
    "RoundRule",
    "ROUND_RULES",
    "RoundingPolicy",
    "RecommendationResult",
    "apply_rounding",
    "apply_policy",
    "policy_from_form",
    "compute_recommendation",
    "result_to_dict",
    # Batch
    "ParsedCSV",
    "parse_csv",
    "read_batch_upload",
    "BatchSummary",
    "process_batch",
    "download_csv",
    "summarize_batch",
    "results_frame",
    # Errors
    "StaffingError",
    "InvalidAreaError",
    "InvalidFootfallError",
    "EmptyBatchError",
    "NoResultsError",
    "CSVParseError",
]
