# src/staffrec/staffing.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, TypeAlias, cast

from .heuristic import predict_continuous
from .logger import get_logger
from .validation import to_number, validate_inputs

logger = get_logger(__name__)

RoundRule: TypeAlias = Literal["ceil", "floor", "round"]
ROUND_RULES: tuple[RoundRule, ...] = ("ceil", "floor", "round")


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class RoundingPolicy:
    round_rule: RoundRule = "ceil"
    min_staff: int = 1
    # None => unbounded
    max_staff: Optional[int] = None


@dataclass(frozen=True)
class RecommendationResult:
    continuous: float
    recommended: Optional[int]


# -----------------------------
# Internal helpers
# -----------------------------
def _round_half_up(value: float) -> int:
    # 2.5 -> 3, -2.5 -> -2 (Python's round() would give 2 for 2.5)
    return int(math.floor(value + 0.5))


def _apply_rule(value: float, round_rule: str) -> int:
    if round_rule == "floor":
        return int(math.floor(value))
    if round_rule == "round":
        return _round_half_up(value)
    # "ceil" and anything unrecognized
    return int(math.ceil(value))


def _lower_bound(min_staff: Any) -> int:
    """min_staff that is missing, zero or unparsable falls back to 1."""
    m = to_number(min_staff)
    if not math.isfinite(m) or m <= 0:
        return 1
    return max(int(m), 1)


def _upper_bound(max_staff: Any) -> Optional[int]:
    """
    None / "" => unbounded.
    Non-numeric text (e.g. "abc") is ignored and also means unbounded.
    """
    if max_staff is None:
        return None
    if isinstance(max_staff, str) and not max_staff.strip():
        return None
    m = to_number(max_staff)
    if not math.isfinite(m):
        logger.warning("Ignoring non-numeric max staff %r; no upper bound applied", max_staff)
        return None
    return int(m)


# -----------------------------
# Public API
# -----------------------------
def apply_rounding(
    continuous: float,
    round_rule: str = "ceil",
    min_staff: Any = 1,
    max_staff: Any = None,
) -> Optional[int]:
    """
    Continuous estimate -> integer headcount.

      1) round with the selected rule (unknown rules behave like "ceil")
      2) clamp up to max(min_staff, 1)
      3) clamp down to max_staff when given

    max_staff is applied last and is not checked against min_staff, so
    max_staff < min_staff returns max_staff.
    A non-finite estimate returns None.
    """
    if not math.isfinite(continuous):
        return None

    rec = _apply_rule(float(continuous), round_rule)
    low = _lower_bound(min_staff)
    rec = max(rec, low)

    high = _upper_bound(max_staff)
    if high is not None:
        if high < low:
            logger.warning("max_staff=%s is below min staff %s; max_staff wins", high, low)
        rec = min(rec, high)

    return rec


def apply_policy(continuous: float, policy: RoundingPolicy) -> Optional[int]:
    return apply_rounding(continuous, policy.round_rule, policy.min_staff, policy.max_staff)


def policy_from_form(round_rule: str, min_staff: Any, max_staff: Any) -> RoundingPolicy:
    """Builds a clean policy from raw form values (unknown rule -> "ceil", "" max -> unbounded)."""
    rule = cast(RoundRule, round_rule if round_rule in ROUND_RULES else "ceil")
    return RoundingPolicy(round_rule=rule, min_staff=_lower_bound(min_staff), max_staff=_upper_bound(max_staff))


def compute_recommendation(area: Any, footfall: Any, policy: Optional[RoundingPolicy] = None) -> RecommendationResult:
    """
    Single-store recommendation.

    Raises InvalidAreaError (area not finite or <= 0) or
    InvalidFootfallError (footfall not finite or < 0).
    """
    policy = policy or RoundingPolicy()
    a, f = validate_inputs(area, footfall)
    cont = predict_continuous(a, f)
    return RecommendationResult(continuous=cont, recommended=apply_policy(cont, policy))


def result_to_dict(result: RecommendationResult) -> Dict[str, Any]:
    return {
        "predicted_continuous": round(result.continuous, 3),
        "recommended_staff": result.recommended,
    }


__all__ = [
    "RoundRule",
    "ROUND_RULES",
    "RoundingPolicy",
    "RecommendationResult",
    "apply_rounding",
    "apply_policy",
    "policy_from_form",
    "compute_recommendation",
    "result_to_dict",
]
