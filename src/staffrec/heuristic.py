from __future__ import annotations

import math
from typing import Dict

BASE_STAFF: float = 1.5
AREA_COEF: float = 0.03
FOOTFALL_DIVISOR: float = 20000.0


def predict_continuous(area: float, footfall: float) -> float:
    """
    Continuous staffing estimate:

      staff = 1.5 + 0.03 * sqrt(area) + footfall / 20000

    Negative area is clamped to 0. Footfall is not validated here; NaN inputs
    propagate to a NaN estimate.
    """
    area = float(area)
    if area < 0:
        area = 0.0
    return BASE_STAFF + AREA_COEF * math.sqrt(area) + float(footfall) / FOOTFALL_DIVISOR


def explain_estimate(area: float, footfall: float) -> Dict[str, float]:
    """Additive breakdown of predict_continuous (base + area term + footfall term)."""
    area_term = AREA_COEF * math.sqrt(max(float(area), 0.0))
    footfall_term = float(footfall) / FOOTFALL_DIVISOR
    return {
        "base": BASE_STAFF,
        "area_term": area_term,
        "footfall_term": footfall_term,
        "continuous": BASE_STAFF + area_term + footfall_term,
    }


__all__ = [
    "BASE_STAFF",
    "AREA_COEF",
    "FOOTFALL_DIVISOR",
    "predict_continuous",
    "explain_estimate",
]
