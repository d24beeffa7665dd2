"""Typed wrapper around st.session_state for the calculator and batch pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import streamlit as st

from .batch import download_csv, process_batch
from .config import Settings, get_settings
from .errors import StaffingError
from .io import Record, read_batch_upload
from .logger import get_logger
from .staffing import RecommendationResult, RoundingPolicy, compute_recommendation, policy_from_form

logger = get_logger(__name__)

SESSION_KEY = "app_state"
_FORM_FIELDS = ("square_footage", "mall_footfall", "round_rule", "min_staff", "max_staff")


@dataclass
class AppState:
    # Form fields, kept as entered
    square_footage: str = "1200"
    mall_footfall: str = "15000"
    round_rule: str = "ceil"
    min_staff: int = 1
    max_staff: str = ""

    # Batch workflow
    batch_rows: List[Record] = field(default_factory=list)
    batch_results: Optional[List[Record]] = None

    # Last user-facing error ("" = none)
    error: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppState":
        return cls(round_rule=settings.default_round_rule, min_staff=settings.default_min_staff)

    # --- Setters ---

    def set_inputs(self, **values: Any) -> None:
        unknown = set(values) - set(_FORM_FIELDS)
        if unknown:
            raise TypeError(f"Unknown form fields: {sorted(unknown)}")
        for name, value in values.items():
            setattr(self, name, value)

    def _fail(self, err: StaffingError) -> None:
        self.error = err.message

    # --- Actions ---

    def policy(self) -> RoundingPolicy:
        return policy_from_form(self.round_rule, self.min_staff, self.max_staff)

    def max_below_min(self) -> bool:
        p = self.policy()
        return p.max_staff is not None and p.max_staff < p.min_staff

    def max_staff_ignored(self) -> bool:
        """Max staff was entered but is not a number, so no upper bound applies."""
        return bool(str(self.max_staff).strip()) and self.policy().max_staff is None

    def calculate(self) -> Optional[RecommendationResult]:
        self.error = ""
        try:
            return compute_recommendation(self.square_footage, self.mall_footfall, self.policy())
        except StaffingError as e:
            self._fail(e)
            return None

    def load_csv(self, file: Any) -> None:
        try:
            parsed = read_batch_upload(file)
        except StaffingError as e:
            self._fail(e)
            return
        self.batch_rows = parsed.rows
        self.batch_results = None
        self.error = ""

    def process(self) -> None:
        try:
            self.batch_results = process_batch(self.batch_rows, self.policy())
        except StaffingError as e:
            self._fail(e)
            return
        self.error = ""

    def download(self) -> Optional[str]:
        try:
            return download_csv(self.batch_results)
        except StaffingError as e:
            self._fail(e)
            return None


def get_app_state() -> AppState:
    """Returns this browser session's AppState, creating it on first access."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = AppState.from_settings(get_settings())
        logger.debug("Initialized session state")
    return st.session_state[SESSION_KEY]


__all__ = ["SESSION_KEY", "AppState", "get_app_state"]
