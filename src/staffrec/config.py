# src/staffrec/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_ROUND_RULES = ("ceil", "floor", "round")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_round_rule: str = "ceil"
    default_min_staff: int = 1
    preview_rows: int = 6
    output_filename: str = "staff_recommendations.csv"


def _env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def _env_int(name: str, default: int, *, minimum: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_choice(name: str, default: str, choices: tuple[str, ...], *, upper: bool = False) -> str:
    raw = _env(name)
    if raw is None:
        return default
    value = raw.upper() if upper else raw.lower()
    if value not in choices:
        raise RuntimeError(f"{name} must be one of {list(choices)}, got {raw!r}")
    return value


def load_settings() -> Settings:
    """
    Reads STAFFREC_* environment variables (App Service configuration or local env).
    Unset variables fall back to the defaults on Settings; invalid ones raise RuntimeError.
    """
    defaults = Settings()
    return Settings(
        log_level=_env_choice("STAFFREC_LOG_LEVEL", defaults.log_level, VALID_LOG_LEVELS, upper=True),
        default_round_rule=_env_choice(
            "STAFFREC_DEFAULT_ROUND_RULE", defaults.default_round_rule, VALID_ROUND_RULES
        ),
        default_min_staff=_env_int("STAFFREC_DEFAULT_MIN_STAFF", defaults.default_min_staff, minimum=0),
        preview_rows=_env_int("STAFFREC_PREVIEW_ROWS", defaults.preview_rows, minimum=1),
        output_filename=_env("STAFFREC_OUTPUT_FILENAME") or defaults.output_filename,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


__all__ = ["Settings", "load_settings", "get_settings"]
