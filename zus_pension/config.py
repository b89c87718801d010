"""Environment-driven defaults.

Env vars:
  FUS20_SCENARIO=intermediate            -> intermediate | pessimistic | optimistic
  FUS20_UNEMPLOYMENT_RATE=5.2            -> %
  FUS20_WAGE_GROWTH=3.5                  -> %
  FUS20_INFLATION=2.5                    -> %
  FUS20_CONTRIBUTION_COLLECTION=95       -> %
  FUS20_USE_MACRO_TABLE=1                -> seed defaults from the FUS20 macro table
  FUS20_MACRO_YEAR=2025                  -> year looked up in the macro table
  ZUS_PENSION_LOG_LEVEL=INFO             -> logging level of the API process
  ZUS_PENSION_PORT=8000                  -> API port
"""
from __future__ import annotations

import os

from .data_model import DEFAULT_PARAMETERS, FUS20Parameters
from .engine.calculator import current_year
from .engine.fus20 import parameters_for_scenario, parameters_for_year

_TRUTHY = {"1", "true", "yes", "on"}


def is_truthy(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def default_parameters_from_env() -> FUS20Parameters:
    scenario = os.getenv("FUS20_SCENARIO", DEFAULT_PARAMETERS.scenario).strip().lower()

    if is_truthy(os.getenv("FUS20_USE_MACRO_TABLE", "")):
        year = int(os.getenv("FUS20_MACRO_YEAR", current_year()))
        inflation = _env_float("FUS20_INFLATION", DEFAULT_PARAMETERS.inflation)
        return parameters_for_year(year, scenario=scenario, inflation=inflation)

    # Unset variables fall back to the preset of the chosen variant.
    return parameters_for_scenario(
        scenario,
        unemployment_rate=_env_float("FUS20_UNEMPLOYMENT_RATE", None),
        wage_growth=_env_float("FUS20_WAGE_GROWTH", None),
        inflation=_env_float("FUS20_INFLATION", None),
        contribution_collection=_env_float("FUS20_CONTRIBUTION_COLLECTION", None),
    )


def log_level() -> str:
    return os.getenv("ZUS_PENSION_LOG_LEVEL", "INFO").upper()


def api_port() -> int:
    return int(os.getenv("ZUS_PENSION_PORT", 8000))
