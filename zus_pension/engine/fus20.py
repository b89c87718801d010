"""FUS20 variant 1 (intermediate) forecast of the Ministry of Finance, 2022.

Macroeconomic anchor years are linearly interpolated for years in between and
clamped to the first/last anchor outside 2023-2080.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..data_model import FUS20Parameters
from ..errors import InvalidInputError

FORECAST_FIRST_YEAR = 2023
FORECAST_LAST_YEAR = 2080
PROJECTION_BASE_YEAR = 2025


@dataclass(frozen=True)
class MacroeconomicRow:
    year: int
    unemployment_rate: float
    real_wage_growth: float  # index, previous year = 100
    contribution_collection: float


@dataclass(frozen=True)
class ForecastResult:
    year: int
    annual_balance: float  # mln PLN, discounted to 2021
    revenues: float | None
    expenditures: float | None
    note: str | None = None


@dataclass(frozen=True)
class EfficiencyBurden:
    year: int
    efficiency: float
    burden_coefficient: float
    note: str | None = None


MACROECONOMIC_DATA: tuple[MacroeconomicRow, ...] = (
    MacroeconomicRow(2023, 5.40, 100.30, 99.00),
    MacroeconomicRow(2025, 5.00, 103.70, 99.00),
    MacroeconomicRow(2040, 5.00, 102.70, 99.00),
    MacroeconomicRow(2080, 5.00, 102.00, 99.00),
)

FORECAST_RESULTS: tuple[ForecastResult, ...] = (
    ForecastResult(2023, -59575, 145016, 204591),
    ForecastResult(2030, -93104, 177027, 270131),
    ForecastResult(2052, -93100, None, None, note="Largest deficit discounted to 2021: 93.1 bn PLN"),
    ForecastResult(2080, -52121, 372457, 424578),
)

EFFICIENCY_BURDEN: tuple[EfficiencyBurden, ...] = (
    EfficiencyBurden(2023, 71, 0.40),
    EfficiencyBurden(2060, 78, 0.81),
    EfficiencyBurden(2080, 88, 0.84, note="up 16.8 pp from 2023"),
)

# Macroeconomic assumptions behind each FUS20 variant.
_SCENARIO_PRESETS: Dict[str, Dict[str, float]] = {
    "intermediate": {"unemployment_rate": 5.2, "wage_growth": 3.5, "inflation": 2.5, "contribution_collection": 95.0},
    "pessimistic": {"unemployment_rate": 7.1, "wage_growth": 2.1, "inflation": 3.2, "contribution_collection": 92.0},
    "optimistic": {"unemployment_rate": 4.2, "wage_growth": 4.2, "inflation": 2.0, "contribution_collection": 97.0},
}

# Linear trends per scenario: (base, slope per year since 2025).
_SCENARIO_TRENDS: Dict[str, Dict[str, tuple[float, float]]] = {
    "intermediate": {
        "pensioners": (9.2, 0.15),
        "workers": (16.8, -0.08),
        "dependency_ratio": (0.55, 0.01),
        "fund_balance": (-15.2, -2.1),
    },
    "pessimistic": {
        "pensioners": (9.2, 0.18),
        "workers": (16.8, -0.12),
        "dependency_ratio": (0.55, 0.015),
        "fund_balance": (-15.2, -2.8),
    },
    "optimistic": {
        "pensioners": (9.2, 0.12),
        "workers": (16.8, -0.05),
        "dependency_ratio": (0.55, 0.008),
        "fund_balance": (-15.2, -1.6),
    },
}


def is_year_in_forecast_range(year: int) -> bool:
    return FORECAST_FIRST_YEAR <= year <= FORECAST_LAST_YEAR


def available_years() -> List[int]:
    years = {row.year for row in MACROECONOMIC_DATA}
    years.update(row.year for row in FORECAST_RESULTS)
    years.update(row.year for row in EFFICIENCY_BURDEN)
    return sorted(years)


def forecast_result_for_year(year: int) -> ForecastResult | None:
    return next((row for row in FORECAST_RESULTS if row.year == year), None)


def efficiency_burden_for_year(year: int) -> EfficiencyBurden | None:
    return next((row for row in EFFICIENCY_BURDEN if row.year == year), None)


def interpolate_macroeconomic_data(year: int) -> MacroeconomicRow:
    rows = sorted(MACROECONOMIC_DATA, key=lambda row: row.year)
    if year <= rows[0].year:
        return rows[0]
    if year >= rows[-1].year:
        return rows[-1]

    for lower, upper in zip(rows, rows[1:]):
        if lower.year <= year <= upper.year:
            break
    ratio = (year - lower.year) / (upper.year - lower.year)

    def _lerp(a: float, b: float) -> float:
        return a + (b - a) * ratio

    return MacroeconomicRow(
        year=year,
        unemployment_rate=_lerp(lower.unemployment_rate, upper.unemployment_rate),
        real_wage_growth=_lerp(lower.real_wage_growth, upper.real_wage_growth),
        contribution_collection=_lerp(lower.contribution_collection, upper.contribution_collection),
    )


def parameters_for_year(year: int, scenario: str = "intermediate", inflation: float = 2.5) -> FUS20Parameters:
    """Scenario parameters seeded from the FUS20 macro table for ``year``."""
    row = interpolate_macroeconomic_data(year)
    return FUS20Parameters(
        scenario=scenario,
        unemployment_rate=round(row.unemployment_rate, 4),
        wage_growth=round(row.real_wage_growth - 100, 4),
        inflation=inflation,
        contribution_collection=round(row.contribution_collection, 4),
    )


def parameters_for_scenario(scenario: str, **overrides: float | None) -> FUS20Parameters:
    """Preset parameters for a FUS20 variant, with any non-None ``overrides`` applied on top."""
    preset = _SCENARIO_PRESETS.get(scenario)
    if preset is None:
        raise InvalidInputError(f"Unknown FUS20 scenario: {scenario!r}")
    values = dict(preset)
    values.update({name: value for name, value in overrides.items() if value is not None})
    return FUS20Parameters(scenario=scenario, **values)


def fus20_projections(scenario: str, year: int) -> Dict[str, float]:
    """Pensioners and workers (millions), dependency ratio and fund balance (bn PLN) for ``year``."""
    trends = _SCENARIO_TRENDS.get(scenario)
    if trends is None:
        raise InvalidInputError(f"Unknown FUS20 scenario: {scenario!r}")
    elapsed = year - PROJECTION_BASE_YEAR
    return {name: base + slope * elapsed for name, (base, slope) in trends.items()}
