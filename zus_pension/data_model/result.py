from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

_CAMEL_KEYS = {
    "monthly_pension": "monthlyPension",
    "total_contributions": "totalContributions",
    "capital_at_retirement": "capitalAtRetirement",
    "replacement_rate": "replacementRate",
    "years_to_retirement": "yearsToRetirement",
    "life_expectancy": "lifeExpectancy",
    "projected_inflation": "projectedInflation",
    "real_pension_value": "realPensionValue",
    "nominal_pension_value": "nominalPensionValue",
    "initial_capital": "initialCapital",
    "valorized_contributions": "valorizedContributions",
    "sick_leave_impact": "sickLeaveImpact",
}


@dataclass(frozen=True)
class PensionCalculationResult:
    monthly_pension: float
    total_contributions: float
    capital_at_retirement: float
    replacement_rate: float
    years_to_retirement: int
    life_expectancy: float  # years
    projected_inflation: float
    real_pension_value: float
    nominal_pension_value: float
    initial_capital: float
    valorized_contributions: float
    sick_leave_impact: float  # percent

    def to_dict(self) -> Dict[str, Any]:
        return {_CAMEL_KEYS[key]: value for key, value in asdict(self).items()}
