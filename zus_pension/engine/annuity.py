from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import InvalidInputError
from .tables import DEFAULT_LIFE_EXPECTANCY_MONTHS, LIFE_EXPECTANCY_MONTHS, MAX_TABLE_AGE, MIN_TABLE_AGE


@dataclass(frozen=True)
class Annuity:
    nominal_pension: float
    valorized_contributions: float


def life_expectancy_months(retirement_age: float, gender: str) -> float:
    """Further life expectancy in months, clamped to the 60-67 table and interpolated between ages."""
    age = max(MIN_TABLE_AGE, min(MAX_TABLE_AGE, retirement_age))
    table = LIFE_EXPECTANCY_MONTHS[gender]
    if age == int(age) and int(age) in table:
        return float(table[int(age)])

    lower_age = math.floor(age)
    upper_age = math.ceil(age)
    lower = table.get(lower_age, DEFAULT_LIFE_EXPECTANCY_MONTHS)
    upper = table.get(upper_age, DEFAULT_LIFE_EXPECTANCY_MONTHS)
    if lower_age == upper_age:
        return float(lower)
    return lower + (upper - lower) * (age - lower_age)


def annuitize(total_contributions: float, collection_rate: float, life_expectancy: float) -> Annuity:
    if life_expectancy <= 0:
        raise InvalidInputError(f"Life expectancy must be positive, got {life_expectancy} months")
    valorized = max(total_contributions * (collection_rate / 100), 0.0)
    return Annuity(nominal_pension=max(valorized / life_expectancy, 0.0), valorized_contributions=valorized)


def replacement_rate(monthly_pension: float, monthly_salary: float, wage_growth: float, years: int) -> float:
    """Pension as a percentage of the current salary indexed to the retirement year."""
    indexed_salary = monthly_salary * (1 + wage_growth / 100) ** years
    if indexed_salary <= 0:
        return 0.0
    return monthly_pension / indexed_salary * 100


def real_value(monthly_pension: float, inflation: float, years: int) -> float:
    return monthly_pension / (1 + inflation / 100) ** years
