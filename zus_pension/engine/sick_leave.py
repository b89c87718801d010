from __future__ import annotations

from ..data_model import PersonData
from .tables import (
    MAX_SICK_LEAVE_REDUCTION,
    SICK_PAY_RATIO,
    WORKING_DAYS_PER_YEAR,
    SickLeaveTable,
    age_band,
)


def effective_salary(annual_salary: float, age: float, gender: str, table: SickLeaveTable = SickLeaveTable.STANDARD) -> float:
    """Salary after sick days paid at 80 %, using the average days for the age band."""
    sick_days = table.days()[gender][age_band(age)]
    ratio = sick_days / WORKING_DAYS_PER_YEAR
    return annual_salary * (1 - ratio) + annual_salary * ratio * SICK_PAY_RATIO


def _recorded_reduction(person: PersonData, as_of_year: int) -> float:
    days = sum(
        period.days
        for period in person.sickness_periods
        if period.type == "past" or period.year <= as_of_year
    )
    working_days = WORKING_DAYS_PER_YEAR * person.working_years
    if working_days <= 0:
        return 0.0
    return days / working_days


def _statistical_reduction(person: PersonData, avg_annual_salary: float, table: SickLeaveTable) -> float:
    base = avg_annual_salary if avg_annual_salary > 0 else 1.0
    return 1 - effective_salary(base, person.age, person.gender, table) / base


def compute_sick_leave_reduction(
    person: PersonData,
    avg_annual_salary: float,
    as_of_year: int,
    table: SickLeaveTable = SickLeaveTable.STANDARD,
) -> float:
    """Fraction (0 to 0.10) by which every working year's wage is reduced."""
    if table is SickLeaveTable.DISABLED:
        return 0.0
    if person.sickness_periods:
        reduction = _recorded_reduction(person, as_of_year)
    else:
        reduction = _statistical_reduction(person, avg_annual_salary, table)
    return min(max(reduction, 0.0), MAX_SICK_LEAVE_REDUCTION)
