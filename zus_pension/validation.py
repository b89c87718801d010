"""Form-level checks run before a calculation.

Errors block the calculation; warnings are shown next to the result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .data_model import PersonData

MIN_WAGE = 4242  # minimum monthly wage, 2024
MAX_CONTRIBUTION_BASE = 177660  # annual cap on the contribution base, 2024
MIN_WORKING_AGE = 16
FUS20_HORIZON = 2080


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def validate_age(age: int) -> ValidationResult:
    result = ValidationResult()
    if age < 18:
        result.errors.append("Age must be at least 18.")
    if age > 100:
        result.errors.append("Age cannot exceed 100.")
    if age > 67:
        result.warnings.append("Already at retirement age; the projection may be imprecise.")
    if age < 25:
        result.warnings.append("Long horizons make projections for young people less accurate.")
    return result


def validate_salary(salary: float) -> ValidationResult:
    result = ValidationResult()
    if salary < MIN_WAGE:
        result.errors.append(f"Salary cannot be below the minimum wage ({MIN_WAGE} PLN).")
    if salary > MAX_CONTRIBUTION_BASE:
        result.warnings.append(
            f"Salary exceeds the contribution base cap ({MAX_CONTRIBUTION_BASE} PLN); "
            "contributions are only charged up to the cap."
        )
    if salary > 50000:
        result.warnings.append("Very high salaries make long-term projections less accurate.")
    return result


def validate_work_start_year(work_start_year: int, age: int, as_of_year: int) -> ValidationResult:
    result = ValidationResult()
    earliest = as_of_year - age + MIN_WORKING_AGE
    if work_start_year < earliest:
        result.errors.append(f"Work cannot start before {earliest} (age {MIN_WORKING_AGE}).")
    if work_start_year > as_of_year:
        result.errors.append("Work start year cannot be in the future.")
    if work_start_year < 1999:
        result.warnings.append("Work before 1999 may require an initial capital entry.")
    return result


def validate_retirement_year(retirement_year: int, age: int, gender: str, as_of_year: int) -> ValidationResult:
    result = ValidationResult()
    min_age = 60 if gender == "female" else 65
    retirement_age = retirement_year - (as_of_year - age)
    if retirement_year <= as_of_year:
        result.errors.append("Retirement year must be in the future.")
    if retirement_age < min_age:
        result.errors.append(f"Minimum retirement age is {min_age} for {gender}s.")
    if retirement_age > 75:
        result.warnings.append("A very late retirement makes the projection less accurate.")
    if retirement_year > FUS20_HORIZON:
        result.warnings.append(f"FUS20 forecasts end in {FUS20_HORIZON}; later years are extrapolated.")
    return result


def validate_contribution_period(contribution_period: int, work_start_year: int) -> ValidationResult:
    result = ValidationResult()
    if contribution_period < 0:
        result.errors.append("Contribution period cannot be negative.")
    if contribution_period > 20:
        result.errors.append("Contribution period before 1999 cannot exceed 20 years.")
    if work_start_year >= 1999 and contribution_period > 0:
        result.warnings.append("Work started after 1998; the pre-1999 contribution period should be 0.")
    if work_start_year < 1999 and contribution_period == 0:
        result.warnings.append("Work started before 1999; consider entering the pre-1999 contribution period.")
    return result


def validate_current_savings(current_savings: float) -> ValidationResult:
    result = ValidationResult()
    if current_savings < 0:
        result.errors.append("Accumulated savings cannot be negative.")
    if current_savings > 5_000_000:
        result.warnings.append("Very high accumulated savings make the projection less accurate.")
    return result


def validate_person(person: PersonData, as_of_year: int) -> ValidationResult:
    result = ValidationResult()
    result.extend(validate_age(person.age))
    result.extend(validate_salary(person.salary))
    result.extend(validate_work_start_year(person.work_start_year, person.age, as_of_year))
    result.extend(validate_retirement_year(person.retirement_year, person.age, person.gender, as_of_year))
    if person.current_savings is not None:
        result.extend(validate_current_savings(person.current_savings))
    if person.contribution_period is not None:
        result.extend(validate_contribution_period(person.contribution_period, person.work_start_year))

    if person.working_years < 1:
        result.errors.append("The working period must be at least one year.")
    elif person.working_years < 15:
        result.warnings.append("A short working period will noticeably lower the pension.")
    if person.forecast_horizon is not None and person.retirement_year > as_of_year + person.forecast_horizon:
        result.warnings.append(
            f"Retirement falls beyond the {person.forecast_horizon}-year forecast horizon."
        )
    return result


def format_validation_message(result: ValidationResult) -> str:
    parts: List[str] = []
    if result.errors:
        parts.append("Errors:\n" + "\n".join(f"• {error}" for error in result.errors))
    if result.warnings:
        parts.append("Warnings:\n" + "\n".join(f"• {warning}" for warning in result.warnings))
    return "\n\n".join(parts)
