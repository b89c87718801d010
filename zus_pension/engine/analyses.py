"""What-if analyses built on top of the core pension evaluation.

Each analysis re-runs ``evaluate_pension`` on modified inputs. Nothing is
searched or optimized and no shared table is touched between runs.
"""
from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import List

from ..data_model import DEFAULT_PARAMETERS, FUS20Parameters, PersonData
from ..errors import InvalidInputError
from .annuity import life_expectancy_months
from .calculator import current_year, evaluate_pension
from .sick_leave import effective_salary
from .tables import (
    CONTRIBUTION_RATE,
    DEFAULT_WAGE_GROWTH,
    MAIN_ACCOUNT_RATE,
    SUB_ACCOUNT_RATE,
    SickLeaveTable,
)

logger = logging.getLogger(__name__)

ACCOUNT_RATE_TOTAL = MAIN_ACCOUNT_RATE + SUB_ACCOUNT_RATE

APPROXIMATION_NOTE = (
    "Additional years are a linear estimate at today's salary; "
    "wage growth and valorization over the added years are ignored."
)


@dataclass(frozen=True)
class RetirementDelayResult:
    original_pension: float
    delayed_pension: float
    increase_percentage: float
    additional_contributions: float


@dataclass(frozen=True)
class SickLeaveComparison:
    pension_with_sick_leave: float
    pension_without_sick_leave: float
    difference: float
    difference_percentage: float


@dataclass(frozen=True)
class ExpectationGap:
    predicted_pension: float
    expected_pension: float
    gap: float
    additional_years_needed: int
    is_expectation_met: bool
    note: str | None = None


@dataclass(frozen=True)
class AccountBalanceRow:
    year: int
    age: int
    account_balance: float
    subaccount_balance: float
    total_balance: float
    annual_contribution: float


def _percent_change(new: float, base: float) -> float:
    if base == 0:
        return 0.0
    return (new - base) / base * 100


def calculate_retirement_delay(
    person: PersonData,
    delay_years: int,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
) -> RetirementDelayResult:
    if delay_years < 0:
        raise InvalidInputError(f"Delay must not be negative, got {delay_years}")
    as_of_year = current_year() if as_of_year is None else as_of_year

    original = evaluate_pension(person, scenario, as_of_year)
    delayed_person = dataclasses.replace(person, retirement_year=person.retirement_year + delay_years)
    delayed = evaluate_pension(delayed_person, scenario, as_of_year)

    return RetirementDelayResult(
        original_pension=round(original.monthly_pension, 2),
        delayed_pension=round(delayed.monthly_pension, 2),
        increase_percentage=round(_percent_change(delayed.monthly_pension, original.monthly_pension), 2),
        additional_contributions=round(delayed.contributions.total - original.contributions.total, 2),
    )


def calculate_sick_leave_comparison(
    person: PersonData,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
) -> SickLeaveComparison:
    as_of_year = current_year() if as_of_year is None else as_of_year

    with_sick_leave = evaluate_pension(person, scenario, as_of_year, SickLeaveTable.STANDARD)
    without_sick_leave = evaluate_pension(person, scenario, as_of_year, SickLeaveTable.DISABLED)

    difference = without_sick_leave.monthly_pension - with_sick_leave.monthly_pension
    return SickLeaveComparison(
        pension_with_sick_leave=round(with_sick_leave.monthly_pension, 2),
        pension_without_sick_leave=round(without_sick_leave.monthly_pension, 2),
        difference=round(difference, 2),
        difference_percentage=round(_percent_change(without_sick_leave.monthly_pension, with_sick_leave.monthly_pension), 2),
    )


def calculate_expectation_gap(
    person: PersonData,
    expected_pension: float,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
) -> ExpectationGap:
    """Compare the projected pension with what the person hopes to receive.

    ``additional_years_needed`` is ``ceil(gap * life_months / annual_contribution)``,
    a first-order estimate. It does not compound wage growth, valorization or
    the shorter payout period over the added years, so it is only a rough
    indicator for large gaps.
    """
    evaluation = evaluate_pension(person, scenario, as_of_year)
    predicted = evaluation.monthly_pension
    gap = expected_pension - predicted

    additional_years = 0
    note = None
    if gap > 0:
        annual_contribution = person.salary * 12 * CONTRIBUTION_RATE
        if annual_contribution <= 0:
            raise InvalidInputError("Cannot estimate additional years without a positive salary")
        months = life_expectancy_months(evaluation.retirement_age, person.gender)
        additional_years = math.ceil(gap * months / annual_contribution)
        note = APPROXIMATION_NOTE
        logger.info("expectation gap %.2f PLN needs about %s more years (linear estimate)", gap, additional_years)

    return ExpectationGap(
        predicted_pension=round(predicted, 2),
        expected_pension=expected_pension,
        gap=round(gap, 2),
        additional_years_needed=additional_years,
        is_expectation_met=gap <= 0,
        note=note,
    )


def _balance_growth_rate(person: PersonData, scenario: FUS20Parameters) -> float:
    if not person.include_account_valorization:
        return 0.0
    if person.contribution_valorization_rate is not None:
        return person.contribution_valorization_rate
    if scenario.wage_growth is not None:
        return scenario.wage_growth
    return DEFAULT_WAGE_GROWTH


def calculate_account_balance_projection(
    person: PersonData,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
    table: SickLeaveTable = SickLeaveTable.STANDARD,
) -> List[AccountBalanceRow]:
    """Year-by-year ZUS account and subaccount balances up to the retirement year.

    This is a separate model from the lifetime accumulation: it compounds the
    running balances by one flat rate and splits each year's contribution
    12.22 / 7.3 between the account and the subaccount.
    """
    scenario = scenario or DEFAULT_PARAMETERS
    as_of_year = current_year() if as_of_year is None else as_of_year
    if person.retirement_year < as_of_year:
        raise InvalidInputError(f"Retirement year {person.retirement_year} is before {as_of_year}")

    growth = 1 + _balance_growth_rate(person, scenario) / 100
    account = max(person.current_savings or 0.0, 0.0) + max(person.main_account or 0.0, 0.0)
    subaccount = max(person.sub_account or 0.0, 0.0)
    annual_salary = max(person.salary, 0.0) * 12

    rows: List[AccountBalanceRow] = []
    for year in range(as_of_year, person.retirement_year + 1):
        age = person.age + (year - as_of_year)
        contribution = effective_salary(annual_salary, age, person.gender, table) * CONTRIBUTION_RATE

        account = account * growth + contribution * MAIN_ACCOUNT_RATE / ACCOUNT_RATE_TOTAL
        subaccount = subaccount * growth + contribution * SUB_ACCOUNT_RATE / ACCOUNT_RATE_TOTAL
        rows.append(
            AccountBalanceRow(
                year=year,
                age=age,
                account_balance=account,
                subaccount_balance=subaccount,
                total_balance=account + subaccount,
                annual_contribution=contribution,
            )
        )
    return rows
