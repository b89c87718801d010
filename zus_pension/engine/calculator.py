"""Pension calculation entry point.

``evaluate_pension`` keeps full float precision and is what the derived
analyses re-run; ``calculate_pension`` rounds the evaluation into the
public ``PensionCalculationResult``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..data_model import DEFAULT_PARAMETERS, FUS20Parameters, PensionCalculationResult, PersonData
from ..errors import InvalidInputError
from .annuity import Annuity, annuitize, life_expectancy_months, real_value, replacement_rate
from .contributions import ContributionBreakdown, accumulate_contributions
from .tables import SickLeaveTable
from .wages import wage_growth_rate

logger = logging.getLogger(__name__)


def current_year() -> int:
    return date.today().year


@dataclass(frozen=True)
class PensionEvaluation:
    as_of_year: int
    years_to_retirement: int
    retirement_age: int
    contributions: ContributionBreakdown
    annuity: Annuity
    life_expectancy_months: float
    replacement_rate: float
    real_pension_value: float
    projected_inflation: float

    @property
    def monthly_pension(self) -> float:
        return self.annuity.nominal_pension


def evaluate_pension(
    person: PersonData,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
    table: SickLeaveTable = SickLeaveTable.STANDARD,
) -> PensionEvaluation:
    scenario = scenario or DEFAULT_PARAMETERS
    as_of_year = current_year() if as_of_year is None else as_of_year

    years_to_retirement = person.retirement_year - as_of_year
    if years_to_retirement < 0:
        raise InvalidInputError(
            f"Retirement year {person.retirement_year} is before {as_of_year}"
        )
    if person.working_years <= 0:
        raise InvalidInputError(
            f"Working span {person.work_start_year}-{person.retirement_year} is empty"
        )

    contributions = accumulate_contributions(person, scenario, as_of_year, table)
    retirement_age = round(person.age + years_to_retirement)
    months = life_expectancy_months(retirement_age, person.gender)
    annuity = annuitize(contributions.total, scenario.contribution_collection, months)

    inflation = person.inflation_rate if person.inflation_rate is not None else scenario.inflation
    growth = wage_growth_rate(person, scenario)
    return PensionEvaluation(
        as_of_year=as_of_year,
        years_to_retirement=years_to_retirement,
        retirement_age=retirement_age,
        contributions=contributions,
        annuity=annuity,
        life_expectancy_months=months,
        replacement_rate=replacement_rate(annuity.nominal_pension, person.salary, growth, years_to_retirement),
        real_pension_value=real_value(annuity.nominal_pension, inflation, years_to_retirement),
        projected_inflation=inflation,
    )


def to_result(evaluation: PensionEvaluation, report_sick_leave: bool = False) -> PensionCalculationResult:
    """Round an evaluation for display.

    The sick-leave reduction always shapes the pension; ``sick_leave_impact`` is
    only reported when the person asked to see it.
    """
    contributions = evaluation.contributions
    sick_leave_impact = contributions.sick_leave_reduction * 100 if report_sick_leave else 0.0
    pension = round(evaluation.monthly_pension, 2)
    return PensionCalculationResult(
        monthly_pension=pension,
        total_contributions=round(max(contributions.total, 0.0), 2),
        capital_at_retirement=round(evaluation.annuity.valorized_contributions, 2),
        replacement_rate=round(evaluation.replacement_rate, 2),
        years_to_retirement=evaluation.years_to_retirement,
        life_expectancy=round(evaluation.life_expectancy_months / 12, 2),
        projected_inflation=evaluation.projected_inflation,
        real_pension_value=round(max(evaluation.real_pension_value, 0.0), 2),
        nominal_pension_value=pension,
        initial_capital=round(contributions.initial_capital, 2),
        valorized_contributions=round(evaluation.annuity.valorized_contributions, 2),
        sick_leave_impact=round(sick_leave_impact, 2),
    )


def calculate_pension(
    person: PersonData,
    scenario: FUS20Parameters | None = None,
    as_of_year: int | None = None,
) -> PensionCalculationResult:
    evaluation = evaluate_pension(person, scenario, as_of_year)
    result = to_result(evaluation, report_sick_leave=person.include_sick_leave)
    logger.info(
        "pension calculated: as_of=%s retirement=%s pension=%.2f replacement=%.2f%%",
        evaluation.as_of_year,
        person.retirement_year,
        result.monthly_pension,
        result.replacement_rate,
    )
    return result
