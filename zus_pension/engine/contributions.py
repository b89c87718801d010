from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..data_model import FUS20Parameters, PersonData
from .capital import average_annual_salary, compute_initial_capital
from .sick_leave import compute_sick_leave_reduction
from .tables import ANNUAL_VALORIZATION, CONTRIBUTION_RATE, LAST_HISTORICAL_YEAR, SickLeaveTable
from .wages import resolve_annual_wage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearlyContribution:
    year: int
    wage: float
    adjusted_wage: float
    contribution: float
    valorization_rate: float | None
    valorized_contribution: float


@dataclass(frozen=True)
class ContributionBreakdown:
    yearly: List[YearlyContribution] = field(default_factory=list)
    contributions_total: float = 0.0
    initial_capital: float = 0.0
    current_savings: float = 0.0
    sick_leave_reduction: float = 0.0

    @property
    def total(self) -> float:
        """Total nominal contributions, capital baseline and savings included."""
        return self.contributions_total + self.initial_capital + self.current_savings


def _valorization_rate(year: int, person: PersonData) -> float | None:
    # Years after the last published index stay nominal; the collection-rate
    # haircut stands in for future valorization.
    if not person.include_valorization or year > LAST_HISTORICAL_YEAR:
        return None
    rate = ANNUAL_VALORIZATION.get(year)
    if rate is None:
        logger.debug("no valorization index for %s; contribution left nominal", year)
    return rate


def accumulate_contributions(
    person: PersonData,
    scenario: FUS20Parameters,
    as_of_year: int,
    table: SickLeaveTable = SickLeaveTable.STANDARD,
) -> ContributionBreakdown:
    avg_salary = average_annual_salary(person)
    reduction = compute_sick_leave_reduction(person, avg_salary, as_of_year, table)

    yearly: List[YearlyContribution] = []
    running = 0.0
    for year in range(person.work_start_year, person.retirement_year):
        wage = resolve_annual_wage(year, person, scenario, as_of_year)
        adjusted = wage * (1 - reduction)
        contribution = adjusted * CONTRIBUTION_RATE
        rate = _valorization_rate(year, person)
        valorized = contribution * (1 + rate / 100) if rate is not None else contribution
        running += valorized
        yearly.append(
            YearlyContribution(
                year=year,
                wage=wage,
                adjusted_wage=adjusted,
                contribution=contribution,
                valorization_rate=rate,
                valorized_contribution=valorized,
            )
        )
        logger.debug("year=%s wage=%.2f contribution=%.2f valorized=%.2f", year, wage, contribution, valorized)

    return ContributionBreakdown(
        yearly=yearly,
        contributions_total=running,
        initial_capital=compute_initial_capital(person, avg_salary),
        current_savings=person.current_savings or 0.0,
        sick_leave_reduction=reduction,
    )
