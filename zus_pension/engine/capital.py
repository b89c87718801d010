from __future__ import annotations

import logging

from ..data_model import PersonData
from .tables import INITIAL_CAPITAL_MULTIPLIERS

logger = logging.getLogger(__name__)

SALARY_1998_RATIO = 0.3
MIN_SALARY_1998 = 1000.0


def average_annual_salary(person: PersonData) -> float:
    """Mean of the recorded annual salaries, or the current monthly salary annualized."""
    amounts = [entry.amount for entry in person.historical_salaries if entry.amount > 0]
    if amounts:
        return sum(amounts) / len(amounts)
    return max(person.salary, 0.0) * 12


def capital_at_1998(gender: str, contribution_period: int, avg_annual_salary: float) -> float:
    multiplier = INITIAL_CAPITAL_MULTIPLIERS[gender].get(contribution_period)
    if multiplier is None:
        logger.warning(
            "contribution period %s outside the initial capital table; ignoring it",
            contribution_period,
        )
        return 0.0
    salary_1998 = max(avg_annual_salary * SALARY_1998_RATIO, MIN_SALARY_1998)
    return salary_1998 * multiplier


def compute_initial_capital(person: PersonData, avg_annual_salary: float) -> float:
    """Capital baseline: estimated 1998 capital plus current main/sub account balances."""
    capital = 0.0
    if person.contribution_period and person.contribution_period > 0:
        capital += capital_at_1998(person.gender, person.contribution_period, avg_annual_salary)
    capital += max(person.main_account or 0.0, 0.0)
    capital += max(person.sub_account or 0.0, 0.0)
    return max(capital, 0.0)
