from __future__ import annotations

import logging

from ..data_model import FUS20Parameters, PersonData
from .tables import ANNUAL_VALORIZATION, DEFAULT_WAGE_GROWTH, QUARTERLY_VALORIZATION

logger = logging.getLogger(__name__)


def wage_growth_rate(person: PersonData, scenario: FUS20Parameters) -> float:
    if person.salary_growth_rate is not None:
        return person.salary_growth_rate
    if scenario.wage_growth is not None:
        return scenario.wage_growth
    return DEFAULT_WAGE_GROWTH


def resolve_annual_wage(year: int, person: PersonData, scenario: FUS20Parameters, as_of_year: int) -> float:
    """Annual gross wage for ``year``: recorded history first, else the current wage projected forward."""
    recorded = person.historical_salary_for(year)
    if recorded is not None:
        return recorded

    annual = max(person.salary, 0.0) * 12
    if year > as_of_year:
        annual *= (1 + wage_growth_rate(person, scenario) / 100) ** (year - as_of_year)
    elif person.historical_salaries:
        logger.debug("no salary recorded for %s; using current wage", year)
    return annual


def calculate_wage_valorization(
    base_salary: float,
    start_year: int,
    end_year: int,
    use_quarterly: bool = False,
) -> float:
    """Index a salary through ``start_year..end_year`` with ZUS rates.

    Quarterly indices are chained when requested and published for the year,
    otherwise the annual index is used; years without any published index
    grow by the default 3.5 %.
    """
    valorized = base_salary
    for year in range(start_year, end_year + 1):
        if use_quarterly and year in QUARTERLY_VALORIZATION:
            for rate in QUARTERLY_VALORIZATION[year]:
                valorized *= 1 + rate / 100
        elif year in ANNUAL_VALORIZATION:
            valorized *= 1 + ANNUAL_VALORIZATION[year] / 100
        else:
            valorized *= 1 + DEFAULT_WAGE_GROWTH / 100
    return valorized
