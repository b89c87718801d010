import logging

import pytest

from zus_pension.data_model import DEFAULT_PARAMETERS, PersonData, SalaryEntry
from zus_pension.engine.capital import average_annual_salary, compute_initial_capital
from zus_pension.engine.contributions import accumulate_contributions
from zus_pension.engine.tables import SickLeaveTable

NO_SICK_LEAVE = SickLeaveTable.DISABLED


def _person(**overrides):
    data = dict(age=30, gender="male", salary=5000.0, work_start_year=2020, retirement_year=2067)
    data.update(overrides)
    return PersonData(**data)


def test_historical_salary_is_valorized_with_recorded_index():
    person = _person(
        work_start_year=2020,
        retirement_year=2021,
        historical_salaries=(SalaryEntry(2020, 60000.0),),
    )

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, 2020, NO_SICK_LEAVE)

    assert len(breakdown.yearly) == 1
    assert breakdown.yearly[0].valorization_rate == 3.56
    assert breakdown.total == pytest.approx(60000 * 0.1952 * (1 + 3.56 / 100))


def test_years_after_2024_stay_nominal():
    person = _person(work_start_year=2025, retirement_year=2027)

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, 2026, NO_SICK_LEAVE)

    assert [item.valorization_rate for item in breakdown.yearly] == [None, None]
    assert breakdown.yearly[0].valorized_contribution == pytest.approx(60000 * 0.1952)


def test_years_without_published_index_stay_nominal():
    person = _person(work_start_year=2005, retirement_year=2006)

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, 2026, NO_SICK_LEAVE)

    assert breakdown.yearly[0].valorization_rate is None
    assert breakdown.contributions_total == pytest.approx(60000 * 0.1952)


def test_valorization_can_be_switched_off():
    person = _person(work_start_year=2020, retirement_year=2021, include_valorization=False)

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, 2020, NO_SICK_LEAVE)

    assert breakdown.total == pytest.approx(60000 * 0.1952)


def test_statistical_sick_leave_reduces_every_year_by_default():
    person = _person(work_start_year=2025, retirement_year=2027)

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, as_of_year=2026)

    factor = 1 - 0.2 * 8.2 / 250
    assert breakdown.yearly[0].adjusted_wage == pytest.approx(60000 * factor)
    assert breakdown.yearly[1].adjusted_wage == pytest.approx(60000 * factor)
    assert breakdown.sick_leave_reduction == pytest.approx(1 - factor)


def test_savings_and_capital_are_added_to_total():
    person = _person(work_start_year=2025, retirement_year=2026, current_savings=1000.0, main_account=500.0)

    breakdown = accumulate_contributions(person, DEFAULT_PARAMETERS, 2026, NO_SICK_LEAVE)

    assert breakdown.initial_capital == 500.0
    assert breakdown.total == pytest.approx(60000 * 0.1952 + 1500.0)


def test_initial_capital_from_pre_1999_service():
    person = _person(contribution_period=10)

    assert compute_initial_capital(person, 60000.0) == pytest.approx(18000.0 * 7.1)


def test_initial_capital_has_a_salary_floor():
    person = _person(gender="female", contribution_period=5)

    assert compute_initial_capital(person, 1200.0) == pytest.approx(1000.0 * 4.0)


def test_period_outside_table_only_counts_accounts():
    person = _person(contribution_period=25, main_account=1000.0, sub_account=-50.0)

    assert compute_initial_capital(person, 60000.0) == 1000.0


def test_average_salary_prefers_recorded_history():
    person = _person(historical_salaries=(SalaryEntry(2020, 40000.0), SalaryEntry(2021, 50000.0)))

    assert average_annual_salary(person) == 45000.0
    assert average_annual_salary(_person()) == 60000.0


def test_missing_valorization_index_is_logged(caplog):
    person = _person(work_start_year=2005, retirement_year=2006)

    with caplog.at_level(logging.DEBUG, logger="zus_pension.engine.contributions"):
        accumulate_contributions(person, DEFAULT_PARAMETERS, 2026, NO_SICK_LEAVE)

    assert "no valorization index for 2005" in caplog.text
