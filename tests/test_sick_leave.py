import pytest

from zus_pension.data_model import PersonData, SicknessPeriod
from zus_pension.engine.sick_leave import compute_sick_leave_reduction, effective_salary
from zus_pension.engine.tables import SICK_LEAVE_DAYS, SickLeaveTable, age_band


def _person(**overrides):
    data = dict(age=30, gender="male", salary=5000.0, work_start_year=2020, retirement_year=2030)
    data.update(overrides)
    return PersonData(**data)


@pytest.mark.parametrize(
    "age,band",
    [(25, "20-30"), (30, "20-30"), (31, "31-40"), (45, "41-50"), (60, "51-60"), (61, "60+")],
)
def test_age_bands(age, band):
    assert age_band(age) == band


def test_statistical_reduction_applies_without_the_report_flag():
    reduction = compute_sick_leave_reduction(_person(), 60000.0, 2026)

    assert reduction == pytest.approx(0.2 * 8.2 / 250)


def test_report_flag_does_not_change_the_reduction():
    flagged = compute_sick_leave_reduction(_person(include_sick_leave=True), 60000.0, 2026)

    assert flagged == compute_sick_leave_reduction(_person(), 60000.0, 2026)


def test_statistical_reduction_for_older_woman():
    person = _person(age=65, gender="female")

    assert compute_sick_leave_reduction(person, 60000.0, 2026) == pytest.approx(0.2 * 37.2 / 250)


def test_recorded_periods_count_past_and_elapsed_years_only():
    person = _person(
        sickness_periods=(
            SicknessPeriod(2021, 50, "past"),
            SicknessPeriod(2025, 30, "future"),
            SicknessPeriod(2029, 100, "future"),
        )
    )

    reduction = compute_sick_leave_reduction(person, 60000.0, 2026)

    assert reduction == pytest.approx(80 / (250 * 10))


def test_recorded_reduction_is_capped():
    person = _person(sickness_periods=(SicknessPeriod(2022, 3000, "past"),))

    assert compute_sick_leave_reduction(person, 60000.0, 2026) == 0.10


def test_disabled_table_turns_everything_off():
    person = _person(include_sick_leave=True, sickness_periods=(SicknessPeriod(2022, 40, "past"),))

    assert compute_sick_leave_reduction(person, 60000.0, 2026, SickLeaveTable.DISABLED) == 0.0


def test_effective_salary_with_disabled_table_is_full_salary():
    assert effective_salary(60000.0, 40, "female", SickLeaveTable.DISABLED) == 60000.0


def test_reference_table_is_read_only():
    with pytest.raises(TypeError):
        SICK_LEAVE_DAYS["male"]["20-30"] = 0.0
