import pytest

from zus_pension.engine.annuity import annuitize, life_expectancy_months, real_value, replacement_rate
from zus_pension.errors import InvalidInputError


def test_exact_table_entry():
    assert life_expectancy_months(65, "male") == 192
    assert life_expectancy_months(60, "female") == 276


def test_fractional_age_is_interpolated():
    assert life_expectancy_months(63.5, "male") == pytest.approx((216 + 204) / 2)
    assert life_expectancy_months(63.5, "female") == pytest.approx((240 + 228) / 2)


def test_ages_are_clamped_to_table_range():
    assert life_expectancy_months(55, "male") == 252
    assert life_expectancy_months(71, "male") == 168


def test_halving_collection_halves_the_pension():
    full = annuitize(100000.0, 95.0, 200.0)
    half = annuitize(100000.0, 47.5, 200.0)

    assert half.valorized_contributions == pytest.approx(full.valorized_contributions / 2)
    assert half.nominal_pension == pytest.approx(full.nominal_pension / 2)


def test_negative_capital_is_clamped():
    annuity = annuitize(-5000.0, 95.0, 200.0)

    assert annuity.valorized_contributions == 0.0
    assert annuity.nominal_pension == 0.0


def test_non_positive_life_expectancy_is_rejected():
    with pytest.raises(InvalidInputError):
        annuitize(1000.0, 95.0, 0.0)


def test_replacement_rate_uses_indexed_salary():
    assert replacement_rate(2000.0, 5000.0, 3.5, 2) == pytest.approx(2000.0 / (5000.0 * 1.035**2) * 100)
    assert replacement_rate(2000.0, 0.0, 3.5, 2) == 0.0


def test_real_value_discounts_inflation():
    assert real_value(1000.0, 2.5, 2) == pytest.approx(1000.0 / 1.025**2)
