from zus_pension.engine.groups import (
    NATIONAL_PENSION_AVERAGES,
    compare_pension_with_group,
    compare_pension_with_national_average,
    get_professional_group,
)


def test_comparison_against_group_average():
    group = get_professional_group("employees")

    comparison = compare_pension_with_group(3500.0, group)

    assert comparison.difference == 252.5
    assert comparison.is_higher
    assert comparison.percentage_difference == round(252.5 / 3247.5 * 100, 2)


def test_unknown_or_missing_group():
    assert get_professional_group("astronauts") is None
    assert get_professional_group(None) is None
    assert NATIONAL_PENSION_AVERAGES["overall"] > NATIONAL_PENSION_AVERAGES["minimum"]


def test_national_comparison_uses_the_gender_average():
    comparison = compare_pension_with_national_average(2987.45, "female")

    assert comparison.reference == "female"
    assert comparison.difference == 0.0
    assert not comparison.is_higher


def test_national_comparison_falls_back_to_overall():
    comparison = compare_pension_with_national_average(3000.0)

    assert comparison.reference == "overall"
    assert comparison.national_average == 3234.67
    assert comparison.difference == round(3000.0 - 3234.67, 2)
    assert comparison.is_higher is False
