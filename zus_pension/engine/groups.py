from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class ProfessionalGroup:
    id: str
    name: str
    description: str
    average_pension: float
    average_contribution_base: float
    code_range: str


@dataclass(frozen=True)
class GroupComparison:
    group_id: str
    difference: float
    percentage_difference: float
    is_higher: bool


@dataclass(frozen=True)
class NationalComparison:
    reference: str
    national_average: float
    difference: float
    percentage_difference: float
    is_higher: bool


# Average pensions granted in 2024, by insurance title code group.
PROFESSIONAL_GROUPS: Dict[str, ProfessionalGroup] = {
    group.id: group
    for group in (
        ProfessionalGroup("employees", "Employees", "Employment contract", 3247.50, 6890.00, "01-09"),
        ProfessionalGroup("contractors", "Contractors", "Mandate and specific-task contracts", 2156.80, 4520.00, "10-19"),
        ProfessionalGroup("business_owners", "Business owners", "Sole proprietorship", 2834.20, 5670.00, "20-29"),
        ProfessionalGroup("farmers", "Farmers", "Agricultural holding", 1876.40, 3240.00, "30-39"),
        ProfessionalGroup("freelancers", "Liberal professions", "Doctors, lawyers and similar", 4123.60, 8950.00, "40-49"),
        ProfessionalGroup("public_servants", "Public service", "Uniformed services and civil servants", 3856.70, 7820.00, "50-59"),
    )
}

NATIONAL_PENSION_AVERAGES: Mapping[str, float] = MappingProxyType(
    {
        "overall": 3234.67,
        "male": 3567.89,
        "female": 2987.45,
        "minimum": 1780.96,
        "maximum": 22600.63,
    }
)


def get_professional_group(group_id: str | None) -> ProfessionalGroup | None:
    if not group_id:
        return None
    return PROFESSIONAL_GROUPS.get(group_id)


def compare_pension_with_group(pension: float, group: ProfessionalGroup) -> GroupComparison:
    difference = pension - group.average_pension
    return GroupComparison(
        group_id=group.id,
        difference=round(difference, 2),
        percentage_difference=round(difference / group.average_pension * 100, 2),
        is_higher=difference > 0,
    )


def compare_pension_with_national_average(pension: float, gender: str | None = None) -> NationalComparison:
    """Compare with the national average for ``gender``, or the overall one."""
    reference = gender if gender in ("male", "female") else "overall"
    average = NATIONAL_PENSION_AVERAGES[reference]
    difference = pension - average
    return NationalComparison(
        reference=reference,
        national_average=average,
        difference=round(difference, 2),
        percentage_difference=round(difference / average * 100, 2),
        is_higher=difference > 0,
    )
