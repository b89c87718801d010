from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from ..errors import InvalidInputError

GENDERS = ("male", "female")
PERIOD_TYPES = ("past", "future")

Gender = Literal["male", "female"]


@dataclass(frozen=True)
class SalaryEntry:
    year: int
    amount: float  # annual gross


@dataclass(frozen=True)
class SicknessPeriod:
    year: int
    days: float
    type: Literal["past", "future"] = "past"
    county: str | None = None


@dataclass(frozen=True)
class PersonData:
    age: int
    gender: Gender
    salary: float  # monthly gross
    work_start_year: int
    retirement_year: int
    current_savings: float | None = None
    contribution_period: int | None = None  # years before 1999
    include_sick_leave: bool = False
    professional_group: str | None = None
    historical_salaries: Tuple[SalaryEntry, ...] = ()
    sickness_periods: Tuple[SicknessPeriod, ...] = ()
    salary_growth_rate: float | None = None
    contribution_valorization_rate: float | None = None
    inflation_rate: float | None = None
    forecast_horizon: int | None = None
    main_account: float | None = None
    sub_account: float | None = None
    include_valorization: bool = True
    include_account_valorization: bool = True

    def __post_init__(self) -> None:
        if self.gender not in GENDERS:
            raise InvalidInputError(f"Unknown gender: {self.gender!r}")
        # Lists coming from JSON payloads are frozen into tuples.
        object.__setattr__(self, "historical_salaries", tuple(self.historical_salaries))
        object.__setattr__(self, "sickness_periods", tuple(self.sickness_periods))

    @property
    def working_years(self) -> int:
        return self.retirement_year - self.work_start_year

    def historical_salary_for(self, year: int) -> float | None:
        for entry in self.historical_salaries:
            if entry.year == year and entry.amount > 0:
                return float(entry.amount)
        return None
