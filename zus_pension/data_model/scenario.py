from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..errors import InvalidInputError

SCENARIOS = ("intermediate", "pessimistic", "optimistic")

Scenario = Literal["intermediate", "pessimistic", "optimistic"]


@dataclass(frozen=True)
class FUS20Parameters:
    """Macroeconomic scenario. All rates are percentages (3.5 means 3.5 %)."""

    scenario: Scenario = "intermediate"
    unemployment_rate: float = 5.2
    wage_growth: float | None = 3.5
    inflation: float = 2.5
    contribution_collection: float = 95.0
    general_inflation: float | None = None
    pensioner_inflation: float | None = None
    real_gdp_growth: float | None = None

    def __post_init__(self) -> None:
        if self.scenario not in SCENARIOS:
            raise InvalidInputError(f"Unknown FUS20 scenario: {self.scenario!r}")
        if not 0.0 <= self.contribution_collection <= 100.0:
            raise InvalidInputError(
                f"Contribution collection must be within [0, 100], got {self.contribution_collection}"
            )


DEFAULT_PARAMETERS = FUS20Parameters()
