from .analyses import (
    AccountBalanceRow,
    ExpectationGap,
    RetirementDelayResult,
    SickLeaveComparison,
    calculate_account_balance_projection,
    calculate_expectation_gap,
    calculate_retirement_delay,
    calculate_sick_leave_comparison,
)
from .calculator import PensionEvaluation, calculate_pension, current_year, evaluate_pension
from .tables import SickLeaveTable

__all__ = [
    "AccountBalanceRow",
    "ExpectationGap",
    "PensionEvaluation",
    "RetirementDelayResult",
    "SickLeaveComparison",
    "SickLeaveTable",
    "calculate_account_balance_projection",
    "calculate_expectation_gap",
    "calculate_pension",
    "calculate_retirement_delay",
    "calculate_sick_leave_comparison",
    "current_year",
    "evaluate_pension",
]
