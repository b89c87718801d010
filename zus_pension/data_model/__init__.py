from .base import ColumnDefinition, TableModel
from .history import (
    HistoricalSalaryTableModel,
    SicknessPeriodTableModel,
    dataframe_to_salaries,
    dataframe_to_sickness_periods,
)
from .person import GENDERS, PERIOD_TYPES, PersonData, SalaryEntry, SicknessPeriod
from .result import PensionCalculationResult
from .scenario import DEFAULT_PARAMETERS, SCENARIOS, FUS20Parameters

__all__ = [
    "ColumnDefinition",
    "DEFAULT_PARAMETERS",
    "FUS20Parameters",
    "GENDERS",
    "HistoricalSalaryTableModel",
    "PERIOD_TYPES",
    "PensionCalculationResult",
    "PersonData",
    "SCENARIOS",
    "SalaryEntry",
    "SicknessPeriod",
    "SicknessPeriodTableModel",
    "TableModel",
    "dataframe_to_salaries",
    "dataframe_to_sickness_periods",
]
