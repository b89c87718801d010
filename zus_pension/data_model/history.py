from __future__ import annotations

from typing import List

import pandas as pd

from .base import ColumnDefinition, TableModel
from .person import PERIOD_TYPES, SalaryEntry, SicknessPeriod


class HistoricalSalaryTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("Year", "Year", kind="number", default=2020, min_value=1960, step=1),
            ColumnDefinition(
                "Amount",
                "Annual Gross Salary (PLN)",
                kind="number",
                default=0.0,
                min_value=0.0,
                step=1000.0,
                format="%.2f",
                help="Annual amount; overrides the projected wage for that year",
            ),
        ]
        super().__init__("historicalSalaries", columns)


class SicknessPeriodTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("Year", "Year", kind="number", default=2024, min_value=1960, step=1),
            ColumnDefinition("Days", "Sick Days", kind="number", default=0.0, min_value=0.0, max_value=366.0, step=1.0),
            ColumnDefinition("Type", "Type", kind="select", default="past", options=list(PERIOD_TYPES)),
            ColumnDefinition("County", "County", help="Optional, informational only"),
        ]
        super().__init__("sicknessPeriods", columns)


def _number(row: dict, *keys: str) -> float:
    for key in keys:
        value = row.get(key)
        if value is not None and not pd.isna(value):
            return float(value)
    return 0.0


def dataframe_to_salaries(df: pd.DataFrame) -> List[SalaryEntry]:
    rows: List[SalaryEntry] = []
    for row in df.to_dict("records"):
        year = row.get("Year", row.get("year"))
        if year is None or pd.isna(year):
            continue
        amount = _number(row, "Amount", "amount")
        if amount <= 0.0:
            continue
        rows.append(SalaryEntry(year=int(year), amount=amount))
    return rows


def dataframe_to_sickness_periods(df: pd.DataFrame) -> List[SicknessPeriod]:
    rows: List[SicknessPeriod] = []
    for row in df.to_dict("records"):
        year = row.get("Year", row.get("year"))
        if year is None or pd.isna(year):
            continue
        days = _number(row, "Days", "days")
        if days <= 0.0:
            continue
        period_type = str(row.get("Type", row.get("type", "past")) or "past").strip().lower()
        if period_type not in PERIOD_TYPES:
            period_type = "past"
        county = row.get("County", row.get("county"))
        if county is not None and (pd.isna(county) or not str(county).strip()):
            county = None
        rows.append(
            SicknessPeriod(
                year=int(year),
                days=days,
                type=period_type,
                county=str(county).strip() if county is not None else None,
            )
        )
    return rows
