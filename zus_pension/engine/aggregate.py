from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

import pandas as pd

from .analyses import AccountBalanceRow
from .contributions import ContributionBreakdown

PROJECTION_COLUMNS = {
    "year": "Year",
    "age": "Age",
    "account_balance": "AccountBalance",
    "subaccount_balance": "SubaccountBalance",
    "total_balance": "TotalBalance",
    "annual_contribution": "AnnualContribution",
}
REQUIRED_COLUMNS = set(PROJECTION_COLUMNS.values())


def projection_frame(rows: Iterable[AccountBalanceRow]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(row) for row in rows], columns=list(PROJECTION_COLUMNS))
    return df.rename(columns=PROJECTION_COLUMNS)


def contributions_frame(breakdown: ContributionBreakdown) -> pd.DataFrame:
    df = pd.DataFrame([asdict(item) for item in breakdown.yearly])
    if df.empty:
        return df
    df["Cumulative"] = df["valorized_contribution"].cumsum()
    return df


def aggregate_projection(df: pd.DataFrame, step: int = 5) -> pd.DataFrame:
    """Thin a yearly balance projection to every ``step`` years, keeping the final year.

    Balances are end-of-period snapshots; contributions are summed over the period.
    """
    if df.empty:
        return df
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")

    step = max(1, int(step))
    df = df.sort_values("Year").copy()
    df["PeriodValue"] = (df["Year"] - df["Year"].iloc[0]) // step
    grouped = df.groupby("PeriodValue", as_index=False)
    snapshots = grouped.last()
    snapshots["AnnualContribution"] = grouped["AnnualContribution"].sum()["AnnualContribution"]
    first_years = grouped["Year"].first()["Year"]
    snapshots["Period"] = first_years.astype(str) + "-" + snapshots["Year"].astype(str)
    return snapshots.rename(columns={"AnnualContribution": "PeriodContribution"})
