from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd


@dataclass
class ColumnDefinition:
    """Column schema served to the form layer for editable tables."""

    field: str
    label: str
    kind: str = "text"  # text | number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None


@dataclass
class TableModel:
    """A table schema plus its default rows."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows)
        seed = {col.field: col.default for col in self.columns}
        return pd.DataFrame([seed])

    def to_payload(self) -> Dict[str, Any]:
        columns = [
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "options": col.options or [],
                "min": col.min_value,
                "max": col.max_value,
                "step": col.step,
                "format": col.format,
                "help": col.help,
            }
            for col in self.columns
        ]
        defaults = [
            {key: (None if isinstance(value, float) and not math.isfinite(value) else value) for key, value in row.items()}
            for row in self.create_default_df().to_dict("records")
        ]
        return {"name": self.name, "columns": columns, "defaults": defaults}
