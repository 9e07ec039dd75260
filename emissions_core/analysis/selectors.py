from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd


@dataclass(frozen=True)
class Selection:
    regions: tuple[str, ...]
    gas: Optional[str]
    industry: Optional[str]


def distinct_values(records: pd.DataFrame, field: str) -> list:
    """Distinct values of one column in first-seen order (missing values dropped)."""
    if records is None or records.empty or field not in records.columns:
        return []
    return records[field].dropna().drop_duplicates(keep="first").tolist()


def default_selection(
    regions: Sequence[str],
    gases: Sequence[str],
    industries: Sequence[str],
) -> Selection:
    """First region checked, first gas and first industry picked."""
    return Selection(
        regions=tuple(regions[:1]),
        gas=gases[0] if len(gases) else None,
        industry=industries[0] if len(industries) else None,
    )
