from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from emissions_core.loaders.emissions import (
    COL_ADJUSTMENT,
    COL_DATE,
    COL_EMISSIONS,
    COL_GAS,
    COL_INDUSTRY,
    COL_REGION,
)

logger = logging.getLogger(__name__)

SEASONALLY_ADJUSTED = "Seasonally Adjusted"
# e.g. "2020-03-31T00:00:00.000", always read as UTC
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def parse_record_dates(values: pd.Series) -> pd.Series:
    """Parse record timestamps with the fixed format; anything else becomes NaT."""
    return pd.to_datetime(values.astype("string"), format=DATE_FORMAT, utc=True, errors="coerce")


def compute_series(
    records: pd.DataFrame,
    selected_regions: Iterable[str],
    selected_gas: Optional[str],
    selected_industry: Optional[str],
) -> dict[str, pd.DataFrame]:
    """
    Filter the records to the selection and split them into one series per region.

    - only "Seasonally Adjusted" rows are ever used
    - rows with an unparseable date are skipped (one warning per call)
    - duplicates per (region, date) keep the first row in input order
    - each region's frame has columns date, emissions sorted by date
    Regions appear in the order they are first seen. Empty selection result -> {}.
    """
    if records is None or records.empty:
        return {}

    mask = (
        records[COL_REGION].isin(list(selected_regions))
        & (records[COL_GAS] == selected_gas)
        & (records[COL_INDUSTRY] == selected_industry)
        & (records[COL_ADJUSTMENT] == SEASONALLY_ADJUSTED)
    )
    d = records.loc[mask, [COL_REGION, COL_DATE, COL_EMISSIONS]].copy()
    if d.empty:
        return {}

    d[COL_DATE] = parse_record_dates(d[COL_DATE])
    bad = d[COL_DATE].isna()
    if bad.any():
        logger.warning(f"Skipping {int(bad.sum())} record(s) with unparseable dates")
        d = d[~bad]

    d[COL_EMISSIONS] = pd.to_numeric(d[COL_EMISSIONS], errors="coerce").astype(float)
    d = d.drop_duplicates(subset=[COL_REGION, COL_DATE], keep="first")

    out: dict[str, pd.DataFrame] = {}
    for region, g in d.groupby(COL_REGION, sort=False):
        out[region] = (
            g[[COL_DATE, COL_EMISSIONS]]
            .sort_values(COL_DATE, kind="stable")
            .reset_index(drop=True)
        )
    return out


def series_to_frame(series: dict[str, pd.DataFrame]) -> pd.DataFrame:
    """Long table (Country, date, emissions) of all series, for display."""
    if not series:
        return pd.DataFrame(columns=[COL_REGION, COL_DATE, COL_EMISSIONS])
    frames = [g.assign(**{COL_REGION: region}) for region, g in series.items()]
    return pd.concat(frames, ignore_index=True)[[COL_REGION, COL_DATE, COL_EMISSIONS]]
