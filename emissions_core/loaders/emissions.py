# emissions_core/loaders/emissions.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd
import requests

from emissions_core.loaders.settings import LOCAL_HOSTS, DataSettings

logger = logging.getLogger(__name__)

# column names as they appear in the JSON records
COL_REGION = "Country"
COL_GAS = "Gas Type"
COL_INDUSTRY = "Industry"
COL_ADJUSTMENT = "Seasonal Adjustment"
COL_DATE = "date"
COL_EMISSIONS = "emissions"

RECORD_COLUMNS = [COL_REGION, COL_GAS, COL_INDUSTRY, COL_ADJUSTMENT, COL_DATE, COL_EMISSIONS]


def hostname_from_host_header(host: Optional[str]) -> str:
    """'localhost:8501' -> 'localhost'; None -> ''."""
    if not host:
        return ""
    host = host.strip().lower()
    if host.startswith("["):  # [::1]:8501
        return host[1:].split("]", 1)[0]
    return host.split(":", 1)[0]


def resolve_data_source(hostname: str, settings: DataSettings) -> str:
    """
    Hosted deployments read the published JSON; everything else
    (localhost, 127.0.0.1, file://, unknown hosts) reads the local copy.
    """
    is_local = hostname in LOCAL_HOSTS
    if hostname.endswith(settings.remote_host_suffixes) and not is_local:
        return settings.remote_url
    return settings.local_path


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_emission_json(source: Union[str, Path]) -> Any:
    """Read the raw JSON payload from a URL or a local path. Raises on failure."""
    src = str(source)
    if _is_url(src):
        r = requests.get(src)
        r.raise_for_status()
        return r.json()
    return json.loads(Path(src).read_text(encoding="utf-8"))


def empty_records() -> pd.DataFrame:
    return pd.DataFrame(columns=RECORD_COLUMNS)


def records_from_payload(payload: Any) -> pd.DataFrame:
    """
    Turn a JSON array of objects into the record frame.
    Raises ValueError if the payload is not an array of objects or lacks record columns.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array of records, got {type(payload).__name__}")
    if not payload:
        return empty_records()
    if not all(isinstance(row, dict) for row in payload):
        raise ValueError("every record must be a JSON object")

    df = pd.DataFrame(payload)
    missing = [c for c in RECORD_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"records are missing columns: {missing}")
    return df


def load_emission_records(source: Union[str, Path]) -> pd.DataFrame:
    """
    Load all emission records from `source`.
    Fail-soft: network/file/JSON problems are logged and give an empty frame.
    """
    logger.info(f"Loading emission records from {source}")
    try:
        df = records_from_payload(fetch_emission_json(source))
    except (requests.RequestException, OSError, ValueError) as e:
        # json.JSONDecodeError and requests' JSON errors are ValueError subclasses
        logger.error(f"Error loading emission data from {source}: {e}")
        return empty_records()

    logger.info(f"Loaded {len(df)} emission records")
    return df
