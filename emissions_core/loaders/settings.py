# emissions_core/loaders/settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st

DEFAULT_LOCAL_PATH = "data/quarterly_greenhouse_long.json"
DEFAULT_REMOTE_URL = (
    "https://mattzidell.github.io/DSC_209_P3/P3/D3_Visualization_Web_App/"
    "Data/quarterly_greenhouse_long.json"
)
# GitHub Pages and Streamlit Community Cloud (*.streamlit.app)
DEFAULT_REMOTE_HOST_SUFFIXES = ("github.io", "streamlit.app")

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", ""})


@dataclass(frozen=True)
class DataSettings:
    local_path: str = DEFAULT_LOCAL_PATH
    remote_url: str = DEFAULT_REMOTE_URL
    remote_host_suffixes: tuple[str, ...] = DEFAULT_REMOTE_HOST_SUFFIXES
    log_level: str = "INFO"
    cache_ttl: int = 3600


def read_secrets() -> dict[str, Any]:
    """Streamlit secrets as a plain dict ({} when no secrets.toml exists)."""
    try:
        return dict(st.secrets)
    except FileNotFoundError:
        return {}


def _as_suffixes(value: Any) -> tuple[str, ...]:
    """'github.io, example.org' or a list -> ('github.io', 'example.org')."""
    items = value.split(",") if isinstance(value, str) else value
    return tuple(str(v).strip().lower() for v in items if str(v).strip())


def load_settings(secrets: Optional[Mapping[str, Any]] = None) -> DataSettings:
    """
    Build DataSettings from secrets, falling back to defaults per key.
    Pass a mapping explicitly in tests; otherwise st.secrets is read.
    """
    s = read_secrets() if secrets is None else secrets
    d = DataSettings()
    return DataSettings(
        local_path=str(s.get("EMISSIONS_LOCAL_PATH", d.local_path)),
        remote_url=str(s.get("EMISSIONS_REMOTE_URL", d.remote_url)),
        remote_host_suffixes=_as_suffixes(s.get("EMISSIONS_REMOTE_HOST_SUFFIX", d.remote_host_suffixes)),
        log_level=str(s.get("EMISSIONS_LOG_LEVEL", d.log_level)).upper(),
        cache_ttl=int(s.get("EMISSIONS_CACHE_TTL", d.cache_ttl)),
    )
