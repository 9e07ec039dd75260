from __future__ import annotations

import html
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from emissions_core.loaders.emissions import COL_DATE, COL_EMISSIONS

WIDTH = 928
HEIGHT = 500
MARGIN = dict(t=100, r=30, b=30, l=60)

TITLE = "Quarterly Greenhouse Gas Emissions"
SUBTITLE = "By Region, Gas Type, and Industry (Seasonally Adjusted)"
Y_LABEL = "↑ Emissions (Million metric tons CO₂ eq.)"

PALETTE = px.colors.qualitative.T10  # Tableau 10


@dataclass(frozen=True)
class LegendUpdate:
    entered: list[str]
    exited: list[str]
    rows: list[str]


def region_colors(regions: Sequence[str]) -> Mapping[str, str]:
    """Fixed region -> colour map over the full region list (palette cycles)."""
    return MappingProxyType({r: PALETTE[i % len(PALETTE)] for i, r in enumerate(regions)})


def time_domain(series: Mapping[str, pd.DataFrame]) -> tuple[pd.Timestamp, pd.Timestamp]:
    dates = pd.concat([g[COL_DATE] for g in series.values()], ignore_index=True)
    return dates.min(), dates.max()


E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: int) -> float:
    """Tick step for [start, stop]; a negative result -n means a step of 1/n."""
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= E10 else 5 if error >= E5 else 2 if error >= E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_max(value: float, count: int = 10) -> float:
    """
    Extend [0, value] outward to whole 1/2/5 x 10^n tick steps, repeating
    until the step no longer changes (same result as a d3 linear nice()).
    """
    if value is None or not np.isfinite(value) or value <= 0:
        return 1.0
    start, stop = 0.0, float(value)
    prestep = None
    for _ in range(10):
        step = _tick_increment(start, stop, count)
        if step == prestep:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        prestep = step
    return float(stop)


def value_domain(series: Mapping[str, pd.DataFrame]) -> tuple[float, float]:
    """(0, nice max emissions); the axis never starts above zero."""
    values = np.concatenate([g[COL_EMISSIONS].to_numpy(dtype=float) for g in series.values()])
    finite = values[np.isfinite(values)]
    vmax = float(finite.max()) if finite.size else 0.0
    return 0.0, nice_max(vmax)


def build_emissions_figure(
    series: Mapping[str, pd.DataFrame],
    colors: Mapping[str, str],
) -> Optional[go.Figure]:
    """One line per region over shared time/value axes. None when there is nothing to draw."""
    if not series:
        return None

    x0, x1 = time_domain(series)
    y0, y1 = value_domain(series)

    fig = go.Figure()
    for region, g in series.items():
        fig.add_trace(
            go.Scatter(
                x=g[COL_DATE],
                y=g[COL_EMISSIONS],
                mode="lines",
                name=region,
                line=dict(color=colors.get(region, PALETTE[0]), width=2),
                hovertext=region,
                hoverinfo="text",
            )
        )

    fig.update_layout(
        width=WIDTH,
        height=HEIGHT,
        margin=MARGIN,
        title=dict(
            text=f"<b>{TITLE}</b><br><span style='font-size:14px;color:gray'>{SUBTITLE}</span>",
            x=0.5,
            xanchor="center",
            font=dict(size=20),
        ),
        showlegend=False,
        plot_bgcolor="white",
        hovermode="closest",
    )
    fig.update_xaxes(
        type="date",
        range=[x0, x1],
        nticks=WIDTH // 80,
        showgrid=False,
        ticks="outside",
        showline=True,
        linecolor="black",
    )
    fig.update_yaxes(
        range=[y0, y1],
        title_text=Y_LABEL,
        showgrid=True,
        gridcolor="rgba(0,0,0,0.1)",
        zeroline=False,
    )
    return fig


def render_chart(container, series: Mapping[str, pd.DataFrame], colors: Mapping[str, str]) -> None:
    """
    Clear `container` (an st.empty() slot) and draw the chart into it.
    An empty mapping just leaves the slot cleared.
    """
    container.empty()
    fig = build_emissions_figure(series, colors)
    if fig is None:
        return
    container.plotly_chart(fig)


def reconcile_legend(previous: Sequence[str], selected: Sequence[str]) -> LegendUpdate:
    """
    Keyed join of legend rows on region: kept rows stay where they were,
    new regions are appended, deselected ones dropped.
    """
    wanted = set(selected)
    shown = set(previous)
    entered = [r for r in dict.fromkeys(selected) if r not in shown]
    exited = [r for r in previous if r not in wanted]
    rows = [r for r in previous if r in wanted] + entered
    return LegendUpdate(entered=entered, exited=exited, rows=rows)


def legend_row_html(region: str, color: str) -> str:
    """One legend row (colour swatch + name); the name is HTML-escaped."""
    return (
        "<div style='display:flex;align-items:center;margin:4px 0'>"
        "<span style='width:15px;height:15px;border-radius:3px;margin-right:8px;"
        f"background-color:{html.escape(str(color), quote=True)}'></span>"
        f"{html.escape(str(region))}</div>"
    )
