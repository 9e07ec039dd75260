# pages/10_Quarterly_Emissions.py
import streamlit as st

from emissions_core.analysis.chart import legend_row_html, reconcile_legend, region_colors, render_chart
from emissions_core.analysis.selectors import default_selection, distinct_values
from emissions_core.analysis.series import compute_series, series_to_frame
from emissions_core.loaders.emissions import (
    COL_GAS,
    COL_INDUSTRY,
    COL_REGION,
    hostname_from_host_header,
    load_emission_records,
    resolve_data_source,
)
from emissions_core.loaders.settings import load_settings

PAGE = "emissions"

settings = load_settings()
source = resolve_data_source(hostname_from_host_header(st.context.headers.get("Host")), settings)


@st.cache_data(ttl=settings.cache_ttl, show_spinner="Loading emission data…")
def get_records(src: str):
    return load_emission_records(src)


records = get_records(source)

regions = distinct_values(records, COL_REGION)
gases = distinct_values(records, COL_GAS)
industries = distinct_values(records, COL_INDUSTRY)

# fixed once from the full region list so a region keeps its colour across reruns
colors = region_colors(regions)
defaults = default_selection(regions, gases, industries)


# UI
st.title("Quarterly Greenhouse Gas Emissions")
st.caption("By Region, Gas Type, and Industry (Seasonally Adjusted)")

left, right = st.columns([1, 3])

with left:
    st.subheader("Regions")
    selected_regions = [
        r for r in regions
        if st.checkbox(r, value=r in defaults.regions, key=f"{PAGE}_region_{r}")
    ]

    st.subheader("Gas type")
    gas = st.selectbox("Gas type", gases, index=0 if gases else None, key=f"{PAGE}_gas", label_visibility="collapsed")

    st.subheader("Industry")
    industry = st.selectbox(
        "Industry", industries, index=0 if industries else None, key=f"{PAGE}_industry", label_visibility="collapsed"
    )

# Legend rows follow the selection, keyed by region
legend = reconcile_legend(st.session_state.get(f"{PAGE}_legend", []), selected_regions)
st.session_state[f"{PAGE}_legend"] = legend.rows

series = compute_series(records, selected_regions, gas, industry)

with right:
    for r in legend.rows:
        st.markdown(legend_row_html(r, colors.get(r, "")), unsafe_allow_html=True)
    chart_slot = st.empty()
    render_chart(chart_slot, series, colors)

if series:
    with st.expander("Filtered data"):
        st.dataframe(series_to_frame(series), width="stretch", hide_index=True)

with st.expander("Data & implementation notes"):
    st.markdown(
        f"""
- **Source:** `{source}` (hosted copy on `{', '.join(settings.remote_host_suffixes)}` hosts, local file otherwise).
- Only **Seasonally Adjusted** rows are shown.
- Duplicate (region, quarter) rows: the first one in the file is kept.
- Rows whose `date` does not match `YYYY-MM-DDTHH:MM:SS.fff` are skipped.
- All timestamps are UTC.
"""
    )
