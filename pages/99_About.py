# pages/99_About.py
import streamlit as st

st.title("About")

st.markdown(
    """
### Data
- Quarterly greenhouse-gas emissions in long format: one JSON record per
  country, gas type, industry, seasonal adjustment and quarter.
- Served from the local `data/` folder when running on your machine, and from
  the published copy when the app is hosted.

### Under the hood
- **UI:** Streamlit (each widget change reruns the page and redraws the chart).
- **Data:** pandas for filtering, de-duplication and sorting.
- **Plotting:** Plotly, Tableau 10 colours fixed per country.
- **Config:** optional `.streamlit/secrets.toml` (see `secrets.toml.example`).
"""
)
