# pages/01_Home.py
import streamlit as st


st.title("Greenhouse Gas Emissions Explorer")
st.caption("Interactive view of quarterly greenhouse-gas emissions by region, gas type and industry.")

st.divider()
st.page_link(
    "pages/10_Quarterly_Emissions.py",
    label="Open the Quarterly Emissions chart",
    icon=":material/multiline_chart:",
)
st.divider()

st.markdown(
    """
### What this app helps you do
- **Compare** seasonally adjusted emissions of several countries on one chart.
- **Switch** the gas type and the industry to see how each contributes over time.
"""
)

with st.expander("Quick start", expanded=True):
    st.markdown(
        """
1) Open **Quarterly Emissions**; the first country is selected by default.  
2) Tick more countries to add lines; each country keeps the same colour.  
3) Pick a gas type and an industry from the dropdowns; the chart redraws immediately.
        """
    )
