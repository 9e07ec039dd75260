# app.py
from pathlib import Path
import streamlit as st

from emissions_core.loaders.log_setup import configure_logging
from emissions_core.loaders.settings import load_settings

st.set_page_config(page_title="Quarterly GHG Emissions", page_icon="🌍", layout="wide")

configure_logging(load_settings().log_level)

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Overview
add("Overview", "pages/01_Home.py", "Home", ":material/home:")
add("Overview", "pages/10_Quarterly_Emissions.py", "Quarterly Emissions", ":material/multiline_chart:")
add("Overview", "pages/99_About.py", "About", ":material/info:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
