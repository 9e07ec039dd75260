import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

PAGE = Path(__file__).resolve().parents[1] / "pages" / "10_Quarterly_Emissions.py"


def _rec(country, gas, industry, date, emissions):
    return {
        "Country": country,
        "Gas Type": gas,
        "Industry": industry,
        "Seasonal Adjustment": "Seasonally Adjusted",
        "date": date,
        "emissions": emissions,
    }


RECORDS = [
    _rec("USA", "CO2", "Power", "2020-01-01T00:00:00.000", "10"),
    _rec("USA", "CO2", "Power", "2020-04-01T00:00:00.000", "20"),
    _rec("Canada", "CO2", "Power", "2020-01-01T00:00:00.000", "5"),
    _rec("USA", "CH4", "Transport", "2020-01-01T00:00:00.000", "1"),
]


def _app(data_path: Path) -> AppTest:
    at = AppTest.from_file(str(PAGE), default_timeout=30)
    at.secrets["EMISSIONS_LOCAL_PATH"] = str(data_path)
    return at.run()


@pytest.fixture
def app(tmp_path: Path) -> AppTest:
    p = tmp_path / "emissions.json"
    p.write_text(json.dumps(RECORDS), encoding="utf-8")
    return _app(p)


def _charts(at: AppTest):
    return at.get("plotly_chart")


def test_first_region_checked_by_default(app):
    assert not app.exception
    assert [(c.label, c.value) for c in app.checkbox] == [("USA", True), ("Canada", False)]
    assert app.selectbox(key="emissions_gas").value == "CO2"
    assert app.selectbox(key="emissions_industry").value == "Power"
    assert app.session_state["emissions_legend"] == ["USA"]
    assert len(_charts(app)) == 1


def test_legend_follows_checkboxes(app):
    app.checkbox(key="emissions_region_Canada").check().run()
    assert not app.exception
    assert app.session_state["emissions_legend"] == ["USA", "Canada"]
    assert len(_charts(app)) == 1

    app.checkbox(key="emissions_region_USA").uncheck().run()
    assert app.session_state["emissions_legend"] == ["Canada"]

    app.checkbox(key="emissions_region_Canada").uncheck().run()
    assert not app.exception
    assert app.session_state["emissions_legend"] == []
    assert len(_charts(app)) == 0


def test_absent_gas_industry_combination_clears_chart(app):
    app.selectbox(key="emissions_gas").select("CH4").run()
    assert not app.exception
    # CH4 only exists for Transport, industry is still Power
    assert len(_charts(app)) == 0

    app.selectbox(key="emissions_industry").select("Transport").run()
    assert not app.exception
    assert len(_charts(app)) == 1


def test_missing_data_file_renders_empty_page(tmp_path: Path):
    at = _app(tmp_path / "missing.json")
    assert not at.exception
    assert len(at.checkbox) == 0
    assert len(_charts(at)) == 0
