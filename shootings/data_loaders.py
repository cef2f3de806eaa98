"""
shootings/data_loaders.py
-------------------------
Data loading for the streamlit report. Every function is decorated
with @st.cache_data so the extract is downloaded and cleaned once per
session rather than on every page switch.

Failures are shown with st.error() and the page is stopped: the
report has nothing to draw without the extract.
"""

import pandas as pd
import streamlit as st

from shootings.cleaning import clean, summarise_data_quality
from shootings.constants import DATA_URL
from shootings.fetch import fetch_incidents
from shootings.pipeline import build_aggregates


@st.cache_data(show_spinner="Downloading NYPD shooting incident data...")
def load_raw_incidents(url: str = DATA_URL) -> pd.DataFrame:
    try:
        return fetch_incidents(url)
    except RuntimeError as e:
        st.error(str(e))
        st.stop()


@st.cache_data
def load_report_data(url: str = DATA_URL) -> dict:
    """
    Returns a dict of DataFrames used by the report sections.

    Keys:
        incidents    – cleaned incident table
        headline     – one-row totals
        by_hour      – hour, incidents
        by_week      – week, incidents (week 53 removed)
        by_year      – year, incidents
        data_quality – output of summarise_data_quality()
    """
    raw = load_raw_incidents(url)
    try:
        incidents = clean(raw)
    except ValueError as e:
        st.error(f"Could not clean the incident extract: {e}")
        st.stop()

    result = build_aggregates(incidents)
    result["incidents"] = incidents
    result["data_quality"] = summarise_data_quality(raw, incidents)
    return result
