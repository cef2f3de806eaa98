import streamlit as st

from sections import overview, time_patterns, yearly_trend

st.set_page_config(
    page_title="NYPD Shooting Incidents",
    page_icon="📊",
    layout="wide"
)

SECTIONS = {
    "Overview":             overview,
    "Time of Day & Season": time_patterns,
    "The Long-Run Trend":   yearly_trend,
}

# ── Sidebar ───────────────────────────────────────────────────────

st.sidebar.title("NYPD Shooting Incidents")
section = st.sidebar.radio("Navigate", list(SECTIONS))

SECTIONS[section].render()
