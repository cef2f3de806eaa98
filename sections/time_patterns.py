"""
sections/time_patterns.py
-------------------------
'Time of Day & Season' section: incidents by hour of day and by
week of year, each as points with a smoothed trend curve.
"""

import streamlit as st

from shootings.charts import hour_chart, week_chart
from shootings.constants import CHART_CONFIG, COUNT_COLUMN
from shootings.data_loaders import load_report_data
from shootings.helpers import fmt_count, fmt_hour, peak_row, trough_row


def render():
    st.title("When Shootings Happen")
    st.markdown("""
    Shootings are not spread evenly across the day or the year. The two
    charts below count every incident in the extract by the hour it
    happened and by the week of the year, regardless of year.
    """)

    data    = load_report_data()
    by_hour = data["by_hour"]
    by_week = data["by_week"]

    _render_hours(by_hour)

    st.divider()

    _render_weeks(by_week)


def _render_hours(by_hour):
    st.subheader("By hour of day")

    peak   = peak_row(by_hour)
    trough = trough_row(by_hour)
    ratio  = peak[COUNT_COLUMN] / trough[COUNT_COLUMN] if trough[COUNT_COLUMN] else float("nan")

    col1, col2 = st.columns(2)
    col1.metric("Busiest hour", fmt_hour(peak["hour"]), f"{fmt_count(peak[COUNT_COLUMN])} incidents", delta_color="off")
    col2.metric("Quietest hour", fmt_hour(trough["hour"]), f"{fmt_count(trough[COUNT_COLUMN])} incidents", delta_color="off")

    st.plotly_chart(hour_chart(by_hour), use_container_width=True, config=CHART_CONFIG)

    st.markdown(f"""
    Shootings are a night-time phenomenon. The count falls through the early
    morning to its lowest point around {fmt_hour(trough['hour'])}, then climbs
    steadily from midday into the evening. The busiest hour,
    {fmt_hour(peak['hour'])}, sees roughly {ratio:.0f} times as many incidents
    as the quietest.
    """)


def _render_weeks(by_week):
    st.subheader("By week of year")

    peak   = peak_row(by_week)
    trough = trough_row(by_week)

    st.plotly_chart(week_chart(by_week), use_container_width=True, config=CHART_CONFIG)

    st.markdown(f"""
    There is a clear summer season. Incidents are lowest in the first months
    of the year (week {int(trough['week'])} is the quietest, with
    {fmt_count(trough[COUNT_COLUMN])}), rise through spring and peak in
    midsummer: week {int(peak['week'])} has the most, with
    {fmt_count(peak[COUNT_COLUMN])}. Numbers fall away again through autumn.
    """)

    st.caption("""
    Weeks are ISO weeks. Week 53 only occurs in some years, so its total
    covers far fewer days than the others and is left off the chart.
    """)
