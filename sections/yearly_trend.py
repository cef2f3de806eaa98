"""
sections/yearly_trend.py
------------------------
'The Long-Run Trend' section: yearly incidents, a linear trend
fitted on the years before 2020, the regression summary table, and
how far the later years sit from the extrapolated trend.
"""

import streamlit as st

from shootings.charts import year_trend_chart
from shootings.constants import CHART_CONFIG, COEFFICIENT_RENAME, TREND_CUTOFF_YEAR
from shootings.data_loaders import load_report_data
from shootings.helpers import fmt_count, fmt_pct, lookup_count
from shootings.regression import (
    coefficient_table,
    excess_over_trend,
    fit_summary,
    fit_year_trend,
)


def render():
    st.title("The Long-Run Trend")
    st.markdown(f"""
    Until 2019 recorded shootings in New York fell almost every year. The
    question for this section is how steady that decline was, and how far
    {TREND_CUTOFF_YEAR} and the years after it broke from it.
    """)

    data    = load_report_data()
    by_year = data["by_year"]

    try:
        fit = fit_year_trend(by_year, TREND_CUTOFF_YEAR)
    except ValueError as e:
        st.warning(f"The yearly trend could not be fitted: {e}")
        st.stop()

    summary = fit_summary(fit)
    excess  = excess_over_trend(by_year, fit, TREND_CUTOFF_YEAR)

    first_count = lookup_count(by_year, "year", summary["first_year"])
    last_count  = lookup_count(by_year, "year", summary["last_year"])

    col1, col2, col3 = st.columns(3)
    col1.metric(
        f"Incidents in {summary['first_year']}", fmt_count(first_count),
    )
    col2.metric(
        f"Incidents in {summary['last_year']}", fmt_count(last_count),
        fmt_pct((last_count - first_count) / first_count * 100) if first_count else None,
        delta_color="inverse",
    )
    col3.metric(
        "Trend per year", f"{summary['slope']:+,.0f}",
        f"adj. R² {summary['adj_r_squared']:.2f}", delta_color="off",
    )

    st.divider()

    st.subheader("Incidents per year")
    st.plotly_chart(
        year_trend_chart(by_year, fit, TREND_CUTOFF_YEAR),
        use_container_width=True, config=CHART_CONFIG,
    )

    st.markdown(f"""
    Fitted on {summary['first_year']} to {summary['last_year']}, a straight
    line explains {summary['adj_r_squared']:.0%} of the year-to-year variation
    (adjusted R²). Over that period the count fell by about
    {abs(summary['slope']):,.0f} incidents a year.
    """)

    _render_break(excess)

    st.divider()

    st.subheader("Regression summary")
    st.markdown(f"""
    Ordinary least squares of yearly incidents on year, using only the years
    before {TREND_CUTOFF_YEAR} ({summary['n_years']} observations, intercept
    included).
    """)
    st.dataframe(
        coefficient_table(fit).rename(columns=COEFFICIENT_RENAME),
        hide_index=True,
        use_container_width=True,
    )
    st.caption(
        f"R² {summary['r_squared']:.3f} | adjusted R² "
        f"{summary['adj_r_squared']:.3f} | slope p-value "
        f"{summary['slope_p_value']:.2g}"
    )


def _render_break(excess):
    if excess.empty:
        st.info(f"The extract contains no incidents from {TREND_CUTOFF_YEAR} onwards.")
        return

    first = excess.iloc[0]
    st.markdown(f"""
    {int(first['year'])} broke the pattern. The trend pointed to around
    {fmt_count(max(first['expected'], 0))} incidents; {fmt_count(first['observed'])}
    were recorded, {fmt_pct(first['difference_pct'])} against the line. The
    table shows each year from {TREND_CUTOFF_YEAR} against the extrapolated
    trend.
    """)
    st.dataframe(
        excess.rename(columns={
            "year":           "Year",
            "observed":       "Recorded",
            "expected":       "Trend",
            "difference":     "Difference",
            "difference_pct": "% vs trend",
        }),
        hide_index=True,
        use_container_width=True,
    )
