"""
sections/overview.py
--------------------
'Overview' section: what the dataset is, headline totals, and a
data quality note on values the cleaning step could not recognise.
"""

import streamlit as st

from shootings.constants import DATA_PORTAL_PAGE, DATA_QUALITY_RENAME
from shootings.data_loaders import load_report_data
from shootings.helpers import fmt_count


def render():
    st.title("NYPD Shooting Incidents")
    st.markdown("""
    Every shooting incident recorded by the New York City Police Department
    since 2006 is published as a single historic extract. Each row is one
    incident: when it happened, whether it was classified as a murder, and
    what is known about the age group, sex and race of the perpetrator and
    the victim.

    This report looks at three questions. At what time of day do shootings
    happen? Is there a season for them? And how did the yearly total change
    over time, both before and after 2020?
    """)

    data     = load_report_data()
    headline = data["headline"].iloc[0]

    st.caption(
        "NYPD Shooting Incident Data (Historic), NYC Open Data. "
        f"Incidents dated {headline['date_from']:%d %b %Y} to "
        f"{headline['date_to']:%d %b %Y}."
    )
    col1, col2, col3 = st.columns(3)
    col1.metric("Incidents recorded", fmt_count(headline["total_incidents"]))
    col2.metric("Classified as murder", fmt_count(headline["murders"]))
    col3.metric("Share classified as murder", f"{headline['murder_pct']:.1f}%")

    st.divider()

    st.subheader("How the data was prepared")
    st.markdown("""
    Location and jurisdiction fields (borough, precinct, location
    descriptions) are set aside: this report is about timing, not place.
    Dates are read as month/day/year and times as hour:minute:second.
    Age group, sex and race are matched against the fixed categories the
    NYPD uses. A value that does not match, such as a blank or a mistyped
    age group, is kept as missing rather than dropped, so the incident still
    counts towards the totals.
    """)

    _render_data_quality(data["data_quality"])

    st.caption(f"Source: {DATA_PORTAL_PAGE}")


def _render_data_quality(quality):
    flagged = quality[quality["unmatched"] > 0]

    with st.expander("Data quality: values not recognised during cleaning"):
        if flagged.empty:
            st.info("Every date, time and demographic value matched its expected format.")
            return

        st.markdown("""
        Counts of values that were present in the extract but did not parse
        as a date or time, or did not match a known category. Perpetrator
        fields are often blank or recorded as '(null)' when nobody was
        identified.
        """)
        st.dataframe(
            flagged.rename(columns=DATA_QUALITY_RENAME),
            hide_index=True,
            use_container_width=True,
        )
