"""
shootings/aggregates.py
-----------------------
Group-by-count reductions over the cleaned incident table.

Each aggregate is a two-column DataFrame (key, incidents), sorted
by an integer key. Rows whose key cannot be derived (NaT date or
time) are left out of the count.
"""

import pandas as pd

from shootings.constants import COUNT_COLUMN, PARTIAL_WEEK
from shootings.helpers import share_pct


def _count_by(keys: pd.Series, name: str) -> pd.DataFrame:
    keys = keys.dropna().astype(int).rename(name)
    return (
        keys.to_frame()
        .groupby(name)
        .size()
        .reset_index(name=COUNT_COLUMN)
    )


def hour_of_day(times: pd.Series) -> pd.Series:
    return times.dt.total_seconds() // 3600


def week_of_year(dates: pd.Series) -> pd.Series:
    # isocalendar() returns UInt32 with <NA>; float keeps dropna() uniform
    return dates.dt.isocalendar().week.astype("float")


def incidents_by_hour(df: pd.DataFrame) -> pd.DataFrame:
    return _count_by(hour_of_day(df["occur_time"]), "hour")


def incidents_by_week(df: pd.DataFrame) -> pd.DataFrame:
    """
    Incidents per ISO week. Week 53 only exists in some years, so its
    count is a fraction of the others and is removed after counting.
    """
    weekly = _count_by(week_of_year(df["occur_date"]), "week")
    return weekly[weekly["week"] != PARTIAL_WEEK].reset_index(drop=True)


def incidents_by_year(df: pd.DataFrame) -> pd.DataFrame:
    return _count_by(df["occur_date"].dt.year, "year")


def headline_totals(df: pd.DataFrame) -> pd.DataFrame:
    murders = int(df["stat_murder"].sum(skipna=True))
    return pd.DataFrame([{
        "total_incidents": len(df),
        "date_from":       df["occur_date"].min(),
        "date_to":         df["occur_date"].max(),
        "murders":         murders,
        "murder_pct":      share_pct(murders, len(df)),
    }])
