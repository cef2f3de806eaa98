"""
shootings/pipeline.py
---------------------
Composes the cleaning, aggregation and regression steps.

Every function takes a DataFrame and returns new objects; nothing is
cached or written to disk, so running twice on the same extract gives
identical tables and coefficients.
"""

import pandas as pd

from shootings.aggregates import (
    headline_totals,
    incidents_by_hour,
    incidents_by_week,
    incidents_by_year,
)
from shootings.cleaning import clean
from shootings.constants import TREND_CUTOFF_YEAR
from shootings.regression import fit_year_trend


def build_aggregates(incidents: pd.DataFrame) -> dict:
    """
    Returns a dict of DataFrames built from the cleaned incidents.

    Keys:
        headline – one-row totals (incidents, date range, murders)
        by_hour  – hour, incidents
        by_week  – week, incidents (week 53 removed)
        by_year  – year, incidents
    """
    return {
        "headline": headline_totals(incidents),
        "by_hour":  incidents_by_hour(incidents),
        "by_week":  incidents_by_week(incidents),
        "by_year":  incidents_by_year(incidents),
    }


def run_pipeline(raw: pd.DataFrame, cutoff: int = TREND_CUTOFF_YEAR) -> dict:
    """
    Clean *raw*, build the aggregates and fit the yearly trend.

    The returned dict holds the build_aggregates() keys plus
    'incidents' (the cleaned table) and 'fit' (statsmodels results).
    A degenerate trend input raises ValueError from fit_year_trend().
    """
    incidents = clean(raw)
    result = build_aggregates(incidents)
    result["incidents"] = incidents
    result["fit"] = fit_year_trend(result["by_year"], cutoff)
    return result
