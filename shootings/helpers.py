"""
shootings/helpers.py
--------------------
Small general-purpose helper functions used across the pipeline and
the report. These are pure Python with no Streamlit or Plotly
dependencies so they can also be used safely from build_report.py.

Import example:
    from shootings.helpers import check_required_columns, fmt_pct
"""

import pandas as pd

from shootings.constants import COUNT_COLUMN


# ── DataFrame helpers ─────────────────────────────────────────────

def lookup_count(aggregate: pd.DataFrame, key: str, value: int) -> int:
    """
    Return the incident count for a single key value of an aggregate
    table (e.g. year 2019 in the by-year table).

    Returns 0 rather than raising if the key value is absent, so
    narrative text can be formatted without a try/except.
    """
    mask = aggregate[key] == value
    vals = aggregate.loc[mask, COUNT_COLUMN].values
    return int(vals[0]) if len(vals) else 0


def peak_row(aggregate: pd.DataFrame, col: str = COUNT_COLUMN) -> pd.Series:
    """Row with the highest value in *col*."""
    return aggregate.loc[aggregate[col].idxmax()]


def trough_row(aggregate: pd.DataFrame, col: str = COUNT_COLUMN) -> pd.Series:
    """Row with the lowest value in *col*."""
    return aggregate.loc[aggregate[col].idxmin()]


def share_pct(part: float | int, whole: float | int, decimals: int = 1) -> float:
    """
    Percentage of *part* in *whole*, rounded. Returns nan when the
    whole is zero.
    """
    if not whole:
        return float("nan")
    return round(part / whole * 100, decimals)


# ── Formatting helpers ────────────────────────────────────────────

def fmt_pct(value: float, sign: bool = True, decimals: int = 0) -> str:
    """
    Format a float as a percentage string.

    Args:
        value:    Numeric value (e.g. 53.5 for 53.5%).
        sign:     If True, prepend '+' for positive values.
        decimals: Number of decimal places.

    Returns:
        Formatted string e.g. '+53%', '-18.5%', '7.1%'.
    """
    fmt = f"+.{decimals}f" if sign else f".{decimals}f"
    return f"{value:{fmt}}%"


def fmt_count(value: float | int) -> str:
    """Format a number with thousands separator."""
    return f"{int(value):,}"


def fmt_hour(hour: int) -> str:
    """24-hour clock label for an hour of day, e.g. 7 -> '07:00'."""
    return f"{int(hour):02d}:00"


# ── Validation helpers ────────────────────────────────────────────

def check_required_columns(
    df: pd.DataFrame,
    required: list[str],
    label: str = "DataFrame",
) -> list[str]:
    """
    Check that all required columns are present.

    Returns a list of missing column names (empty list if all present).
    Useful for giving clear error messages before a pipeline step.

    Args:
        df:       DataFrame to check.
        required: List of expected column names.
        label:    Human-readable name for the DataFrame, used in messages.

    Returns:
        List of missing column names.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        print(f"  WARNING [{label}]: missing columns: {missing}")
    return missing
