"""
shootings/cleaning.py
---------------------
Turns the raw NYPD shooting extract into one tidy row per incident.

Steps (each importable on its own, composed by clean()):
    select_columns     INCIDENT_KEY..VIC_RACE, minus location fields
    standardise_names  lower snake_case, short murder flag / victim names
    parse_dates        occur_date, occur_time, stat_murder
    coerce_categories  fixed vocabularies for age group, sex and race

Values that cannot be parsed or are outside a vocabulary become
NaT / NaN without raising. summarise_data_quality() counts them for
the report; clean() itself stays silent.
"""

import pandas as pd

from shootings.constants import (
    BOOLEAN_VALUES,
    CATEGORICAL_FIELDS,
    COLUMN_RENAME,
    DATE_FORMAT,
    DROP_COLUMNS,
    FIRST_COLUMN,
    LAST_COLUMN,
)
from shootings.helpers import check_required_columns, share_pct

_PARSED_FIELDS = ["occur_date", "occur_time", "stat_murder"]


# ── Steps ─────────────────────────────────────────────────────────

def select_columns(raw: pd.DataFrame) -> pd.DataFrame:
    missing = check_required_columns(raw, [FIRST_COLUMN, LAST_COLUMN], "raw incidents")
    if missing:
        raise ValueError(
            f"Incident extract is missing columns {missing}. "
            f"Found: {list(raw.columns)}"
        )

    start = raw.columns.get_loc(FIRST_COLUMN)
    end   = raw.columns.get_loc(LAST_COLUMN)
    df = raw.iloc[:, start:end + 1]
    return df.drop(columns=DROP_COLUMNS, errors="ignore").copy()


def standardise_names(df: pd.DataFrame) -> pd.DataFrame:
    df = df.rename(columns=lambda c: c.strip().lower().replace(" ", "_"))
    return df.rename(columns=COLUMN_RENAME)


def parse_occur_time(values: pd.Series) -> pd.Series:
    """
    Parse 'HH:MM:SS' (or 'HH:MM') text into a time-of-day Timedelta.
    Anything else, negative, or 24 hours and over, becomes NaT.
    """
    text  = values.astype(str).str.strip()
    short = text.str.fullmatch(r"\d{1,2}:\d{2}")
    valid = short | text.str.fullmatch(r"\d{1,2}:\d{2}:\d{2}")
    text  = text.where(~short, text + ":00").where(valid)

    times = pd.to_timedelta(text, errors="coerce")
    return times.where((times >= pd.Timedelta(0)) & (times < pd.Timedelta(days=1)))


def parse_flag(values: pd.Series) -> pd.Series:
    """Map true/false style text onto a nullable boolean."""
    text = values.astype(str).str.strip().str.lower()
    return text.map(BOOLEAN_VALUES).astype("boolean")


def parse_dates(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["occur_date"]  = pd.to_datetime(df["occur_date"], format=DATE_FORMAT, errors="coerce")
    df["occur_time"]  = parse_occur_time(df["occur_time"])
    df["stat_murder"] = parse_flag(df["stat_murder"])
    return df


def coerce_categories(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col, (levels, ordered) in CATEGORICAL_FIELDS.items():
        text = df[col].where(df[col].isna(), df[col].astype(str).str.strip())
        text = text.where(text.isin(levels))
        df[col] = pd.Categorical(text, categories=levels, ordered=ordered)
    return df


def clean(raw: pd.DataFrame) -> pd.DataFrame:
    return (
        raw
        .pipe(select_columns)
        .pipe(standardise_names)
        .pipe(parse_dates)
        .pipe(coerce_categories)
    )


# ── Data quality ──────────────────────────────────────────────────

def summarise_data_quality(raw: pd.DataFrame, cleaned: pd.DataFrame) -> pd.DataFrame:
    """
    Count values that were present in the raw extract but ended up
    missing after cleaning: unparseable dates and times, unrecognised
    murder flags, and demographic values outside their vocabulary.

    Args:
        raw:     The extract as fetched.
        cleaned: clean(raw).

    Returns:
        DataFrame with columns field, unmatched, unmatched_pct and
        examples (up to three distinct raw values), one row per
        parsed or coerced field.
    """
    before = standardise_names(select_columns(raw))
    total  = len(before)

    rows = []
    for field in [*_PARSED_FIELDS, *CATEGORICAL_FIELDS]:
        text    = before[field].astype(str).str.strip()
        present = before[field].notna() & (text != "")
        lost    = present & cleaned[field].isna()

        rows.append({
            "field":         field,
            "unmatched":     int(lost.sum()),
            "unmatched_pct": share_pct(int(lost.sum()), total),
            "examples":      ", ".join(text[lost].drop_duplicates().head(3)),
        })

    return pd.DataFrame(rows)
