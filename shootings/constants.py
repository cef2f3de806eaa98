"""
shootings/constants.py
----------------------
Shared constants used by the pipeline, the charts and the report sections.
Import from here rather than defining locally in section files.
"""

# ── Source data ───────────────────────────────────────────────────
DATA_URL = (
    "https://data.cityofnewyork.us/api/views/833y-fsy8/rows.csv"
    "?accessType=DOWNLOAD"
)
DATA_PORTAL_PAGE = (
    "https://data.cityofnewyork.us/Public-Safety/"
    "NYPD-Shooting-Incident-Data-Historic-/833y-fsy8"
)
REQUEST_TIMEOUT = 60

# ── Column selection ──────────────────────────────────────────────
# Contiguous range kept from the raw extract, endpoints inclusive.
FIRST_COLUMN = "INCIDENT_KEY"
LAST_COLUMN  = "VIC_RACE"

# Location / jurisdiction fields inside the range that the report
# does not use. Older extracts lack the two LOC_* description columns.
DROP_COLUMNS = [
    "BORO",
    "PRECINCT",
    "JURISDICTION_CODE",
    "LOCATION_DESC",
    "LOC_OF_OCCUR_DESC",
    "LOC_CLASSFCTN_DESC",
]

# Applied after lower-casing.
COLUMN_RENAME = {
    "statistical_murder_flag": "stat_murder",
    "vic_age_group":           "victim_age_group",
    "vic_sex":                 "victim_sex",
    "vic_race":                "victim_race",
}

CLEAN_COLUMNS = [
    "incident_key",
    "occur_date",
    "occur_time",
    "stat_murder",
    "perp_age_group",
    "perp_sex",
    "perp_race",
    "victim_age_group",
    "victim_sex",
    "victim_race",
]

DATE_FORMAT = "%m/%d/%Y"

# ── Categorical vocabularies ──────────────────────────────────────
AGE_GROUPS = ["<18", "18-24", "25-44", "45-64", "65+", "UNKNOWN"]
SEX_LEVELS = ["M", "F", "U"]
RACE_LEVELS = [
    "AMERICAN INDIAN/ALASKAN NATIVE",
    "ASIAN / PACIFIC ISLANDER",
    "BLACK",
    "BLACK HISPANIC",
    "WHITE",
    "WHITE HISPANIC",
    "UNKNOWN",
]

# column -> (levels, ordered)
CATEGORICAL_FIELDS = {
    "perp_age_group":   (AGE_GROUPS,  True),
    "perp_sex":         (SEX_LEVELS,  False),
    "perp_race":        (RACE_LEVELS, False),
    "victim_age_group": (AGE_GROUPS,  True),
    "victim_sex":       (SEX_LEVELS,  False),
    "victim_race":      (RACE_LEVELS, False),
}

BOOLEAN_VALUES = {
    "true": True,  "false": False,
    "y":    True,  "n":     False,
    "1":    True,  "0":     False,
}

# ── Aggregates ────────────────────────────────────────────────────
COUNT_COLUMN = "incidents"
PARTIAL_WEEK = 53

AGGREGATE_LABELS = {
    "hour":       "Hour of day",
    "week":       "Week of year",
    "year":       "Year",
    COUNT_COLUMN: "Incidents",
}

# ── Regression ────────────────────────────────────────────────────
# Years from this one onwards are excluded from the trend fit.
TREND_CUTOFF_YEAR = 2020

COEFFICIENT_RENAME = {
    "term":      "Term",
    "estimate":  "Estimate",
    "std_error": "Std. error",
    "t_value":   "t value",
    "p_value":   "p value",
}

DATA_QUALITY_RENAME = {
    "field":         "Field",
    "unmatched":     "Values not recognised",
    "unmatched_pct": "% of rows",
    "examples":      "Examples",
}

# ── Charts ────────────────────────────────────────────────────────
LOWESS_FRAC = 0.4

CHART_CONFIG = {"displayModeBar": False, "scrollZoom": False}

POINT_COLOUR  = "#95a5a6"
SMOOTH_COLOUR = "#e74c3c"
TREND_COLOUR  = "#3498db"

BASE_LAYOUT = dict(
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    dragmode=False,
    hovermode="x unified",
)

AXIS_DEFAULTS = dict(
    showspikes=False,
    gridcolor="rgba(255,255,255,0.05)",
)

LEGEND_TOP = dict(
    orientation="h",
    yanchor="bottom",
    y=1.02,
)
