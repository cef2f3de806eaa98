"""
shootings/charts.py
-------------------
Shared chart helpers used by the report sections and build_report.py.
All functions return a Plotly figure object.

Import example:
    from shootings.charts import hour_chart, year_trend_chart
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from statsmodels.nonparametric.smoothers_lowess import lowess

from shootings.constants import (
    AGGREGATE_LABELS,
    AXIS_DEFAULTS,
    BASE_LAYOUT,
    COUNT_COLUMN,
    LEGEND_TOP,
    LOWESS_FRAC,
    POINT_COLOUR,
    SMOOTH_COLOUR,
    TREND_COLOUR,
    TREND_CUTOFF_YEAR,
)
from shootings.regression import trend_line


# ── Layout helpers ────────────────────────────────────────────────

def apply_base_layout(fig: go.Figure, height: int = 420, **kwargs) -> go.Figure:
    """
    Apply the standard transparent background and drag/spike
    settings to a figure. Additional layout kwargs are passed through
    so callers can override individual properties.

    Usage:
        fig = apply_base_layout(fig, height=360, hovermode='closest')
    """
    layout = {**BASE_LAYOUT, "height": height, **kwargs}
    fig.update_layout(**layout)
    return fig


def style_xaxis(fig: go.Figure, title: str = "", **kwargs) -> go.Figure:
    props = {**AXIS_DEFAULTS, "title": title, **kwargs}
    fig.update_xaxes(**props)
    return fig


def style_yaxis(fig: go.Figure, title: str = "", **kwargs) -> go.Figure:
    props = {**AXIS_DEFAULTS, "title": title, **kwargs}
    fig.update_yaxes(**props)
    return fig


# ── Smoothing ─────────────────────────────────────────────────────

def smooth_curve(x, y, frac: float = LOWESS_FRAC) -> pd.DataFrame:
    """
    LOWESS curve through the points, sorted by x. Display only: the
    aggregates themselves are never smoothed.

    Returns an empty frame for fewer than three points, where a local
    fit has nothing to smooth.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) < 3:
        return pd.DataFrame({"x": [], "y": []})

    fitted = lowess(y, x, frac=frac)
    return pd.DataFrame({"x": fitted[:, 0], "y": fitted[:, 1]})


# ── Reusable chart builders ───────────────────────────────────────

def scatter_with_smooth(
    df: pd.DataFrame,
    x_col: str,
    height: int = 420,
    hover_template: str | None = None,
    tickvals: list | None = None,
) -> go.Figure:
    """
    Points for each aggregate row plus a LOWESS trend curve.
    Used for the hour-of-day and week-of-year views.
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df[x_col],
        y=df[COUNT_COLUMN],
        mode="markers",
        name=AGGREGATE_LABELS[COUNT_COLUMN],
        marker=dict(color=POINT_COLOUR, size=8),
        hovertemplate=hover_template,
    ))

    curve = smooth_curve(df[x_col], df[COUNT_COLUMN])
    if not curve.empty:
        fig.add_trace(go.Scatter(
            x=curve["x"],
            y=curve["y"],
            mode="lines",
            name="Smoothed trend",
            line=dict(color=SMOOTH_COLOUR, width=2),
            hoverinfo="skip",
        ))

    fig = apply_base_layout(fig, height=height, hovermode="closest", legend=LEGEND_TOP)
    fig = style_xaxis(fig, title=AGGREGATE_LABELS[x_col], tickvals=tickvals)
    fig = style_yaxis(fig, title=AGGREGATE_LABELS[COUNT_COLUMN])
    return fig


# ── Specific figures ──────────────────────────────────────────────

def hour_chart(by_hour: pd.DataFrame) -> go.Figure:
    return scatter_with_smooth(
        by_hour,
        x_col="hour",
        hover_template="%{x}:00<br>%{y:,} incidents<extra></extra>",
        tickvals=list(range(0, 24, 3)),
    )


def week_chart(by_week: pd.DataFrame) -> go.Figure:
    return scatter_with_smooth(
        by_week,
        x_col="week",
        hover_template="Week %{x}<br>%{y:,} incidents<extra></extra>",
    )


def year_trend_chart(
    by_year: pd.DataFrame,
    fit,
    cutoff: int = TREND_CUTOFF_YEAR,
    height: int = 420,
) -> go.Figure:
    """
    Yearly incidents as a line with points, overlaid with the OLS
    trend. The trend is solid over the fitted years and dashed where
    it is extrapolated past *cutoff*.
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=by_year["year"],
        y=by_year[COUNT_COLUMN],
        mode="lines+markers",
        name=AGGREGATE_LABELS[COUNT_COLUMN],
        line=dict(color=POINT_COLOUR, width=2),
        marker=dict(size=8),
        hovertemplate="%{x}<br>%{y:,} incidents<extra></extra>",
    ))

    fitted_years = by_year.loc[by_year["year"] < cutoff, "year"]
    later_years  = by_year.loc[by_year["year"] >= cutoff - 1, "year"]

    fitted = trend_line(fit, fitted_years)
    fig.add_trace(go.Scatter(
        x=fitted.index,
        y=fitted.values,
        mode="lines",
        name=f"Linear trend (before {cutoff})",
        line=dict(color=TREND_COLOUR, width=2),
        hovertemplate="%{x}<br>Trend: %{y:,.0f}<extra></extra>",
    ))

    if (later_years >= cutoff).any():
        projected = trend_line(fit, later_years)
        fig.add_trace(go.Scatter(
            x=projected.index,
            y=projected.values,
            mode="lines",
            name="Trend extrapolated",
            line=dict(color=TREND_COLOUR, width=2, dash="dash"),
            hovertemplate="%{x}<br>Trend: %{y:,.0f}<extra></extra>",
        ))
        fig.add_vline(x=cutoff - 0.5, line_dash="dot", line_color="white", opacity=0.3)

    fig = apply_base_layout(fig, height=height, legend=LEGEND_TOP)
    fig = style_xaxis(fig, title=AGGREGATE_LABELS["year"], dtick=1)
    fig = style_yaxis(fig, title=AGGREGATE_LABELS[COUNT_COLUMN])
    return fig
