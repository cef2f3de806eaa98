"""
shootings/regression.py
-----------------------
Linear trend of yearly incident counts.

fit_year_trend() fits incidents ~ year by ordinary least squares on
the years before TREND_CUTOFF_YEAR only. Later years are kept out of
the fit so they can be compared against the extrapolated trend
(excess_over_trend) rather than pulling the slope towards them.

A fit needs at least two distinct years before the cutoff. With
fewer the line is undefined and fit_year_trend() raises ValueError
instead of returning nan coefficients.
"""

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf

from shootings.constants import COUNT_COLUMN, TREND_CUTOFF_YEAR


def trend_input(by_year: pd.DataFrame, cutoff: int = TREND_CUTOFF_YEAR) -> pd.DataFrame:
    """Rows of the by-year aggregate that the trend is fitted on."""
    return by_year[by_year["year"] < cutoff].reset_index(drop=True)


def fit_year_trend(by_year: pd.DataFrame, cutoff: int = TREND_CUTOFF_YEAR):
    """
    Fit incidents ~ year on the years before *cutoff*.

    Args:
        by_year: Output of incidents_by_year().
        cutoff:  First year excluded from the fit.

    Returns:
        A fitted statsmodels OLS results object.

    Raises:
        ValueError: fewer than two distinct years before the cutoff.
    """
    train = trend_input(by_year, cutoff)
    n_years = train["year"].nunique()
    if n_years < 2:
        raise ValueError(
            f"Need at least two years before {cutoff} to fit a trend, "
            f"found {n_years}."
        )

    return smf.ols(f"{COUNT_COLUMN} ~ year", data=train).fit()


def coefficient_table(fit) -> pd.DataFrame:
    return pd.DataFrame({
        "term":      fit.params.index,
        "estimate":  fit.params.values,
        "std_error": fit.bse.values,
        "t_value":   fit.tvalues.values,
        "p_value":   fit.pvalues.values,
    })


def fit_summary(fit) -> dict:
    years = fit.model.exog[:, fit.model.exog_names.index("year")]
    return {
        "intercept":     float(fit.params["Intercept"]),
        "slope":         float(fit.params["year"]),
        "slope_p_value": float(fit.pvalues["year"]),
        "r_squared":     float(fit.rsquared),
        "adj_r_squared": float(fit.rsquared_adj),
        "n_years":       int(fit.nobs),
        "first_year":    int(years.min()),
        "last_year":     int(years.max()),
    }


def trend_line(fit, years) -> pd.Series:
    """Fitted incident counts for arbitrary years."""
    years = np.asarray(years, dtype=float)
    if not len(years):
        return pd.Series([], dtype=float, name="trend")
    predicted = fit.predict(pd.DataFrame({"year": years}))
    return pd.Series(np.asarray(predicted), index=years.astype(int), name="trend")


def excess_over_trend(
    by_year: pd.DataFrame,
    fit,
    cutoff: int = TREND_CUTOFF_YEAR,
) -> pd.DataFrame:
    """
    Compare years from *cutoff* onwards with the extrapolated trend.

    Returns:
        DataFrame with columns year, observed, expected, difference
        and difference_pct (relative to expected, 1 dp). Empty when
        no year reaches the cutoff.
    """
    later = by_year[by_year["year"] >= cutoff]
    expected = trend_line(fit, later["year"]).values

    out = pd.DataFrame({
        "year":     later["year"].values,
        "observed": later[COUNT_COLUMN].values,
        "expected": expected.round(1),
    })
    out["difference"] = (out["observed"] - expected).round(1)
    out["difference_pct"] = (
        (out["observed"] - expected)
        / pd.Series(expected).replace(0, float("nan"))
        * 100
    ).round(1)
    return out
