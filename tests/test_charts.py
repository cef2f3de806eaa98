"""
tests/test_charts.py
--------------------
Structure tests for the report figures: which traces are drawn and
over which years, not how they look.
"""

import pandas as pd
import pytest

from shootings.charts import (
    hour_chart,
    smooth_curve,
    week_chart,
    year_trend_chart,
)
from shootings.regression import fit_year_trend


def trace_names(fig) -> list:
    return [t.name for t in fig.data]


@pytest.fixture(scope="module")
def by_hour():
    counts = [90, 70, 55, 40, 30, 25, 20, 22, 25, 30, 35, 40,
              50, 55, 60, 65, 75, 85, 95, 110, 120, 130, 125, 110]
    return pd.DataFrame({"hour": range(24), "incidents": counts})


@pytest.fixture(scope="module")
def by_year():
    return pd.DataFrame({
        "year":      list(range(2010, 2023)),
        "incidents": [1800, 1700, 1650, 1400, 1350, 1300, 1000,
                      950, 900, 800, 1900, 2000, 1700],
    })


class TestSmoothing:

    def test_curve_sorted_by_x(self):
        x = [5, 1, 4, 2, 3, 7, 6, 9, 8, 10]
        y = [50, 10, 40, 20, 30, 70, 60, 90, 80, 100]
        curve = smooth_curve(x, y)
        assert len(curve) == len(x)
        assert curve["x"].tolist() == sorted(x)

    def test_too_few_points_gives_empty_curve(self):
        assert smooth_curve([1, 2], [3, 4]).empty


class TestFigures:

    def test_hour_chart_points_and_smooth(self, by_hour):
        fig = hour_chart(by_hour)
        assert trace_names(fig) == ["Incidents", "Smoothed trend"]
        assert list(fig.data[0].x) == list(range(24))

    def test_week_chart_without_enough_points(self):
        fig = week_chart(pd.DataFrame({"week": [24], "incidents": [18]}))
        assert trace_names(fig) == ["Incidents"]

    def test_year_chart_fitted_and_extrapolated(self, by_year):
        fit = fit_year_trend(by_year)
        fig = year_trend_chart(by_year, fit)
        assert len(fig.data) == 3

        fitted, projected = fig.data[1], fig.data[2]
        assert max(fitted.x) == 2019
        assert min(projected.x) == 2019
        assert max(projected.x) == 2022

    def test_year_chart_without_later_years(self, by_year):
        earlier = by_year[by_year["year"] < 2020]
        fig = year_trend_chart(earlier, fit_year_trend(earlier))
        assert len(fig.data) == 2
