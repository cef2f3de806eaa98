"""
build_report.py
---------------
Runs the full analysis in one pass and prints the results.
Execute from the project root:

    python build_report.py

Optional flags:
    python build_report.py --csv data/shootings.csv   # read a local copy instead of downloading
    python build_report.py --html report.html         # also write a standalone HTML report
    python build_report.py --cutoff 2021              # fit the trend on years before 2021

Nothing is cached between runs: the extract is fetched, cleaned,
aggregated and fitted from scratch every time.
"""

import argparse
import sys
import time

import pandas as pd

from shootings.charts import hour_chart, week_chart, year_trend_chart
from shootings.cleaning import summarise_data_quality
from shootings.constants import (
    AGGREGATE_LABELS,
    COEFFICIENT_RENAME,
    DATA_PORTAL_PAGE,
    DATA_QUALITY_RENAME,
    TREND_CUTOFF_YEAR,
)
from shootings.fetch import fetch_incidents, read_incidents_csv
from shootings.helpers import fmt_count, fmt_hour, peak_row
from shootings.pipeline import run_pipeline
from shootings.regression import coefficient_table, excess_over_trend, fit_summary


def banner(title: str):
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def print_table(df: pd.DataFrame, rename: dict | None = None):
    out = df.rename(columns=rename) if rename else df
    print(out.to_string(index=False))


def print_results(result: dict, raw: pd.DataFrame, cutoff: int):
    headline = result["headline"].iloc[0]
    summary  = fit_summary(result["fit"])

    banner("Headline")
    print(f"  Incidents:  {fmt_count(headline['total_incidents'])}")
    if pd.notna(headline["date_from"]):
        print(f"  Date range: {headline['date_from']:%Y-%m-%d} to {headline['date_to']:%Y-%m-%d}")
    else:
        print("  Date range: no parseable dates")
    print(f"  Murders:    {fmt_count(headline['murders'])} ({headline['murder_pct']:.1f}%)")

    quality = summarise_data_quality(raw, result["incidents"])
    flagged = quality[quality["unmatched"] > 0]
    if not flagged.empty:
        print("\n  Values not recognised during cleaning:")
        print_table(flagged, DATA_QUALITY_RENAME)

    banner("Incidents by hour of day")
    print_table(result["by_hour"], AGGREGATE_LABELS)
    print(f"\n  Busiest hour: {fmt_hour(peak_row(result['by_hour'])['hour'])}")

    banner("Incidents by week of year (week 53 excluded)")
    print_table(result["by_week"], AGGREGATE_LABELS)

    banner("Incidents by year")
    print_table(result["by_year"], AGGREGATE_LABELS)

    banner(f"Linear trend, years before {cutoff}")
    print_table(coefficient_table(result["fit"]), COEFFICIENT_RENAME)
    print(f"\n  Years fitted:  {summary['first_year']}-{summary['last_year']} (n={summary['n_years']})")
    print(f"  Adjusted R²:   {summary['adj_r_squared']:.3f}")

    excess = excess_over_trend(result["by_year"], result["fit"], cutoff)
    if not excess.empty:
        print("\n  Recorded vs extrapolated trend:")
        print_table(excess)


def write_html(result: dict, cutoff: int, path: str):
    figures = [
        ("Incidents by hour of day",  hour_chart(result["by_hour"])),
        ("Incidents by week of year", week_chart(result["by_week"])),
        ("Incidents by year",         year_trend_chart(result["by_year"], result["fit"], cutoff)),
    ]

    parts = ["<html><head><meta charset='utf-8'>",
             "<title>NYPD Shooting Incidents</title></head><body>",
             "<h1>NYPD Shooting Incidents</h1>"]
    for i, (title, fig) in enumerate(figures):
        parts.append(f"<h2>{title}</h2>")
        parts.append(fig.to_html(full_html=False, include_plotlyjs="cdn" if i == 0 else False))

    parts.append(f"<h2>Linear trend, years before {cutoff}</h2>")
    parts.append(
        coefficient_table(result["fit"])
        .rename(columns=COEFFICIENT_RENAME)
        .to_html(index=False, float_format=lambda v: f"{v:.4g}")
    )
    parts.append(f"<p>Source: <a href='{DATA_PORTAL_PAGE}'>{DATA_PORTAL_PAGE}</a></p>")
    parts.append("</body></html>")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(parts))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the NYPD shooting incidents report")
    parser.add_argument(
        "--csv", metavar="PATH",
        help="Read a locally downloaded copy of the extract instead of fetching it"
    )
    parser.add_argument(
        "--html", metavar="PATH",
        help="Also write a standalone HTML report to PATH"
    )
    parser.add_argument(
        "--cutoff", type=int, default=TREND_CUTOFF_YEAR, metavar="YEAR",
        help=f"First year excluded from the trend fit (default {TREND_CUTOFF_YEAR})"
    )
    args = parser.parse_args(argv)

    start = time.time()

    if args.csv:
        print(f"Reading {args.csv}...")
        raw = read_incidents_csv(args.csv)
    else:
        print("Fetching NYPD shooting incident data...")
        raw = fetch_incidents()
    print(f"  {len(raw):,} raw rows loaded")

    print("Cleaning, aggregating and fitting...")
    try:
        result = run_pipeline(raw, cutoff=args.cutoff)
    except ValueError as e:
        print(f"\n  ✗ FAILED: {e}")
        sys.exit(1)

    print_results(result, raw, args.cutoff)

    if args.html:
        write_html(result, args.cutoff, args.html)
        print(f"\n✓ HTML report written to {args.html}")

    print(f"\n  Done in {round(time.time() - start, 1)}s")


if __name__ == "__main__":
    main()
