"""
shootings/fetch.py
------------------
Retrieves the NYPD Shooting Incident Data (Historic) CSV.

The full historic extract is downloaded on every run; nothing is
written to disk. A locally saved copy can be read instead with
read_incidents_csv(), which build_report.py exposes as --csv.
"""

import io
import os

import pandas as pd
import requests

from shootings.constants import DATA_PORTAL_PAGE, DATA_URL, REQUEST_TIMEOUT


def fetch_incidents(url: str = DATA_URL, timeout: int = REQUEST_TIMEOUT) -> pd.DataFrame:
    """
    Download the incident CSV and parse it into a DataFrame.

    Network errors and non-2xx responses are not retried. They are
    re-raised as RuntimeError with a hint for downloading the file
    by hand, and the run stops.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RuntimeError(
            f"Could not fetch shooting incident data from {url}: {e}\n\n"
            f"To fix: download the CSV from {DATA_PORTAL_PAGE}\n"
            "and rerun with:  python build_report.py --csv <path-to-file>"
        ) from e

    return pd.read_csv(io.StringIO(response.text), low_memory=False)


def read_incidents_csv(path: str) -> pd.DataFrame:
    """Read a locally downloaded copy of the extract."""
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"{path} not found.\n"
            f"Download the historic extract from: {DATA_PORTAL_PAGE}"
        )
    return pd.read_csv(path, low_memory=False)
