"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


CSV_HEADER = (
    "DATE_DAY,ORGANISATION_VERTICAL,TERRITORY_NAME,"
    "GOOGLE_PAID_SEARCH_SPEND,GOOGLE_SHOPPING_SPEND,GOOGLE_PMAX_SPEND,"
    "GOOGLE_DISPLAY_SPEND,GOOGLE_VIDEO_SPEND,META_FACEBOOK_SPEND,"
    "META_INSTAGRAM_SPEND,META_OTHER_SPEND,TIKTOK_SPEND,"
    "ALL_PURCHASES_ORIGINAL_PRICE"
)


@pytest.fixture
def scenario_records() -> pd.DataFrame:
    """Two rows out of date order, one Retail/US and one Travel/UK."""
    return pd.DataFrame([
        {
            "DATE_DAY": "2024-01-02",
            "ORGANISATION_VERTICAL": "Retail",
            "TERRITORY_NAME": "US",
            "GOOGLE_PAID_SEARCH_SPEND": 10,
            "META_FACEBOOK_SPEND": 0,
            "TIKTOK_SPEND": 0,
            "ALL_PURCHASES_ORIGINAL_PRICE": 50,
        },
        {
            "DATE_DAY": "2024-01-01",
            "ORGANISATION_VERTICAL": "Travel",
            "TERRITORY_NAME": "UK",
            "GOOGLE_PAID_SEARCH_SPEND": 5,
            "META_FACEBOOK_SPEND": 5,
            "TIKTOK_SPEND": 0,
            "ALL_PURCHASES_ORIGINAL_PRICE": 20,
        },
    ])


@pytest.fixture
def channel_records() -> pd.DataFrame:
    """Every spend field populated, with nulls and a missing date mixed in."""
    return pd.DataFrame([
        {
            "DATE_DAY": "2024-03-01",
            "ORGANISATION_VERTICAL": "Fashion",
            "TERRITORY_NAME": "AU",
            "GOOGLE_PAID_SEARCH_SPEND": 1.1,
            "GOOGLE_SHOPPING_SPEND": 2.2,
            "GOOGLE_PMAX_SPEND": 3.3,
            "GOOGLE_DISPLAY_SPEND": 0.4,
            "GOOGLE_VIDEO_SPEND": None,
            "META_FACEBOOK_SPEND": 4.7,
            "META_INSTAGRAM_SPEND": 0.15,
            "META_OTHER_SPEND": 0.05,
            "TIKTOK_SPEND": 9.9,
            "ALL_PURCHASES_ORIGINAL_PRICE": 101.3,
        },
        {
            "DATE_DAY": "2024-03-01",
            "ORGANISATION_VERTICAL": None,
            "TERRITORY_NAME": "NZ",
            "GOOGLE_PAID_SEARCH_SPEND": 0.3,
            "GOOGLE_SHOPPING_SPEND": None,
            "GOOGLE_PMAX_SPEND": 0.7,
            "GOOGLE_DISPLAY_SPEND": 0.1,
            "GOOGLE_VIDEO_SPEND": 0.2,
            "META_FACEBOOK_SPEND": None,
            "META_INSTAGRAM_SPEND": 1.3,
            "META_OTHER_SPEND": 0.6,
            "TIKTOK_SPEND": 0.01,
            "ALL_PURCHASES_ORIGINAL_PRICE": None,
        },
        {
            "DATE_DAY": None,
            "ORGANISATION_VERTICAL": "Fashion",
            "TERRITORY_NAME": "AU",
            "GOOGLE_PAID_SEARCH_SPEND": 1000,
            "GOOGLE_SHOPPING_SPEND": 1000,
            "GOOGLE_PMAX_SPEND": 1000,
            "GOOGLE_DISPLAY_SPEND": 1000,
            "GOOGLE_VIDEO_SPEND": 1000,
            "META_FACEBOOK_SPEND": 1000,
            "META_INSTAGRAM_SPEND": 1000,
            "META_OTHER_SPEND": 1000,
            "TIKTOK_SPEND": 1000,
            "ALL_PURCHASES_ORIGINAL_PRICE": 1000,
        },
        {
            "DATE_DAY": "2024-02-29",
            "ORGANISATION_VERTICAL": "Beauty",
            "TERRITORY_NAME": "AU",
            "GOOGLE_PAID_SEARCH_SPEND": 0.1,
            "GOOGLE_SHOPPING_SPEND": 0.2,
            "GOOGLE_PMAX_SPEND": None,
            "GOOGLE_DISPLAY_SPEND": None,
            "GOOGLE_VIDEO_SPEND": None,
            "META_FACEBOOK_SPEND": 0.3,
            "META_INSTAGRAM_SPEND": None,
            "META_OTHER_SPEND": None,
            "TIKTOK_SPEND": 0.7,
            "ALL_PURCHASES_ORIGINAL_PRICE": 12.0,
        },
    ])


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text under tmp_path and return its path as a string."""
    def _write(body: str, name: str = "mmm.csv", header: str = CSV_HEADER) -> str:
        path = tmp_path / name
        path.write_text(f"{header}\n{body}" if header else body, encoding="utf-8")
        return str(path)
    return _write
