"""
Column contract and constants for the MMM Data Explorer
"""
from pathlib import Path


ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT / "data"
DEFAULT_DATA_SOURCE = DATA_DIR / "conjura_mmm_data.csv"

LOG_LEVEL = "INFO"

# Source columns
DATE_COL = "DATE_DAY"
VERTICAL_COL = "ORGANISATION_VERTICAL"
TERRITORY_COL = "TERRITORY_NAME"

# Gross purchase value, before discount
REVENUE_COL = "ALL_PURCHASES_ORIGINAL_PRICE"

CHANNEL_GROUPS = {
    "google": [
        "GOOGLE_PAID_SEARCH_SPEND",
        "GOOGLE_SHOPPING_SPEND",
        "GOOGLE_PMAX_SPEND",
        "GOOGLE_DISPLAY_SPEND",
        "GOOGLE_VIDEO_SPEND",
    ],
    "meta": [
        "META_FACEBOOK_SPEND",
        "META_INSTAGRAM_SPEND",
        "META_OTHER_SPEND",
    ],
    "tiktok": [
        "TIKTOK_SPEND",
    ],
}

SPEND_COLS = [col for cols in CHANNEL_GROUPS.values() for col in cols]
NUMERIC_COLS = SPEND_COLS + [REVENUE_COL]
CATEGORY_COLS = [VERTICAL_COL, TERRITORY_COL]

# Filter sentinels
ALL_VERTICALS = "All"
ALL_TERRITORIES = "All Territories"

DAILY_COLUMNS = ["date", "spend", "revenue"] + list(CHANNEL_GROUPS)
