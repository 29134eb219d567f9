"""
Aggregation pipeline for the MMM Data Explorer

Filter option derivation, record filtering, daily channel aggregation
and headline metrics. All functions are pure: they never modify the
records frame they are given.
"""
from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from .schema import (
    ALL_TERRITORIES,
    ALL_VERTICALS,
    CHANNEL_GROUPS,
    DAILY_COLUMNS,
    DATE_COL,
    REVENUE_COL,
    TERRITORY_COL,
    VERTICAL_COL,
)
from .utils import safe_divide


# Time of day followed by Z / UTC / +hh:mm style offset
TZ_SUFFIX = r"(\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?)\s*(?:Z|UTC|[+-]\d{2}(?::?\d{2})?)$"


@dataclass(frozen=True)
class Metrics:
    total_spend: float = 0.0
    total_revenue: float = 0.0
    roas: float = 0.0


@dataclass(frozen=True)
class DashboardView:
    vertical_options: list
    territory_options: list
    filtered: pd.DataFrame
    daily: pd.DataFrame
    metrics: Metrics

    @property
    def row_count(self) -> int:
        return len(self.filtered)

    @property
    def day_count(self) -> int:
        return len(self.daily)


# =============================================================================
# FILTER OPTIONS
# =============================================================================

def _distinct_options(records: pd.DataFrame, col: str, sentinel: str) -> list:
    if col not in records.columns:
        return [sentinel]
    values = records[col].dropna().astype(str)
    values = values[(values.str.strip() != "") & (values != sentinel)]
    return [sentinel] + sorted(values.unique())


def derive_filter_options(records: pd.DataFrame | None) -> tuple[list, list]:
    """
    Build the vertical and territory choices for the filter controls.

    Each list is the "all" sentinel followed by the distinct non-empty
    values, sorted. No records means no options at all (data not loaded).
    """
    if records is None or records.empty:
        return [], []

    return (
        _distinct_options(records, VERTICAL_COL, ALL_VERTICALS),
        _distinct_options(records, TERRITORY_COL, ALL_TERRITORIES),
    )


# =============================================================================
# FILTERING
# =============================================================================

def _matches(records: pd.DataFrame, col: str, value: str) -> pd.Series:
    if col not in records.columns:
        return pd.Series(False, index=records.index)
    return records[col] == value


def filter_records(
    records: pd.DataFrame,
    vertical: str = ALL_VERTICALS,
    territory: str = ALL_TERRITORIES,
) -> pd.DataFrame:
    """Keep rows matching both selections; a sentinel places no constraint."""
    mask = pd.Series(True, index=records.index)

    if vertical != ALL_VERTICALS:
        mask &= _matches(records, VERTICAL_COL, vertical)
    if territory != ALL_TERRITORIES:
        mask &= _matches(records, TERRITORY_COL, territory)

    return records[mask]


# =============================================================================
# DAILY AGGREGATION
# =============================================================================

def _empty_daily() -> pd.DataFrame:
    return pd.DataFrame({
        col: pd.Series(dtype="object" if col == "date" else "float64")
        for col in DAILY_COLUMNS
    })


def _numeric_sum(records: pd.DataFrame, cols: list) -> pd.Series:
    """Row-wise sum of numeric fields; absent columns and nulls count as 0."""
    values = records.reindex(columns=cols).apply(pd.to_numeric, errors="coerce")
    return values.fillna(0.0).sum(axis=1).astype(float)


def parse_day(dates: pd.Series) -> pd.Series:
    """
    Parse day identifiers in any common spelling to midnight timestamps.

    A UTC offset after a time of day is dropped, so each value keeps its
    own local calendar day and offset-aware and naive values can mix.
    """
    text = dates.astype("string").str.strip()
    text = text.mask((text == "").fillna(False))
    text = text.str.replace(TZ_SUFFIX, r"\1", regex=True)
    parsed = pd.to_datetime(text, format="mixed", errors="coerce", utc=True)
    return parsed.dt.tz_localize(None).dt.normalize()


def aggregate_by_day(filtered: pd.DataFrame) -> pd.DataFrame:
    """
    Group records into one row per calendar day.

    Returns columns date, spend, revenue, google, meta, tiktok sorted by
    day ascending. Rows without a usable date are dropped.
    """
    if filtered is None or filtered.empty or DATE_COL not in filtered.columns:
        return _empty_daily()

    day = parse_day(filtered[DATE_COL])
    dated = filtered[day.notna()]
    if dated.empty:
        return _empty_daily()

    frame = pd.DataFrame({"day": day[day.notna()]}, index=dated.index)
    for channel, cols in CHANNEL_GROUPS.items():
        frame[channel] = _numeric_sum(dated, cols)
    frame["revenue"] = _numeric_sum(dated, [REVENUE_COL])

    daily = frame.groupby("day", sort=True).sum()

    # Spend from the channel subtotals keeps google + meta + tiktok == spend exact
    daily["spend"] = daily["google"] + daily["meta"] + daily["tiktok"]
    daily["date"] = daily.index.strftime("%Y-%m-%d")

    return daily.reset_index(drop=True)[DAILY_COLUMNS]


# =============================================================================
# METRICS
# =============================================================================

def compute_metrics(daily: pd.DataFrame) -> Metrics:
    """Total spend, total revenue and ROAS over the daily series."""
    if daily is None or daily.empty:
        return Metrics()

    total_spend = float(daily["spend"].sum())
    total_revenue = float(daily["revenue"].sum())
    roas = safe_divide(total_revenue, total_spend, default=0.0)

    return Metrics(total_spend=total_spend, total_revenue=total_revenue, roas=roas)


def build_dashboard_view(
    records: pd.DataFrame,
    vertical: str = ALL_VERTICALS,
    territory: str = ALL_TERRITORIES,
) -> DashboardView:
    """Run options -> filter -> daily -> metrics for one set of selections."""
    vertical_options, territory_options = derive_filter_options(records)
    filtered = filter_records(records, vertical, territory)
    daily = aggregate_by_day(filtered)

    return DashboardView(
        vertical_options=vertical_options,
        territory_options=territory_options,
        filtered=filtered,
        daily=daily,
        metrics=compute_metrics(daily),
    )
