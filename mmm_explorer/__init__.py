"""
MMM Data Explorer - Core Modules
"""
from .aggregation import (
    DashboardView,
    Metrics,
    aggregate_by_day,
    build_dashboard_view,
    compute_metrics,
    derive_filter_options,
    filter_records,
)
from .data_loader import load_mmm_data, read_mmm_csv
from .errors import LoadError, RowParseWarning
from .normalization import normalize_mmm
from .session import DashboardSession, LoadStatus
from .utils import fmt_currency, fmt_number, fmt_roas

__all__ = [
    'DashboardView', 'Metrics',
    'aggregate_by_day', 'build_dashboard_view', 'compute_metrics',
    'derive_filter_options', 'filter_records',
    'load_mmm_data', 'read_mmm_csv',
    'LoadError', 'RowParseWarning',
    'normalize_mmm',
    'DashboardSession', 'LoadStatus',
    'fmt_currency', 'fmt_number', 'fmt_roas'
]
