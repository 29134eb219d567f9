"""
Shared utility functions for the MMM Data Explorer
"""
import math

import pandas as pd


def fmt_currency(x, prefix="$"):
    """Format number as currency."""
    if pd.isna(x):
        return "—"
    return f"{prefix}{x:,.0f}"


def fmt_number(x, decimals=0):
    """Format number with commas."""
    if pd.isna(x):
        return "—"
    return f"{x:,.{decimals}f}"


def fmt_roas(x):
    """Format ROAS value."""
    if pd.isna(x):
        return "n/a"
    return f"{x:,.2f}x"


def safe_divide(numerator, denominator, default=0.0):
    """Division that returns default for a zero, missing or non-finite result."""
    if pd.isna(denominator) or denominator <= 0:
        return default
    result = numerator / denominator
    if not math.isfinite(result):
        return default
    return result
