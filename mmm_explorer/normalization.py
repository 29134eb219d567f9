"""
Data normalization utilities for the MMM Data Explorer
"""
import numpy as np
import pandas as pd

from .schema import CATEGORY_COLS, DATE_COL, NUMERIC_COLS


def clean_category_values(series: pd.Series) -> pd.Series:
    """
    Normalize a category column:
    - Cast to string
    - Strip whitespace, collapse multiple spaces
    - Turn ''/'nan'/'None' into NaN
    """
    if series is None:
        return pd.Series([], dtype="object")

    s = (
        series.astype(str)
        .str.replace(r"\s+", " ", regex=True)
        .str.strip()
        .replace({
            "": np.nan,
            "nan": np.nan,
            "NaN": np.nan,
            "None": np.nan,
            "none": np.nan,
        })
    )
    return s.where(series.notna())


def clean_date_values(series: pd.Series) -> pd.Series:
    """Keep day identifiers as stripped text; blanks become NaN."""
    s = series.astype("string").str.strip()
    blank = s.isna() | (s == "").fillna(False)
    return s.astype(object).where(~blank, np.nan)


def normalize_mmm(df: pd.DataFrame) -> pd.DataFrame:
    """
    Type the raw MMM frame:
    - Spend and revenue fields numeric (unparseable -> NaN)
    - Vertical and territory trimmed, blanks -> NaN
    - Date kept as text for the pipeline to parse
    """
    if df is None:
        return None

    mmm = df.copy()
    mmm.columns = [str(c).strip() for c in mmm.columns]

    for col in NUMERIC_COLS:
        if col in mmm.columns:
            mmm[col] = pd.to_numeric(mmm[col], errors="coerce")

    for col in CATEGORY_COLS:
        if col in mmm.columns:
            mmm[col] = clean_category_values(mmm[col])

    if DATE_COL in mmm.columns:
        mmm[DATE_COL] = clean_date_values(mmm[DATE_COL])

    return mmm
