"""
Data loading utilities for the MMM Data Explorer
"""
import logging

import pandas as pd
import streamlit as st

from .errors import LoadError, RowParseWarning
from .normalization import normalize_mmm
from .schema import DATE_COL, DEFAULT_DATA_SOURCE, TERRITORY_COL, VERTICAL_COL

logger = logging.getLogger(__name__)

TEXT_DTYPES = {DATE_COL: str, VERTICAL_COL: str, TERRITORY_COL: str}


def read_mmm_csv(source) -> tuple[pd.DataFrame, list[RowParseWarning]]:
    """
    Read and type the MMM CSV from a path or URL.

    Rows with the wrong number of fields are skipped and returned as
    RowParseWarning entries. Anything that stops the document being read
    at all raises LoadError.
    """
    skipped = []

    def _skip_bad_line(fields):
        skipped.append(RowParseWarning(fields))
        return None

    try:
        raw = pd.read_csv(
            source,
            engine="python",
            dtype=TEXT_DTYPES,
            on_bad_lines=_skip_bad_line,
            skip_blank_lines=True,
        )
    except (OSError, ValueError) as e:
        raise LoadError(source, f"Could not read MMM data: {e}") from e

    return normalize_mmm(raw), skipped


@st.cache_data(show_spinner=False)
def load_mmm_data(source: str = str(DEFAULT_DATA_SOURCE)) -> pd.DataFrame:
    """Load the MMM dataset once per source; skipped rows are only logged."""
    df, skipped = read_mmm_csv(source)

    if skipped:
        logger.warning(
            "Skipped %d malformed row(s) while parsing %s (first: %s)",
            len(skipped), source, skipped[0].fields,
        )
    logger.info("Loaded %d MMM rows from %s", len(df), source)
    return df
