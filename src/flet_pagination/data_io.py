from __future__ import annotations
import os
import logging
import pandas as pd

from .state import PaginationState

logger = logging.getLogger(__name__)

CSV_EXTS = {".csv"}
EXCEL_EXTS = {".xlsx", ".xlsm"}


def read_table(path: str) -> pd.DataFrame:
    """Load a CSV or Excel sheet (first sheet) into a DataFrame."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Table not found: {path}")
    ext = os.path.splitext(path)[1].lower()
    if ext in CSV_EXTS:
        df = pd.read_csv(path)
    elif ext in EXCEL_EXTS:
        df = pd.read_excel(path, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported table format: {ext or path}")
    logger.info("Loaded %s: %d rows, %d columns", path, len(df), len(df.columns))
    return df


def sample_frame(rows: int) -> pd.DataFrame:
    return pd.DataFrame({
        "#": range(1, rows + 1),
        "Name": [f"Item {i}" for i in range(1, rows + 1)],
        "Group": [chr(ord("A") + (i % 5)) for i in range(rows)],
    })


def page_frame(df: pd.DataFrame, state: PaginationState) -> pd.DataFrame:
    start, end = state.row_range()
    return df.iloc[start:end]
