"""Data loading for the strip plot.

Reads a CSV into a DataFrame and checks that the columns the strip plot
needs are present and usable.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import pandas as pd

DATA_DIR = Path(__file__).resolve().parent / "data"
IRIS_PATH = DATA_DIR / "iris.csv"


def load_dataset(
    path: str | os.PathLike | None = None,
    *,
    category: str = "species",
    value: str = "sepalWidth",
) -> pd.DataFrame:
    """Load a CSV file for the strip plot.

    Parameters
    ----------
    path : str or path-like, optional
        CSV file to read. Defaults to the bundled iris dataset.
    category : str
        Name of the categorical column.
    value : str
        Name of the numeric column.

    Returns
    -------
    pd.DataFrame
        Rows in file order. *value* is numeric and rows where it is missing
        or unparseable are dropped; *category* is a string column.
    """
    path = Path(path) if path is not None else IRIS_PATH
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    df = pd.read_csv(path)
    return prepare_strip_dataframe(df, category=category, value=value)


def prepare_strip_dataframe(
    df: pd.DataFrame,
    *,
    category: str = "species",
    value: str = "sepalWidth",
) -> pd.DataFrame:
    """Validate and normalise *df* for :func:`build_strip_layout`.

    Returns a copy; the input frame is left untouched.
    """
    _require_columns(df, [category, value])

    df = df.copy()
    df[value] = pd.to_numeric(df[value], errors="coerce")
    df = df[df[value].notna()].copy()
    df[category] = df[category].astype(str)
    return df.reset_index(drop=True)


def _require_columns(df: pd.DataFrame, columns: Sequence[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required column(s) {missing}; available: {list(df.columns)}"
        )
