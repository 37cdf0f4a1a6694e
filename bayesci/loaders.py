"""Observation-matrix loaders for the command-line entry point.

Rows are observations and columns are variables, matching the convention
used throughout the package.  Only ``.npy`` and ``.csv`` files are
supported.
"""

from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd


def load_npy(path: Union[str, Path]) -> np.ndarray:
    """Load a 2-D array saved with ``np.save``; 1-D arrays become one column."""
    X = np.load(path, allow_pickle=False)
    if X.ndim == 1:
        X = X[:, None]
    if X.ndim != 2:
        raise ValueError(f"{path}: expected a 2-D array, got shape {X.shape}")
    return X


def load_csv(path: Union[str, Path]) -> pd.DataFrame:
    """Load the numeric columns of a CSV file with a header row.

    Non-numeric columns (ids, labels) are dropped; column names are kept so
    they can label the rows and columns of the causal matrix.
    """
    df = pd.read_csv(path).select_dtypes(include=[np.number])
    if df.shape[1] == 0:
        raise ValueError(f"{path}: no numeric columns found")
    return df


def load_observations(path: Union[str, Path]) -> Union[np.ndarray, pd.DataFrame]:
    """Dispatch on the file extension."""
    path = Path(path)
    if not path.exists():
        raise ValueError(f"{path}: file not found")
    suffix = path.suffix.lower()
    if suffix == ".npy":
        return load_npy(path)
    if suffix == ".csv":
        return load_csv(path)
    raise ValueError(f"Unsupported file format: {path}")
