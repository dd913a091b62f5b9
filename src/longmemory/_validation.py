"""Input coercion shared by filters, generators and estimators."""

from __future__ import annotations

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

__all__ = ["as_series", "check_length"]


def as_series(series: pd.Series | ArrayLike, *, min_length: int = 1) -> np.ndarray:
    """Return ``series`` as a finite 1‑D float ndarray.

    pandas objects are converted through ``to_numpy`` so the index is
    dropped; everything else goes through :func:`numpy.asarray`.
    """

    if isinstance(series, pd.Series):
        x = series.astype(float).to_numpy()
    else:
        x = np.asarray(series, dtype=float)

    if x.ndim != 1:
        raise ValueError("Input series must be one‑dimensional")
    if x.size < min_length:
        raise ValueError(f"Series needs at least {min_length} observations")
    if not np.all(np.isfinite(x)):
        raise ValueError("Series contains NaN or infinite values")
    return x


def check_length(n: int) -> int:
    """Validate a requested sequence length."""

    if isinstance(n, (bool, np.bool_)) or int(n) != n:
        raise ValueError("Length must be an integer")
    n = int(n)
    if n < 1:
        raise ValueError("Length must be positive")
    return n
