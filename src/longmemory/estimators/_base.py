"""
Common base class for the class-style estimators
================================================
* Accepts a pandas Series **or** a NumPy 1‑D array.
* Internally stores `self.series` as a 1‑D float ndarray.
* Provides `.result_` for fit outputs.
"""

from __future__ import annotations

import abc
from typing import Any

import numpy as np
import pandas as pd

from .._validation import as_series
from ..config import SpectralConfig


class BaseEstimator(abc.ABC):
    """Minimal parent class; concrete estimators implement `.fit()`."""

    def __init__(self, series: pd.Series | np.ndarray | list[float]):
        self.series = as_series(series, min_length=2)
        self.result_: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    @abc.abstractmethod
    def fit(self, **kwargs) -> "BaseEstimator":
        """Run the estimator and populate `self.result_`."""
        ...


class BandEstimator(BaseEstimator):
    """Estimator restricted to the periodogram band :math:`[T^l, T^m]`.

    ``config`` supplies defaults; explicit ``m``/``l`` keywords override it.
    """

    def __init__(
        self,
        series,
        *,
        m: float | None = None,
        l: float | None = None,
        config: SpectralConfig | None = None,
    ):
        super().__init__(series)
        config = config or SpectralConfig()
        self.m = float(config.m if m is None else m)
        self.l = float(config.l if l is None else l)
        self.config = config
