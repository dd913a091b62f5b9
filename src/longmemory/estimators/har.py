"""
Heterogeneous autoregression (HAR)
==================================
Corsi (2009): a cascade of rolling means at a few horizons reproduces
long-memory-like persistence with a short-memory model,

    x_t = β₀ + Σ_L β_L · mean(x_{t-1}, …, x_{t-L}) + ε_t

with default horizons 1, 5 and 22.  Fitted by OLS through **statsmodels**.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm
from numpy.typing import ArrayLike

from .._validation import as_series

__all__ = ["HAR", "har_estimate"]


# --------------------------------------------------------------------- #
class HAR:
    """Heterogeneous‑Autoregressive model estimated by OLS."""

    def __init__(self, lags: Sequence[int] = (1, 5, 22)) -> None:
        lags = tuple(sorted(int(L) for L in lags))
        if not lags or lags[0] < 1:
            raise ValueError("HAR lags must be positive integers")
        if len(set(lags)) != len(lags):
            raise ValueError("HAR lags must be distinct")
        self.lags = lags
        self.params_: pd.Series | None = None
        self.sigma_: float | None = None
        self.nobs_: int | None = None

    # ................................................................. #
    def _design_matrix(self, x: pd.Series) -> pd.DataFrame:
        """Lagged‑mean regressors shifted by one period (so known at t)."""
        X = pd.DataFrame(index=x.index)
        X["const"] = 1.0
        for L in self.lags:
            X[f"mean_{L}"] = x.rolling(L).mean().shift(1)
        return X.dropna()

    # ................................................................. #
    def fit(self, series: pd.Series | ArrayLike) -> "HAR":
        x = pd.Series(as_series(series, min_length=2))
        X = self._design_matrix(x)
        if len(X) <= X.shape[1]:
            raise ValueError(
                f"Series of length {len(x)} too short for HAR lags {self.lags}"
            )
        y = x.loc[X.index]
        model = sm.OLS(y, X).fit()
        self.params_ = model.params
        # residual variance on T - max(L) - len(L) - 1 degrees of freedom
        self.sigma_ = float(np.sqrt(model.scale))
        self.nobs_ = int(model.nobs)
        return self


def har_estimate(
    series: pd.Series | ArrayLike, lags: Sequence[int] = (1, 5, 22)
) -> tuple[np.ndarray, float]:
    """OLS coefficients ``[β₀, β_L…]`` and residual standard deviation."""
    har = HAR(lags).fit(series)
    return har.params_.to_numpy(), har.sigma_
