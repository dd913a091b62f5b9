"""
Time-domain sample statistics and the variance-plot estimator
=============================================================
* :func:`autocovariance` / :func:`autocorrelation` – sample moments at
  lags ``0 … n_lags-1`` (biased, divisor ``T``)
* :func:`variance_plot_estimate` – slope of the log variance of block
  means against the log block size

For a long-memory series the variance of the mean of ``k`` consecutive
observations decays like ``k^(2d-1)``, so the regression slope ``β``
gives ``d = (β + 1)/2`` and the Hurst coefficient ``H = d + 1/2``.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from .._validation import as_series, check_length
from ._base import BaseEstimator

__all__ = ["autocovariance", "autocorrelation", "variance_plot_estimate", "VariancePlot"]


# ------------------------------------------------------------------ #
def autocovariance(series: pd.Series | ArrayLike, n_lags: int) -> np.ndarray:
    """Sample autocovariances at lags ``0 … n_lags-1``."""
    x = as_series(series)
    n_lags = check_length(n_lags)
    T = x.size
    if n_lags > T:
        raise ValueError(f"n_lags={n_lags} exceeds the series length {T}")
    xc = x - x.mean()
    return np.correlate(xc, xc, mode="full")[T - 1 : T - 1 + n_lags] / T


def autocorrelation(series: pd.Series | ArrayLike, n_lags: int) -> np.ndarray:
    """Sample autocorrelations at lags ``0 … n_lags-1``."""
    acov = autocovariance(series, n_lags)
    if acov[0] <= 0:
        raise ValueError("Autocorrelation undefined for a constant series")
    return acov / acov[0]


# ------------------------------------------------------------------ #
def _block_mean_variances(x: np.ndarray, sizes: np.ndarray) -> np.ndarray:
    mu = x.mean()
    out = np.empty(sizes.size)
    for i, k in enumerate(sizes):
        n_blocks = x.size // k
        means = x[: n_blocks * k].reshape(n_blocks, k).mean(axis=1)
        out[i] = np.mean((means - mu) ** 2)
    return out


def variance_plot_estimate(
    series: pd.Series | ArrayLike,
    *,
    min_block: int = 2,
    max_block: int | None = None,
) -> float:
    """Variance-plot estimate of ``d``.

    Block sizes run over every integer in ``[min_block, max_block]``;
    ``max_block`` defaults to ``T // 2`` so each size has at least two
    blocks.
    """
    return _variance_plot(as_series(series, min_length=2), min_block, max_block)[0]


def _variance_plot(
    x: np.ndarray, min_block: int, max_block: int | None
) -> tuple[float, float]:
    T = x.size
    max_block = T // 2 if max_block is None else int(max_block)
    min_block = int(min_block)
    if min_block < 1 or max_block > T // 2:
        raise ValueError("Block sizes must lie in [1, T // 2]")
    if max_block - min_block < 1:
        raise ValueError("Variance plot needs at least two block sizes")

    sizes = np.arange(min_block, max_block + 1)
    var = _block_mean_variances(x, sizes)
    if np.any(var <= 0):
        raise ValueError("Block means do not vary; log-variance undefined")

    slope, _ = np.polyfit(np.log(sizes), np.log(var), 1)
    return float((slope + 1.0) / 2.0), float(slope)


# ------------------------------------------------------------------ #
class VariancePlot(BaseEstimator):
    """Variance-plot estimator of the memory parameter."""

    def fit(self, min_block: int = 2, max_block: int | None = None) -> "VariancePlot":
        d, slope = _variance_plot(self.series, min_block, max_block)
        self.result_ = {"d": d, "H": d + 0.5, "slope": slope}
        return self
