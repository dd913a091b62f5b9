"""
Frequency-domain differencing operators
=======================================
Both operators apply a long, slowly decaying filter to a finite sample:

    fracdiff(x, d)      → (1-L)^d x_t
    csadiff(x, p, q)    → Σ_k ψ_k(p, q) x_{t-k}

The filter is applied as a *linear* convolution computed with real FFTs.
Signal and taps are zero-padded to the next power of two at or above
``2T - 1`` so the circular product coincides with the linear one on the
first ``T`` samples; without the padding the hyperbolic tails of the taps
wrap around and contaminate the start of the output.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from .._validation import as_series
from .coefficients import csa_filter, fractional_filter

__all__ = [
    "FractionalOrder",
    "IntegerOrder",
    "differencing_order",
    "linear_convolve",
    "fracdiff",
    "csadiff",
]


# ------------------------------------------------------------------ #
@dataclass(frozen=True, slots=True)
class FractionalOrder:
    """Real differencing order, applied through the binomial filter."""

    value: float


@dataclass(frozen=True, slots=True)
class IntegerOrder:
    """Integer differencing order; only ``0`` (identity) and ``1`` exist."""

    value: int

    def __post_init__(self) -> None:
        if self.value not in (0, 1):
            raise ValueError("Integer differencing order must be 0 or 1")


def differencing_order(d) -> FractionalOrder | IntegerOrder:
    """Resolve ``d`` to an explicit differencing order.

    Python and NumPy integers select :class:`IntegerOrder`; any other real
    number, including ``0.0`` and ``1.0``, selects :class:`FractionalOrder`.
    """
    if isinstance(d, (FractionalOrder, IntegerOrder)):
        return d
    if isinstance(d, (bool, np.bool_)):
        raise TypeError("Differencing order must be numeric, not bool")
    if isinstance(d, (int, np.integer)):
        return IntegerOrder(int(d))
    d = float(d)
    if not np.isfinite(d):
        raise ValueError("Differencing order must be finite")
    return FractionalOrder(d)


# ------------------------------------------------------------------ #
def _next_pow2(n: int) -> int:
    return 1 << int(np.ceil(np.log2(max(n, 1))))


def linear_convolve(signal: pd.Series | ArrayLike, taps: ArrayLike) -> np.ndarray:
    """First ``len(signal)`` samples of the linear convolution ``signal * taps``.

    Parameters
    ----------
    signal : array-like, shape (T,)
        Input series.
    taps : array-like
        Filter coefficients indexed from lag zero.  Only the first ``T``
        taps can reach the output; longer sequences are truncated and
        shorter ones zero-padded.

    Returns
    -------
    ndarray, shape (T,)
    """
    x = as_series(signal)
    b = np.asarray(taps, dtype=float)
    if b.ndim != 1 or b.size == 0:
        raise ValueError("taps must be a non-empty one‑dimensional sequence")

    T = x.size
    b = b[:T]
    nfft = _next_pow2(2 * T - 1)
    spec = np.fft.rfft(x, n=nfft) * np.fft.rfft(b, n=nfft)
    return np.fft.irfft(spec, n=nfft)[:T]


# ------------------------------------------------------------------ #
def fracdiff(series: pd.Series | ArrayLike, d) -> np.ndarray:
    """Fractionally difference (``d > 0``) or integrate (``d < 0``) a series.

    Parameters
    ----------
    series : array-like, shape (T,)
    d : int, float, FractionalOrder or IntegerOrder
        Integer ``0`` returns a copy of the input, integer ``1`` the first
        difference, **of length T-1**.  Any real value goes through the
        truncated binomial filter and keeps length ``T``.
    """
    x = as_series(series)
    match differencing_order(d):
        case IntegerOrder(value=0):
            return x.copy()
        case IntegerOrder(value=1):
            return np.diff(x)
        case FractionalOrder(value=value):
            return linear_convolve(x, fractional_filter(x.size, value))


def csadiff(series: pd.Series | ArrayLike, p: float, q: float) -> np.ndarray:
    """Filter a series with the CSA moving-average taps ``ψ_k(p, q)``."""
    x = as_series(series)
    return linear_convolve(x, csa_filter(x.size, p, q))
