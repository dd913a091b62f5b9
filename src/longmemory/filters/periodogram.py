"""Raw periodogram and the frequency band used by the spectral estimators."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from .._validation import as_series

__all__ = ["periodogram", "frequency_band"]


def periodogram(series: pd.Series | ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Periodogram of ``series`` at the Fourier frequencies in ``[0, π]``.

    ``I(ω_k) = |Σ_t x_t e^{-iω_k t}|² / T`` with ``ω_k = 2πk/T`` for
    ``k = 0 … T//2``.  The sample is transformed as is, without padding.

    Returns
    -------
    power : ndarray, shape (T//2 + 1,)
    freqs : ndarray, shape (T//2 + 1,)
    """
    x = as_series(series, min_length=2)
    T = x.size
    power = np.abs(np.fft.rfft(x)) ** 2 / T
    freqs = 2.0 * np.pi * np.arange(power.size) / T
    return power, freqs


def frequency_band(n: int, m: float = 0.5, l: float = 0.0) -> slice:
    """Periodogram positions between :math:`T^l` and :math:`T^m`.

    Counting periodogram entries from one, the band runs from
    ``ceil(max(n**l, 2))`` to ``floor(n**m)``; the zero frequency is
    therefore never included.  The returned slice indexes the arrays
    produced by :func:`periodogram`.
    """
    m, l = float(m), float(l)
    if not (0.0 <= l < m <= 1.0):
        raise ValueError("Band exponents must satisfy 0 <= l < m <= 1")

    n_freq = n // 2 + 1
    first = math.ceil(max(n**l, 2.0))
    last = min(math.floor(n**m), n_freq)
    if last - first + 1 < 2:
        raise ValueError(
            f"Frequency band [{first}, {last}] holds fewer than two frequencies; "
            "use a longer series or widen the band."
        )
    return slice(first - 1, last)
