"""
Fractionally integrated generators
==================================
fi_gen(...)      → FI(d)
arfi_gen(...)    → ARFI(p, d)
arfima_gen(...)  → ARFIMA(p, d, q)

Innovations are filtered through the MA polynomial, fractionally
integrated with :func:`~longmemory.filters.fracdiff` at order ``-d`` and
passed through the AR recursion, in that order.  The fractional filter is
truncated at the start of the sample (type II process), so no burn-in is
drawn.

All randomness comes from ``rng``: a :class:`numpy.random.Generator`, a
seed, or ``None`` for fresh entropy.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.signal import lfilter

from .._validation import check_length
from ..filters.convolution import FractionalOrder, fracdiff

__all__ = ["fi_gen", "arfi_gen", "arfima_gen"]


# ------------------------------------------------------------------ #
def _integrate(u: np.ndarray, d: float) -> np.ndarray:
    if d == 0:
        return u
    return fracdiff(u, FractionalOrder(-float(d)))


# ------------------------------------------------------------------ #
def fi_gen(
    n: int,
    d: float,
    *,
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """
    Simulate ``n`` observations of ``mu + (1-L)^{-d} σ ε_t``.

    Parameters
    ----------
    n : int
        Sample size.
    d : float
        Memory parameter; stationary for ``-1/2 < d < 1/2``.
    mu : float, default 0
        Mean added after integration.
    sigma : float, default 1
        Innovation standard deviation.
    rng : Generator, int or None
        Random source.
    """
    return arfima_gen(n, d, mu=mu, sigma=sigma, rng=rng)


def arfi_gen(
    n: int,
    d: float,
    *,
    ar: Sequence[float] = (),
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """ARFI(p, d): :func:`arfima_gen` without MA terms."""
    return arfima_gen(n, d, ar=ar, mu=mu, sigma=sigma, rng=rng)


def arfima_gen(
    n: int,
    d: float,
    *,
    ar: Sequence[float] = (),
    ma: Sequence[float] = (),
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """
    Simulate an ARFIMA(p, d, q) series

    .. math:: φ(L)(1-L)^d (x_t - μ) = θ(L) σ ε_t

    with ``φ(L) = 1 - Σ ar_i L^i`` and ``θ(L) = 1 + Σ ma_j L^j``.  The AR
    recursion starts from zeros; stationarity of ``φ`` is not checked.
    """
    n = check_length(n)
    if sigma < 0:
        raise ValueError("sigma must be non-negative")
    ar = np.asarray(ar, dtype=float).ravel()
    ma = np.asarray(ma, dtype=float).ravel()
    rng = np.random.default_rng(rng)

    # draw q extra innovations so the MA filter is fully populated
    eps = sigma * rng.standard_normal(n + ma.size)
    u = lfilter(np.r_[1.0, ma], [1.0], eps)[ma.size :]
    y = _integrate(u, d)
    if ar.size:
        y = lfilter([1.0], np.r_[1.0, -ar], y)
    return mu + y
