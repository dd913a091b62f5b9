r"""Closed-form autocovariances and Toeplitz covariance matrices.

FI(d), unit innovation variance:

.. math:: γ(k) = \frac{Γ(1-2d)}{Γ(1-d)^2} \prod_{j=1}^{k} \frac{d+j-1}{j-d}

CSA(p, q), aggregation of AR(1) processes with squared coefficients drawn
from Beta(p, q):

.. math:: γ(k) = \frac{Γ(p+q)\,B(p,q)}{Γ(p)(q-1)}\,
          \frac{Γ(p + k/2)}{Γ(p + q - 1 + k/2)}

Both sequences are produced by term-ratio recursions; the gamma prefactors
are evaluated once, in log space.  The CSA recursion advances in steps of
one in ``p + k/2``, so even and odd lags run as two interleaved chains.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy.special import betaln, gammaln

from .._validation import check_length

__all__ = [
    "toeplitz_covariance",
    "fi_acov",
    "fi_acf",
    "fi_cov_matrix",
    "csa_acov",
    "csa_acf",
    "csa_cov_matrix",
]


# ------------------------------------------------------------------ #
def toeplitz_covariance(acov: ArrayLike) -> np.ndarray:
    """Symmetric Toeplitz matrix with entry ``(i, j) = acov[|i - j|]``."""

    acov = np.asarray(acov, dtype=float)
    if acov.ndim != 1 or acov.size == 0:
        raise ValueError("acov must be a non-empty one‑dimensional sequence")
    idx = np.arange(acov.size)
    return acov[np.abs(np.subtract.outer(idx, idx))]


# ------------------------------------------------------------------ #
def fi_acov(n: int, d: float) -> np.ndarray:
    """Autocovariances of FI(d) at lags ``0 … n-1``."""

    n = check_length(n)
    d = float(d)
    if d >= 0.5:
        raise ValueError("FI autocovariance requires d < 1/2")

    k = np.arange(1, n, dtype=float)
    acov = np.ones(n)
    acov[1:] = np.cumprod((d + k - 1.0) / (k - d))
    return acov * np.exp(gammaln(1.0 - 2.0 * d) - 2.0 * gammaln(1.0 - d))


def fi_acf(n: int, d: float) -> np.ndarray:
    """Autocorrelations of FI(d) at lags ``0 … n-1``."""

    acov = fi_acov(n, d)
    return acov / acov[0]


def fi_cov_matrix(n: int, d: float) -> np.ndarray:
    """``n × n`` covariance matrix of FI(d) with unit innovation variance."""

    return toeplitz_covariance(fi_acov(n, d))


# ------------------------------------------------------------------ #
def csa_acov(n: int, p: float, q: float) -> np.ndarray:
    """Autocovariances of the CSA(p, q) process at lags ``0 … n-1``."""

    n = check_length(n)
    p, q = float(p), float(q)
    if p <= 0:
        raise ValueError("CSA autocovariance requires p > 0")
    if q <= 1:
        raise ValueError("CSA autocovariance requires q > 1 (finite variance)")

    s = (n + 1) // 2
    j = np.arange(1, s, dtype=float)

    even = np.empty(s)
    even[0] = np.exp(gammaln(p) - gammaln(p + q - 1.0))
    even[1:] = even[0] * np.cumprod((p + j - 1.0) / (p + q - 2.0 + j))

    odd = np.empty(s)
    odd[0] = np.exp(gammaln(p + 0.5) - gammaln(p + q - 0.5))
    odd[1:] = odd[0] * np.cumprod((p + j - 0.5) / (p + q - 1.5 + j))

    acov = np.empty(2 * s)
    acov[0::2] = even
    acov[1::2] = odd

    log_scale = gammaln(p + q) - gammaln(p) - np.log(q - 1.0) + betaln(p, q)
    return acov[:n] * np.exp(log_scale)


def csa_acf(n: int, p: float, q: float) -> np.ndarray:
    """Autocorrelations of the CSA(p, q) process at lags ``0 … n-1``."""

    acov = csa_acov(n, p, q)
    return acov / acov[0]


def csa_cov_matrix(n: int, p: float, q: float) -> np.ndarray:
    """``n × n`` covariance matrix of CSA(p, q) with unit innovation variance."""

    return toeplitz_covariance(csa_acov(n, p, q))
