r"""
Filter coefficient recursions
=============================
Coefficient sequences for the two long-memory families, always of the
requested length and always starting with ``1`` at lag zero:

* :func:`fractional_filter` – binomial expansion of :math:`(1-L)^d`
* :func:`csa_filter`        – MA(∞) taps of the cross-sectionally
  aggregated process, :math:`\sqrt{B(p+k, q)/B(p, q)}`
* :func:`fi_survival_probs` – survival probabilities of the error
  duration model (Parke, 1999)

Every sequence is built as a cumulative product of term ratios.  Evaluating
the closed-form gamma/beta ratios lag by lag overflows for long series and
costs one transcendental call per term.
"""

from __future__ import annotations

import numpy as np

from .._validation import check_length

__all__ = ["fractional_filter", "csa_filter", "fi_survival_probs"]


# ------------------------------------------------------------------ #
def fractional_filter(n: int, d: float) -> np.ndarray:
    """Taps of :math:`(1-L)^d` at lags ``0 … n-1``.

    ``coefs[k] = coefs[k-1] · (k-1-d)/k``.  A negative ``d`` gives the
    fractional integration filter.
    """
    n = check_length(n)
    d = float(d)
    k = np.arange(1, n, dtype=float)
    coefs = np.ones(n)
    coefs[1:] = np.cumprod((k - 1.0 - d) / k)
    return coefs


# ------------------------------------------------------------------ #
def csa_filter(n: int, p: float, q: float) -> np.ndarray:
    """MA taps of the CSA process at lags ``0 … n-1``.

    ``coefs[k] = coefs[k-1] · sqrt((p+k-1)/(p+k-1+q))``
    """
    n = check_length(n)
    p, q = float(p), float(q)
    if p <= 0 or q <= 0:
        raise ValueError("CSA filter requires p > 0 and q > 0")
    k = np.arange(1, n, dtype=float)
    coefs = np.ones(n)
    coefs[1:] = np.cumprod(np.sqrt((p + k - 1.0) / (p + k - 1.0 + q)))
    return coefs


# ------------------------------------------------------------------ #
def fi_survival_probs(n: int, d: float) -> np.ndarray:
    """Probability that a shock survives at least ``k`` periods, ``k = 0 … n-1``.

    ``s[k] = s[k-1] · (k-1+d)/(k+1-d)``, which decays like :math:`k^{2d-2}`
    and makes the aggregated shocks an I(d) process.
    """
    n = check_length(n)
    d = float(d)
    if not (0.0 <= d < 1.0):
        raise ValueError("Survival probabilities require 0 <= d < 1")
    k = np.arange(1, n, dtype=float)
    probs = np.ones(n)
    probs[1:] = np.cumprod((k - 1.0 + d) / (k + 1.0 - d))
    return probs
