"""
Cross-sectional aggregation (CSA) generators
============================================
Granger (1980): averaging many AR(1) series whose squared coefficients are
Beta(p, q) draws yields long memory with ``d = 1 - q/2``.

csa_gen(...)            → limit process, via the CSA MA(∞) filter
csa_aggregate_gen(...)  → explicit finite cross-section of AR(1) series
"""

from __future__ import annotations

import numpy as np

from .._validation import check_length
from ..filters.convolution import csadiff

__all__ = ["csa_gen", "csa_aggregate_gen"]

_MAX_ALPHA_SQ = 1.0 - 1e-12


# ------------------------------------------------------------------ #
def csa_gen(
    n: int,
    p: float,
    q: float,
    *,
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Simulate ``n`` observations of the aggregated process by filtering noise."""
    n = check_length(n)
    if sigma < 0:
        raise ValueError("sigma must be non-negative")
    rng = np.random.default_rng(rng)
    eps = sigma * rng.standard_normal(n)
    return mu + csadiff(eps, p, q)


# ------------------------------------------------------------------ #
def csa_aggregate_gen(
    n: int,
    n_series: int,
    p: float,
    q: float,
    *,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """
    Aggregate ``n_series`` independent AR(1) processes.

    Each unit follows ``x_{i,t} = α_i x_{i,t-1} + σ ε_{i,t}`` with
    ``α_i² ~ Beta(p, q)`` and starts from its stationary distribution
    ``N(0, σ²/(1-α_i²))``.  The cross-sectional sum is scaled by
    ``1/sqrt(n_series)``.

    Returns
    -------
    ndarray, shape (n,)
    """
    n = check_length(n)
    n_series = check_length(n_series)
    if p <= 0 or q <= 0:
        raise ValueError("Beta parameters p and q must be positive")
    if sigma < 0:
        raise ValueError("sigma must be non-negative")
    rng = np.random.default_rng(rng)

    # a Beta draw can round to 1 for small q
    alpha_sq = np.minimum(rng.beta(p, q, size=n_series), _MAX_ALPHA_SQ)
    alpha = np.sqrt(alpha_sq)
    eps = sigma * rng.standard_normal((n, n_series))

    state = eps[0] / np.sqrt(1.0 - alpha_sq)
    agg = np.empty(n)
    agg[0] = state.sum()
    for t in range(1, n):
        state = alpha * state + eps[t]
        agg[t] = state.sum()
    return agg / np.sqrt(n_series)
