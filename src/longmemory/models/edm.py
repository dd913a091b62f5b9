"""Error duration model (Parke, 1999).

Each period a Gaussian shock is born and survives for a random number of
periods.  The observation is the sum of all shocks alive at that date.
Survival probabilities decaying like :math:`k^{2d-2}` make the sum an I(d)
process.
"""

from __future__ import annotations

import numpy as np

from .._validation import check_length
from ..filters.coefficients import fi_survival_probs

__all__ = ["edm_gen"]


def edm_gen(
    n: int,
    d: float,
    *,
    presample: float = 0.5,
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """
    Simulate ``n`` observations of the error duration model.

    Parameters
    ----------
    n : int
        Number of returned observations.
    d : float
        Memory parameter, ``0 <= d < 1``.
    presample : float, default 0.5
        Warm-up length as a fraction of ``n``; these draws are discarded.
    mu, sigma : float
        Mean and standard deviation of the shocks.
    rng : Generator, int or None
        Random source.
    """
    n = check_length(n)
    if presample < 0:
        raise ValueError("presample must be non-negative")
    rng = np.random.default_rng(rng)

    burn = int(round(n * presample))
    total = n + burn
    probs = fi_survival_probs(total, d)

    # duration of shock s = number of lags k with probs[k] >= u_s
    u = rng.uniform(size=total)
    durations = np.searchsorted(-probs, -u, side="right")
    shocks = rng.normal(loc=mu, scale=sigma, size=total)

    # add each shock over [s, s + duration) with a difference array
    delta = np.zeros(total + 1)
    starts = np.arange(total)
    stops = np.minimum(starts + durations, total)
    np.add.at(delta, starts, shocks)
    np.add.at(delta, stops, -shocks)
    x = np.cumsum(delta[:total])
    return x[burn:]
