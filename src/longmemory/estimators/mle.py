r"""Time-domain maximum likelihood for the FI and CSA families.

The innovation variance is concentrated out of the Gaussian likelihood, so
each family is fitted by minimising

.. math:: \ell(θ) = \tfrac12\left(\frac{\log|V_θ|}{T} + \log x'V_θ^{-1}x\right)

over unconstrained coordinates mapped into the admissible region with a
logistic transform:

* FI:  :math:`d = -\tfrac12 + e^θ/(1+e^θ) ∈ (-\tfrac12, \tfrac12)`
* CSA: :math:`p, q = 1 + 2e^θ/(1+e^θ) ∈ (1, 3)`

``V`` is factorised with a Cholesky decomposition.  Parameter values at
which the factorisation fails, or the objective is not finite, score the
finite ``OptimizerConfig.penalty`` so the search stays defined everywhere.
The unconstrained coordinates are clipped to ``|θ| <= 30``; a fit that ends
on that bound is reported as not converged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike
from scipy import linalg, optimize
from scipy.special import expit, logit

from .._validation import as_series
from ..config import DEFAULT_PENALTY, OptimizerConfig
from ..models.covariance import csa_cov_matrix, fi_cov_matrix
from .spectral import gph_estimate

__all__ = ["fi_llk", "csa_llk", "fi_mle", "csa_mle"]

logger = logging.getLogger(__name__)

_D_CLIP = 0.49
# expit saturates to exactly 0 or 1 in double precision beyond roughly |θ| = 37
_THETA_MAX = 30.0
_BOUNDARY_MESSAGE = "estimate on the boundary of the search region"


# ------------------------------------------------------------------ #
def _theta_to_d(theta: float) -> float:
    return -0.5 + float(expit(theta))


def _d_to_theta(d: float) -> float:
    return float(logit(d + 0.5))


def _theta_to_shape(theta: float) -> float:
    return 1.0 + 2.0 * float(expit(theta))


def _shape_to_theta(v: float) -> float:
    return float(logit((v - 1.0) / 2.0))


def _bounded(theta: np.ndarray) -> np.ndarray:
    return np.clip(theta, -_THETA_MAX, _THETA_MAX)


def _on_boundary(theta: np.ndarray) -> bool:
    return bool(np.any(np.abs(theta) >= _THETA_MAX))


# ------------------------------------------------------------------ #
def _cholesky_terms(V: np.ndarray, x: np.ndarray) -> tuple[float, float]:
    """``(log|V|, x'V⁻¹x)`` from a Cholesky factorisation of ``V``."""
    cho = linalg.cho_factor(V, lower=True, check_finite=False)
    quad = float(x @ linalg.cho_solve(cho, x, check_finite=False))
    logdet = 2.0 * float(np.sum(np.log(np.diag(cho[0]))))
    return logdet, quad


def _concentrated(build: Callable[[], np.ndarray], x: np.ndarray, penalty: float) -> float:
    try:
        logdet, quad = _cholesky_terms(build(), x)
    except (linalg.LinAlgError, ValueError) as exc:
        logger.debug("Covariance factorisation failed (%s); returning penalty", exc)
        return penalty
    if not (np.isfinite(logdet) and np.isfinite(quad)) or quad <= 0:
        return penalty
    return 0.5 * (logdet / x.size + np.log(quad))


def _summary(build: Callable[[], np.ndarray], x: np.ndarray) -> tuple[float, float]:
    """Innovation standard deviation and maximised Gaussian log-likelihood."""
    n = x.size
    try:
        logdet, quad = _cholesky_terms(build(), x)
    except (linalg.LinAlgError, ValueError):
        return float("nan"), float("nan")
    sigma2 = quad / n
    if not np.isfinite(sigma2) or sigma2 <= 0:
        return float("nan"), float("nan")
    loglik = -0.5 * (n * np.log(2 * np.pi) + logdet + n * np.log(sigma2) + n)
    return float(np.sqrt(sigma2)), float(loglik)


def _minimise(objective, x0: np.ndarray, config: OptimizerConfig) -> optimize.OptimizeResult:
    return optimize.minimize(
        lambda th: objective(_bounded(th)),
        x0=np.asarray(x0, dtype=float),
        method=config.method,
        options=config.options(),
    )


def _status(res: optimize.OptimizeResult, sigma: float, label: str) -> tuple[bool, str]:
    message = str(res.message)
    if _on_boundary(res.x):
        message = f"{message}; {_BOUNDARY_MESSAGE}"
    converged = bool(res.success and np.isfinite(sigma) and not _on_boundary(res.x))
    if not converged:
        logger.warning("%s MLE did not converge: %s", label, message)
    return converged, message


# ------------------------------------------------------------------ #
def fi_llk(
    theta: float,
    series: pd.Series | ArrayLike,
    *,
    penalty: float = DEFAULT_PENALTY,
) -> float:
    """Concentrated FI log-likelihood (to be minimised) at unconstrained ``theta``.

    ``d = -1/2 + e^θ/(1+e^θ)``.  The series is used as given; centre it
    beforehand.
    """
    x = as_series(series, min_length=2)
    d = _theta_to_d(theta)
    return _concentrated(lambda: fi_cov_matrix(x.size, d), x, penalty)


def csa_llk(
    theta_p: float,
    theta_q: float,
    series: pd.Series | ArrayLike,
    *,
    penalty: float = DEFAULT_PENALTY,
) -> float:
    """Concentrated CSA log-likelihood (to be minimised) at unconstrained coordinates.

    ``p = 1 + 2e^{θ_p}/(1+e^{θ_p})`` and likewise for ``q``.
    """
    x = as_series(series, min_length=2)
    p, q = _theta_to_shape(theta_p), _theta_to_shape(theta_q)
    return _concentrated(lambda: csa_cov_matrix(x.size, p, q), x, penalty)


# ------------------------------------------------------------------ #
def fi_mle(
    series: pd.Series | ArrayLike,
    *,
    start: float | None = None,
    config: OptimizerConfig | None = None,
) -> Dict[str, Any]:
    """Maximum-likelihood estimates of ``(d, sigma)`` for an FI(d) series.

    The search starts at ``start`` or, by default, at the GPH estimate
    clipped to ``[-0.49, 0.49]``.

    Returns
    -------
    dict
        ``d``, ``sigma``, ``loglik``, ``converged``, ``message``, ``n_iter``.
    """
    config = config or OptimizerConfig()
    x = as_series(series, min_length=2)
    x = x - x.mean()
    n = x.size

    if start is None:
        try:
            d0 = float(np.clip(gph_estimate(x), -_D_CLIP, _D_CLIP))
        except ValueError as exc:
            logger.debug("GPH start unavailable (%s); starting from d0=0", exc)
            d0 = 0.0
    else:
        d0 = float(start)
        if not (-0.5 < d0 < 0.5):
            raise ValueError("start must lie in (-1/2, 1/2)")

    logger.debug("FI MLE: n=%d, start d0=%.4f", n, d0)
    res = _minimise(
        lambda th: _concentrated(
            lambda: fi_cov_matrix(n, _theta_to_d(th[0])), x, config.penalty
        ),
        np.array([_d_to_theta(d0)]),
        config,
    )

    d_hat = _theta_to_d(_bounded(res.x)[0])
    sigma, loglik = _summary(lambda: fi_cov_matrix(n, d_hat), x)
    converged, message = _status(res, sigma, "FI")
    return {
        "d": d_hat,
        "sigma": sigma,
        "loglik": loglik,
        "converged": converged,
        "message": message,
        "n_iter": int(res.get("nit", 0)),
    }


def csa_mle(
    series: pd.Series | ArrayLike,
    *,
    start: tuple[float, float] | None = None,
    rng: np.random.Generator | int | None = None,
    config: OptimizerConfig | None = None,
) -> Dict[str, Any]:
    """Maximum-likelihood estimates of ``(p, q, sigma)`` for a CSA series.

    Without ``start`` the search begins at independent ``U(1, 2)`` draws
    from ``rng``.  The search space is ``p, q ∈ (1, 3)``.

    Returns
    -------
    dict
        ``p``, ``q``, ``d`` (``= 1 - q/2``), ``sigma``, ``loglik``,
        ``converged``, ``message``, ``n_iter``.
    """
    config = config or OptimizerConfig()
    x = as_series(series, min_length=2)
    x = x - x.mean()
    n = x.size

    if start is None:
        rng = np.random.default_rng(rng)
        p0, q0 = np.clip(rng.uniform(1.0, 2.0, size=2), 1.0 + 1e-8, 2.0)
    else:
        p0, q0 = (float(v) for v in start)
        if not (1.0 < p0 < 3.0 and 1.0 < q0 < 3.0):
            raise ValueError("start values must lie in (1, 3)")

    logger.debug("CSA MLE: n=%d, start p0=%.4f, q0=%.4f", n, p0, q0)
    res = _minimise(
        lambda th: _concentrated(
            lambda: csa_cov_matrix(n, _theta_to_shape(th[0]), _theta_to_shape(th[1])),
            x,
            config.penalty,
        ),
        np.array([_shape_to_theta(p0), _shape_to_theta(q0)]),
        config,
    )

    theta = _bounded(res.x)
    p_hat, q_hat = _theta_to_shape(theta[0]), _theta_to_shape(theta[1])
    sigma, loglik = _summary(lambda: csa_cov_matrix(n, p_hat, q_hat), x)
    converged, message = _status(res, sigma, "CSA")
    return {
        "p": p_hat,
        "q": q_hat,
        "d": 1.0 - q_hat / 2.0,
        "sigma": sigma,
        "loglik": loglik,
        "converged": converged,
        "message": message,
        "n_iter": int(res.get("nit", 0)),
    }
