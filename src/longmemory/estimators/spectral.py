r"""
Periodogram-based estimators of the memory parameter
====================================================
All estimators use the periodogram on the band :math:`[T^l, T^m]`
(zero frequency excluded), see :func:`~longmemory.filters.frequency_band`.

* :func:`gph_estimate` – log-periodogram regression (Geweke & Porter-Hudak,
  1983) with the bias-reduction terms of Andrews & Guggenberger (2003)
* :func:`whittle_estimate` – local Whittle (Robinson, 1995)
* :func:`exact_whittle_estimate` – exact local Whittle (Shimotsu &
  Phillips, 2005), which fractionally differences the data instead of
  reweighting the raw periodogram by :math:`ω^{2d}`
* :func:`gph_variance`, :func:`whittle_variance` – asymptotic variances

Both Whittle variants minimise

.. math:: Q(d) = \log G(d) - 2d\,\overline{\log ω}

starting from the GPH estimate.  The class wrappers :class:`GPH`,
:class:`Whittle` and :class:`ExactWhittle` bundle the estimate with its
standard error.
"""

from __future__ import annotations

import logging
import warnings

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike
from scipy import optimize
from statsmodels.tools.sm_exceptions import ConvergenceWarning

from .._validation import as_series
from ..config import GPH_VARIANCE_CORRECTION, OptimizerConfig, SpectralConfig
from ..filters.convolution import FractionalOrder, fracdiff
from ..filters.periodogram import frequency_band, periodogram
from ._base import BandEstimator

__all__ = [
    "gph_estimate",
    "gph_variance",
    "whittle_objective",
    "whittle_estimate",
    "exact_whittle_objective",
    "exact_whittle_estimate",
    "whittle_variance",
    "GPH",
    "Whittle",
    "ExactWhittle",
]

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------ #
def _band_length(n: int, m: float, l: float) -> int:
    band = frequency_band(n, m, l)
    return band.stop - band.start


def _check_bias_reduction(br) -> int:
    if isinstance(br, (bool, np.bool_)) or int(br) != br or br < 0:
        raise ValueError("bias_reduction must be a non-negative integer")
    return int(br)


def _band_periodogram(x: np.ndarray, m: float, l: float) -> tuple[np.ndarray, np.ndarray]:
    band = frequency_band(x.size, m, l)
    power, freqs = periodogram(x)
    return power[band], freqs[band]


# ------------------------------------------------------------------ #
def gph_estimate(
    series: pd.Series | ArrayLike,
    *,
    m: float = 0.5,
    l: float = 0.0,
    bias_reduction: int = 0,
) -> float:
    r"""Log-periodogram regression estimate of ``d``.

    Regresses :math:`\log I(ω)` on :math:`-2\log ω`, a constant and, when
    ``bias_reduction = r > 0``, the even powers :math:`ω^2, …, ω^{2r}`.
    The slope on :math:`-2\log ω` is returned.
    """
    x = as_series(series, min_length=2)
    br = _check_bias_reduction(bias_reduction)
    power, freqs = _band_periodogram(x, m, l)

    if np.any(power <= 0):
        raise ValueError("Periodogram vanishes inside the band; log-regression undefined")
    if power.size < br + 2:
        raise ValueError(
            f"{power.size} frequencies cannot identify {br + 2} regression coefficients"
        )

    y = np.log(power)
    X = np.column_stack(
        [-2.0 * np.log(freqs)] + [freqs ** (2 * j) for j in range(br + 1)]
    )
    beta, *_ = np.linalg.lstsq(X, y, rcond=None)
    return float(beta[0])


def gph_variance(
    n: int,
    *,
    m: float = 0.5,
    l: float = 0.0,
    bias_reduction: int = 0,
) -> float:
    """Asymptotic variance of :func:`gph_estimate` for a series of length ``n``.

    :math:`π^2/(24 m_T)` inflated by the bias-reduction correction factor;
    orders above four fall back to the fourth-order factor with a warning.
    """
    br = _check_bias_reduction(bias_reduction)
    if br > 4:
        warnings.warn(
            f"No variance correction tabulated for bias_reduction={br}; "
            "using the value for 4.",
            UserWarning,
            stacklevel=2,
        )
    factor = GPH_VARIANCE_CORRECTION[min(br, 4)]
    return factor * (np.pi**2 / 24.0) / _band_length(int(n), m, l)


def whittle_variance(n: int, *, m: float = 0.5, l: float = 0.0) -> float:
    """Asymptotic variance ``1/(4 m_T)`` shared by both Whittle estimators."""
    return 1.0 / (4.0 * _band_length(int(n), m, l))


# ------------------------------------------------------------------ #
def _whittle_q(d: float, power: np.ndarray, freqs: np.ndarray, penalty: float) -> float:
    G = np.mean(power * freqs ** (2.0 * d))
    if not np.isfinite(G) or G <= 0:
        return penalty
    return float(np.log(G) - 2.0 * d * np.mean(np.log(freqs)))


def _exact_q(
    d: float, xc: np.ndarray, band: slice, log_freqs: np.ndarray, penalty: float
) -> float:
    power, _ = periodogram(fracdiff(xc, FractionalOrder(d)))
    G = np.mean(power[band])
    if not np.isfinite(G) or G <= 0:
        return penalty
    return float(np.log(G) - 2.0 * d * np.mean(log_freqs))


def whittle_objective(
    d: float, series: pd.Series | ArrayLike, *, m: float = 0.5, l: float = 0.0
) -> float:
    """Local Whittle objective ``Q(d)`` on the raw periodogram."""
    x = as_series(series, min_length=2)
    power, freqs = _band_periodogram(x, m, l)
    return _whittle_q(float(d), power, freqs, np.inf)


def exact_whittle_objective(
    d: float, series: pd.Series | ArrayLike, *, m: float = 0.5, l: float = 0.0
) -> float:
    """Exact local Whittle objective: ``Q(d)`` on the periodogram of ``Δ^d x``."""
    x = as_series(series, min_length=2)
    band = frequency_band(x.size, m, l)
    _, freqs = periodogram(x)
    return _exact_q(float(d), x - x.mean(), band, np.log(freqs[band]), np.inf)


# ------------------------------------------------------------------ #
def _minimise(objective, d0: float, config: OptimizerConfig) -> optimize.OptimizeResult:
    return optimize.minimize(
        lambda v: objective(float(v[0])),
        x0=np.array([d0]),
        method=config.method,
        options=config.options(),
    )


def _fit_whittle(
    x: np.ndarray, m: float, l: float, exact: bool, config: OptimizerConfig
) -> optimize.OptimizeResult:
    d0 = gph_estimate(x, m=m, l=l)
    band = frequency_band(x.size, m, l)
    power, freqs = periodogram(x)
    power, freqs = power[band], freqs[band]

    if exact:
        xc = x - x.mean()
        log_freqs = np.log(freqs)

        def objective(d: float) -> float:
            return _exact_q(d, xc, band, log_freqs, config.penalty)

    else:

        def objective(d: float) -> float:
            return _whittle_q(d, power, freqs, config.penalty)

    kind = "Exact Whittle" if exact else "Whittle"
    logger.debug("%s search from GPH start d0=%.4f", kind, d0)
    res = _minimise(objective, d0, config)
    logger.debug(
        "%s search finished: d=%.4f, success=%s (%s)", kind, res.x[0], res.success, res.message
    )
    return res


def _whittle_point(res: optimize.OptimizeResult, name: str) -> float:
    if not res.success:
        warnings.warn(
            f"{name} optimisation did not converge: {res.message}",
            ConvergenceWarning,
            stacklevel=3,
        )
    return float(res.x[0])


def whittle_estimate(
    series: pd.Series | ArrayLike,
    *,
    m: float = 0.5,
    l: float = 0.0,
    config: OptimizerConfig | None = None,
) -> float:
    """Local Whittle estimate of ``d``, started from :func:`gph_estimate`."""
    x = as_series(series, min_length=2)
    res = _fit_whittle(x, m, l, exact=False, config=config or OptimizerConfig())
    return _whittle_point(res, "Whittle")


def exact_whittle_estimate(
    series: pd.Series | ArrayLike,
    *,
    m: float = 0.5,
    l: float = 0.0,
    config: OptimizerConfig | None = None,
) -> float:
    """Exact local Whittle estimate of ``d``, started from :func:`gph_estimate`.

    The series is demeaned before differencing.
    """
    x = as_series(series, min_length=2)
    res = _fit_whittle(x, m, l, exact=True, config=config or OptimizerConfig())
    return _whittle_point(res, "Exact Whittle")


# ------------------------------------------------------------------ #
class GPH(BandEstimator):
    """Log-periodogram regression estimator with standard error."""

    def __init__(
        self,
        series,
        *,
        m: float | None = None,
        l: float | None = None,
        bias_reduction: int | None = None,
        config: SpectralConfig | None = None,
    ):
        super().__init__(series, m=m, l=l, config=config)
        br = self.config.bias_reduction if bias_reduction is None else bias_reduction
        self.bias_reduction = _check_bias_reduction(br)

    def fit(self) -> "GPH":
        n = self.series.size
        d = gph_estimate(self.series, m=self.m, l=self.l, bias_reduction=self.bias_reduction)
        var = gph_variance(n, m=self.m, l=self.l, bias_reduction=self.bias_reduction)
        self.result_ = {
            "d": d,
            "se": float(np.sqrt(var)),
            "n_freq": _band_length(n, self.m, self.l),
            "bias_reduction": self.bias_reduction,
        }
        return self


class Whittle(BandEstimator):
    """Local Whittle estimator; ``result_`` records optimiser convergence."""

    exact: bool = False

    def fit(self, config: OptimizerConfig | None = None) -> "Whittle":
        n = self.series.size
        res = _fit_whittle(self.series, self.m, self.l, self.exact, config or OptimizerConfig())
        self.result_ = {
            "d": float(res.x[0]),
            "se": float(np.sqrt(whittle_variance(n, m=self.m, l=self.l))),
            "n_freq": _band_length(n, self.m, self.l),
            "objective": float(res.fun),
            "converged": bool(res.success),
            "message": str(res.message),
        }
        return self


class ExactWhittle(Whittle):
    """Exact local Whittle estimator."""

    exact = True
