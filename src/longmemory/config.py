"""Parameter bundles shared by the estimators.

Each bundle carries the defaults used throughout the package; functions
accept an optional bundle plus keyword overrides, and the keywords win.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SpectralConfig",
    "OptimizerConfig",
    "GPH_VARIANCE_CORRECTION",
    "DEFAULT_PENALTY",
]


# Objective value reported where the likelihood cannot be evaluated.
DEFAULT_PENALTY = 1e10

# Inflation of the GPH asymptotic variance by number of bias-reduction
# terms (Andrews & Guggenberger, 2003, Table I).
GPH_VARIANCE_CORRECTION: dict[int, float] = {
    0: 1.0,
    1: 2.25,
    2: 3.52,
    3: 4.79,
    4: 6.06,
}


# ---------------------------------------------------------------------------
@dataclass(slots=True)
class SpectralConfig:
    """Frequency band and regression settings for periodogram estimators.

    ``m`` and ``l`` are exponents: the band spans Fourier indices
    :math:`[T^l, T^m]`, with the zero frequency always excluded.
    """

    m: float = 0.5
    l: float = 0.0
    bias_reduction: int = 0


# ---------------------------------------------------------------------------
@dataclass(slots=True)
class OptimizerConfig:
    """Settings forwarded to :func:`scipy.optimize.minimize`."""

    method: str = "Nelder-Mead"
    maxiter: int | None = None
    xatol: float = 1e-6
    fatol: float = 1e-10
    penalty: float = DEFAULT_PENALTY

    def options(self) -> dict:
        opts: dict = {}
        if self.maxiter is not None:
            opts["maxiter"] = int(self.maxiter)
        if self.method.lower() == "nelder-mead":
            opts["xatol"] = self.xatol
            opts["fatol"] = self.fatol
        return opts
