from .classic import VariancePlot, autocorrelation, autocovariance, variance_plot_estimate
from .har import HAR, har_estimate
from .mle import csa_llk, csa_mle, fi_llk, fi_mle
from .spectral import (
    GPH,
    ExactWhittle,
    Whittle,
    exact_whittle_estimate,
    exact_whittle_objective,
    gph_estimate,
    gph_variance,
    whittle_estimate,
    whittle_objective,
    whittle_variance,
)

__all__ = [
    "GPH",
    "Whittle",
    "ExactWhittle",
    "gph_estimate",
    "gph_variance",
    "whittle_objective",
    "whittle_estimate",
    "exact_whittle_objective",
    "exact_whittle_estimate",
    "whittle_variance",
    "fi_llk",
    "csa_llk",
    "fi_mle",
    "csa_mle",
    "autocovariance",
    "autocorrelation",
    "variance_plot_estimate",
    "VariancePlot",
    "HAR",
    "har_estimate",
]
