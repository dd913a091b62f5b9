import logging
from importlib.metadata import version

try:
    __version__ = version("longmemory")
except Exception:
    __version__ = "0.0.0"

from .config import OptimizerConfig, SpectralConfig  # noqa
from .estimators import (  # noqa
    GPH,
    HAR,
    ExactWhittle,
    VariancePlot,
    Whittle,
    autocorrelation,
    autocovariance,
    csa_llk,
    csa_mle,
    exact_whittle_estimate,
    fi_llk,
    fi_mle,
    gph_estimate,
    gph_variance,
    har_estimate,
    variance_plot_estimate,
    whittle_estimate,
    whittle_variance,
)
from .filters import (  # noqa
    FractionalOrder,
    IntegerOrder,
    csa_filter,
    csadiff,
    fi_survival_probs,
    fracdiff,
    fractional_filter,
    linear_convolve,
    periodogram,
)
from .models import (  # noqa
    arfi_gen,
    arfima_gen,
    csa_acf,
    csa_acov,
    csa_aggregate_gen,
    csa_cov_matrix,
    csa_gen,
    edm_gen,
    fi_acf,
    fi_acov,
    fi_cov_matrix,
    fi_gen,
    toeplitz_covariance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SpectralConfig",
    "OptimizerConfig",
    "fractional_filter",
    "csa_filter",
    "fi_survival_probs",
    "FractionalOrder",
    "IntegerOrder",
    "linear_convolve",
    "fracdiff",
    "csadiff",
    "periodogram",
    "toeplitz_covariance",
    "fi_acov",
    "fi_acf",
    "fi_cov_matrix",
    "csa_acov",
    "csa_acf",
    "csa_cov_matrix",
    "fi_gen",
    "arfi_gen",
    "arfima_gen",
    "csa_gen",
    "csa_aggregate_gen",
    "edm_gen",
    "GPH",
    "Whittle",
    "ExactWhittle",
    "gph_estimate",
    "gph_variance",
    "whittle_estimate",
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
