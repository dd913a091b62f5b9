from .coefficients import csa_filter, fi_survival_probs, fractional_filter
from .convolution import (
    FractionalOrder,
    IntegerOrder,
    csadiff,
    differencing_order,
    fracdiff,
    linear_convolve,
)
from .periodogram import frequency_band, periodogram

__all__ = [
    "fractional_filter",
    "csa_filter",
    "fi_survival_probs",
    "FractionalOrder",
    "IntegerOrder",
    "differencing_order",
    "linear_convolve",
    "fracdiff",
    "csadiff",
    "periodogram",
    "frequency_band",
]
