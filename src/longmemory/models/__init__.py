"""
Public API re‑exports for ``longmemory.models``.
"""

from __future__ import annotations

# ── covariance structure ───────────────────────────────────────────────
from .covariance import (
    csa_acf,
    csa_acov,
    csa_cov_matrix,
    fi_acf,
    fi_acov,
    fi_cov_matrix,
    toeplitz_covariance,
)

# ── fractionally integrated processes ──────────────────────────────────
from .fi import arfi_gen, arfima_gen, fi_gen

# ── cross-sectional aggregation ────────────────────────────────────────
from .csa import csa_aggregate_gen, csa_gen

# ── error duration model ───────────────────────────────────────────────
from .edm import edm_gen

__all__ = [
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
]
