"""Numerical constants and tolerances.

Lightweight module: safe to import from any layer without triggering
expensive or circular imports. Keep ONLY primitive constants here.
"""

from __future__ import annotations
import numpy as np

# Natural units throughout (hbar = 1)
HBAR: float = 1.0

TWOPI: float = 2 * np.pi

# Validity checks on quantum states and operators
NORM_TOLERANCE: float = 1e-10  # | <psi|psi> - 1 |
HERMITIAN_TOLERANCE: float = 1e-10  # max_ij | m_ij - conj(m_ji) |
TRACE_TOLERANCE: float = 1e-10  # | Tr(rho) - 1 |

COMPLEX_DTYPE = np.complex128

__all__ = [
    "HBAR",
    "TWOPI",
    "NORM_TOLERANCE",
    "HERMITIAN_TOLERANCE",
    "TRACE_TOLERANCE",
    "COMPLEX_DTYPE",
]
