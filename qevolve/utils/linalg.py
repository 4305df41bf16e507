"""Small dense linear-algebra helpers on complex numpy matrices."""

from __future__ import annotations

import numpy as np

from qevolve.constants import COMPLEX_DTYPE, HERMITIAN_TOLERANCE


def is_hermitian(matrix: np.ndarray, tol: float = HERMITIAN_TOLERANCE) -> bool:
    """Elementwise check |m_ij - conj(m_ji)| <= tol; non-square input is never Hermitian."""
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    return bool(np.all(np.abs(matrix - matrix.conj().T) <= tol))


def is_unitary(matrix: np.ndarray, tol: float = HERMITIAN_TOLERANCE) -> bool:
    """Check U^dagger U == 1 within ``tol`` elementwise."""
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    product = matrix.conj().T @ matrix
    return bool(np.all(np.abs(product - identity(matrix.shape[0])) <= tol))


def trace(matrix: np.ndarray) -> complex:
    """Sum of the diagonal (over the shorter side for rectangular input)."""
    return complex(np.trace(np.asarray(matrix)))


def frobenius_norm(matrix: np.ndarray) -> float:
    return float(np.sqrt(np.sum(np.abs(np.asarray(matrix)) ** 2)))


def identity(dim: int) -> np.ndarray:
    return np.eye(dim, dtype=COMPLEX_DTYPE)


def commutator(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """[a, b] = a b - b a"""
    return a @ b - b @ a


__all__ = [
    "is_hermitian",
    "is_unitary",
    "trace",
    "frobenius_norm",
    "identity",
    "commutator",
]
