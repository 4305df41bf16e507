"""Utility helpers for qevolve (dense linear algebra checks)."""

from .linalg import (
    is_hermitian,
    is_unitary,
    trace,
    frobenius_norm,
    identity,
    commutator,
)

__all__ = [
    "is_hermitian",
    "is_unitary",
    "trace",
    "frobenius_norm",
    "identity",
    "commutator",
]
