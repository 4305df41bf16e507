"""Tests for qevolve.utils.linalg."""

import numpy as np
import pytest

from qevolve.utils.linalg import (
    commutator,
    frobenius_norm,
    identity,
    is_hermitian,
    is_unitary,
    trace,
)

PAULI_X = np.array([[0, 1], [1, 0]], dtype=complex)
PAULI_Y = np.array([[0, -1j], [1j, 0]], dtype=complex)
PAULI_Z = np.array([[1, 0], [0, -1]], dtype=complex)


def test_pauli_matrices_are_hermitian_and_unitary():
    for pauli in (PAULI_X, PAULI_Y, PAULI_Z):
        assert is_hermitian(pauli)
        assert is_unitary(pauli)


def test_is_hermitian_rejects_asymmetric_and_non_square():
    m = np.array([[1.0, 2.0], [0.0, 1.0]], dtype=complex)
    assert not is_hermitian(m)
    assert not is_hermitian(np.zeros((2, 3), dtype=complex))


def test_is_hermitian_respects_tolerance():
    m = PAULI_X.copy()
    m[0, 1] += 1e-12
    assert is_hermitian(m, 1e-10)
    assert not is_hermitian(m, 1e-14)


def test_trace_and_identity():
    m = np.diag([1.0, 2.0, 3.0]).astype(complex)
    assert trace(m) == pytest.approx(6.0)
    assert trace(identity(3)) == pytest.approx(3.0)
    assert is_unitary(identity(3))


def test_frobenius_norm():
    assert frobenius_norm(identity(4)) == pytest.approx(2.0)


def test_commutator_of_paulis():
    # [σx, σy] = 2i σz
    assert np.allclose(commutator(PAULI_X, PAULI_Y), 2j * PAULI_Z)
