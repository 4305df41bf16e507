"""Quantum state containers: pure states (kets) and density matrices.

Both containers are immutable value objects: integrators return a new
instance on every step instead of mutating the old one.

The public constructors validate the physical invariants. ``_unchecked``
bypasses the checks and is reserved for integrator-internal intermediate
values (Runge-Kutta stages) that are not physical states themselves.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from qutip import Qobj, basis

from qevolve.constants import (
    COMPLEX_DTYPE,
    HERMITIAN_TOLERANCE,
    NORM_TOLERANCE,
    TRACE_TOLERANCE,
)
from qevolve.exceptions import (
    DimensionMismatchError,
    InvalidParameterError,
    NotImplementedFeatureError,
)
from qevolve.utils.linalg import is_hermitian


def _frozen(data: np.ndarray) -> np.ndarray:
    data.setflags(write=False)
    return data


class PureState:
    """Normalized state vector |ψ> with <ψ|ψ> = 1 (within 1e-10)."""

    __slots__ = ("_data",)

    def __init__(self, data):
        data = np.array(data, dtype=COMPLEX_DTYPE)
        if data.ndim != 1:
            raise InvalidParameterError(f"State vector must be 1D, got shape {data.shape}")
        norm_sq = float(np.sum(np.abs(data) ** 2))
        if not abs(norm_sq - 1.0) <= NORM_TOLERANCE:
            raise InvalidParameterError(
                f"State must be normalized, got norm^2 = {norm_sq}"
            )
        self._data = _frozen(data)

    @classmethod
    def _unchecked(cls, data: np.ndarray) -> "PureState":
        """Wrap ``data`` without validation (integrator stages only)."""
        state = cls.__new__(cls)
        state._data = _frozen(np.asarray(data, dtype=COMPLEX_DTYPE))
        return state

    # === CONSTRUCTORS ===
    @classmethod
    def ground_state(cls, dim: int) -> "PureState":
        """|0> in a ``dim``-dimensional space."""
        return cls.basis_state(dim, 0)

    @classmethod
    def basis_state(cls, dim: int, n: int) -> "PureState":
        """Canonical basis vector |n>."""
        if dim < 1:
            raise InvalidParameterError(f"dimension must be >= 1, got {dim}")
        if not 0 <= n < dim:
            raise InvalidParameterError(f"Level {n} out of bounds for dimension {dim}")
        return cls._unchecked(basis(dim, n).full().ravel())

    @classmethod
    def random(cls, dim: int, rng: Optional[np.random.Generator] = None) -> "PureState":
        """Random state from independently drawn components, renormalized.

        Real and imaginary parts are drawn uniformly from [0, 1). The result is
        NOT Haar-distributed on the state manifold (biased towards the
        positive quadrant); use qutip.rand_ket for uniform sampling.
        """
        if dim < 1:
            raise InvalidParameterError(f"dimension must be >= 1, got {dim}")
        rng = np.random.default_rng() if rng is None else rng
        data = rng.random(dim) + 1j * rng.random(dim)
        return cls(data / np.linalg.norm(data))

    @classmethod
    def from_qobj(cls, ket: Qobj) -> "PureState":
        if not ket.isket:
            raise InvalidParameterError(f"expected a ket, got Qobj of type '{ket.type}'")
        return cls(ket.full().ravel())

    # === ACCESSORS ===
    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the amplitudes."""
        return self._data

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def to_qobj(self) -> Qobj:
        return Qobj(self._data.reshape(-1, 1))

    def to_density_matrix(self) -> "DensityMatrix":
        """|ψ><ψ| (valid by construction, so built unchecked)."""
        return DensityMatrix._unchecked(np.outer(self._data, self._data.conj()))

    def __len__(self) -> int:
        return self.dimension

    def __repr__(self) -> str:
        return f"PureState(dimension={self.dimension}, data={np.array2string(self._data, precision=4)})"


class DensityMatrix:
    """Hermitian, unit-trace density operator ρ."""

    __slots__ = ("_data",)

    def __init__(self, data):
        data = np.array(data, dtype=COMPLEX_DTYPE)
        if data.ndim != 2:
            raise InvalidParameterError(f"Density matrix must be 2D, got ndim={data.ndim}")
        if data.shape[0] != data.shape[1]:
            raise DimensionMismatchError(data.shape[0], data.shape[1])

        if not is_hermitian(data, HERMITIAN_TOLERANCE):
            raise InvalidParameterError("Density matrix must be Hermitian")

        tr = complex(np.trace(data))
        if abs(tr.real - 1.0) > TRACE_TOLERANCE or abs(tr.imag) > TRACE_TOLERANCE:
            raise InvalidParameterError(f"Density matrix must have trace 1, got {tr}")

        self._data = _frozen(data)

    @classmethod
    def _unchecked(cls, data: np.ndarray) -> "DensityMatrix":
        """Wrap ``data`` without validation (integrator stages only)."""
        rho = cls.__new__(cls)
        rho._data = _frozen(np.asarray(data, dtype=COMPLEX_DTYPE))
        return rho

    @classmethod
    def maximally_mixed(cls, dim: int) -> "DensityMatrix":
        """1/dim * identity"""
        if dim < 1:
            raise InvalidParameterError(f"dimension must be >= 1, got {dim}")
        return cls._unchecked(np.eye(dim, dtype=COMPLEX_DTYPE) / dim)

    @classmethod
    def from_pure(cls, state: PureState) -> "DensityMatrix":
        return state.to_density_matrix()

    @classmethod
    def from_qobj(cls, operator: Qobj) -> "DensityMatrix":
        if operator.isket:
            operator = operator.proj()
        return cls(operator.full())

    # === ACCESSORS ===
    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the matrix elements."""
        return self._data

    def trace(self) -> complex:
        return complex(np.trace(self._data))

    def is_hermitian(self, tol: float = HERMITIAN_TOLERANCE) -> bool:
        return is_hermitian(self._data, tol)

    def purity(self) -> float:
        """Tr(ρ²); 1 for pure states, 1/dim for the maximally mixed state."""
        return float(np.trace(self._data @ self._data).real)

    def populations(self) -> np.ndarray:
        """Diagonal elements ρ_nn (real part)."""
        return np.diag(self._data).real.copy()

    def von_neumann_entropy(self) -> float:
        raise NotImplementedFeatureError("von_neumann_entropy")

    def to_qobj(self) -> Qobj:
        return Qobj(self._data)

    def __repr__(self) -> str:
        return f"DensityMatrix(dimension={self.dimension}, trace={self.trace():.6g})"


__all__ = ["PureState", "DensityMatrix"]
