"""Hamiltonian abstraction.

A Hamiltonian is an operator-valued function of time that is sampled on
demand into a dense ``dim x dim`` complex matrix. Instances are built once
and never mutated afterwards; they may be sampled at arbitrary times in any
order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

import numpy as np
from qutip import Qobj

from qevolve.constants import COMPLEX_DTYPE, HERMITIAN_TOLERANCE
from qevolve.exceptions import DimensionMismatchError, HamiltonianError
from qevolve.utils.linalg import is_hermitian


class Hamiltonian(ABC):
    """Time-dependent Hamiltonian H(t).

    Subclasses implement ``dimension`` and ``fill``; everything else has a
    sensible default.
    """

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Dimension of the Hilbert space."""

    @abstractmethod
    def fill(self, t: float, out: np.ndarray) -> None:
        """Write H(t) into the caller-owned buffer ``out`` (every element)."""

    def sample(self, t: float, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Return H(t), reusing ``out`` when given."""
        if out is None:
            out = np.zeros((self.dimension, self.dimension), dtype=COMPLEX_DTYPE)
        self.fill(t, out)
        return out

    def is_time_independent(self) -> bool:
        return False

    def period(self) -> Optional[float]:
        """Exact period of H(t), or None if it is not (known to be) periodic."""
        return None

    def validate(self) -> None:
        """Raise ``HamiltonianError`` if H(0) is not Hermitian within 1e-10."""
        h = self.sample(0.0)
        if not is_hermitian(h, HERMITIAN_TOLERANCE):
            raise HamiltonianError("Hamiltonian is not Hermitian")

    def to_qobj(self, t: float = 0.0) -> Qobj:
        """H(t) as a QuTiP operator."""
        return Qobj(self.sample(t))


class TimeIndependentHamiltonian(Hamiltonian):
    """Fixed matrix; ``t`` is ignored."""

    def __init__(self, matrix: np.ndarray):
        matrix = np.array(matrix, dtype=COMPLEX_DTYPE)
        if matrix.ndim != 2:
            raise HamiltonianError(f"expected a 2D matrix, got ndim={matrix.ndim}")
        if matrix.shape[0] != matrix.shape[1]:
            raise DimensionMismatchError(matrix.shape[0], matrix.shape[1])
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def dimension(self) -> int:
        return self._matrix.shape[0]

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def fill(self, t: float, out: np.ndarray) -> None:
        out[...] = self._matrix

    def is_time_independent(self) -> bool:
        return True

    @classmethod
    def from_qobj(cls, operator: Qobj) -> "TimeIndependentHamiltonian":
        return cls(operator.full())


class CompositeHamiltonian(Hamiltonian):
    """Sum of sub-Hamiltonians sharing one dimension.

    Sampling costs O(terms * dim^2) per call.
    """

    def __init__(self, terms: Sequence[Hamiltonian]):
        terms = list(terms)
        if not terms:
            raise HamiltonianError("Composite Hamiltonian must have at least one term")

        dim = terms[0].dimension
        for term in terms:
            if term.dimension != dim:
                raise DimensionMismatchError(dim, term.dimension)

        self._terms = tuple(terms)
        self._dim = dim

    @property
    def dimension(self) -> int:
        return self._dim

    @property
    def terms(self) -> tuple:
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Hamiltonian]:
        return iter(self._terms)

    def fill(self, t: float, out: np.ndarray) -> None:
        out.fill(0.0)
        temp = np.empty((self._dim, self._dim), dtype=COMPLEX_DTYPE)
        for term in self._terms:
            term.fill(t, temp)
            out += temp

    def is_time_independent(self) -> bool:
        return all(term.is_time_independent() for term in self._terms)

    def period(self) -> Optional[float]:
        """Common period of the time-dependent terms (None if they disagree)."""
        periods = [
            term.period() for term in self._terms if not term.is_time_independent()
        ]
        if not periods or any(p is None for p in periods):
            return None
        first = periods[0]
        if all(np.isclose(p, first, rtol=1e-12, atol=0.0) for p in periods):
            return first
        return None


__all__ = ["Hamiltonian", "TimeIndependentHamiltonian", "CompositeHamiltonian"]
