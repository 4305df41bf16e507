"""Observables and expectation values.

    pure:   <O> = Σ_ij conj(ψ_i) O_ij ψ_j
    mixed:  <O> = Σ_ij ρ_ij O_ji = Tr(O ρ)

The operator matrix is Hermitian by physical convention, but this is not
enforced (the coherence operator |i><j| is not Hermitian), so expectation
values are returned as complex numbers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

import numpy as np
from qutip import Qobj, num, projection

from qevolve.constants import COMPLEX_DTYPE
from qevolve.core.state import DensityMatrix, PureState
from qevolve.exceptions import DimensionMismatchError, InvalidParameterError


@dataclass(frozen=True)
class ExpectationValue:
    """One sample <O>(t)."""

    time: float
    value: complex


class Observable(ABC):
    """Operator O whose expectation value is tracked during a run."""

    @property
    @abstractmethod
    def matrix(self) -> np.ndarray:
        ...

    @property
    def dimension(self) -> int:
        return self.matrix.shape[0]

    def _check_dimension(self, dim: int) -> None:
        if dim != self.dimension:
            raise DimensionMismatchError(self.dimension, dim)

    def expectation_pure(self, state: PureState) -> complex:
        self._check_dimension(state.dimension)
        psi = state.data
        return complex(np.vdot(psi, self.matrix @ psi))

    def expectation_mixed(self, state: DensityMatrix) -> complex:
        self._check_dimension(state.dimension)
        # Σ_ij ρ_ij O_ji without forming the product
        return complex(np.sum(state.data * self.matrix.T))

    def expectation(self, state: Union[PureState, DensityMatrix]) -> complex:
        if isinstance(state, DensityMatrix):
            return self.expectation_mixed(state)
        return self.expectation_pure(state)

    def to_qobj(self) -> Qobj:
        return Qobj(self.matrix)


class _StoredMatrixObservable(Observable):
    """Observable backed by a fixed read-only matrix."""

    def __init__(self, matrix):
        matrix = np.array(matrix, dtype=COMPLEX_DTYPE)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise DimensionMismatchError(matrix.shape[0], matrix.shape[-1])
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix


class MatrixObservable(_StoredMatrixObservable):
    """Arbitrary user-supplied operator."""

    @classmethod
    def from_qobj(cls, operator: Qobj) -> "MatrixObservable":
        return cls(operator.full())


class NumberOperator(_StoredMatrixObservable):
    """n = Σ_n n |n><n|"""

    def __init__(self, dim: int):
        super().__init__(num(dim).full())


class PopulationOperator(_StoredMatrixObservable):
    """Projector |level><level|"""

    def __init__(self, dim: int, level: int):
        if not 0 <= level < dim:
            raise InvalidParameterError(f"Level {level} out of bounds for dimension {dim}")
        self.level = level
        super().__init__(projection(dim, level, level).full())


class CoherenceOperator(_StoredMatrixObservable):
    """|i><j|; its expectation value on ρ is the coherence ρ_ji."""

    def __init__(self, dim: int, i: int, j: int):
        if not (0 <= i < dim and 0 <= j < dim):
            raise InvalidParameterError(
                f"Indices ({i}, {j}) out of bounds for dimension {dim}"
            )
        self.i = i
        self.j = j
        super().__init__(projection(dim, i, j).full())


__all__ = [
    "ExpectationValue",
    "Observable",
    "MatrixObservable",
    "NumberOperator",
    "PopulationOperator",
    "CoherenceOperator",
]
