"""Open-system dynamics: Lindblad master equation.

    dρ/dt = -i [H(t), ρ] + Σ_k γ_k ( L_k ρ L_k† - ½ {L_k† L_k, ρ} )

The solver uses the same fixed-step RK4 scheme as the unitary integrator.
No trace correction is applied: trace preservation is a property of the
exact generator only, so callers should monitor ``DensityMatrix.trace()``
over long integrations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np
from qutip import destroy, num

from qevolve.constants import COMPLEX_DTYPE
from qevolve.core.hamiltonian import Hamiltonian
from qevolve.core.state import DensityMatrix
from qevolve.exceptions import DimensionMismatchError, InvalidParameterError


@dataclass(frozen=True, eq=False)
class LindbladOperator:
    """Jump operator L with a non-negative rate γ."""

    operator: np.ndarray
    rate: float

    def __post_init__(self):
        op = np.array(self.operator, dtype=COMPLEX_DTYPE)
        if op.ndim != 2 or op.shape[0] != op.shape[1]:
            raise DimensionMismatchError(op.shape[0], op.shape[-1])
        if not self.rate >= 0.0:
            raise InvalidParameterError("Lindblad rate must be non-negative")
        op.setflags(write=False)
        object.__setattr__(self, "operator", op)
        object.__setattr__(self, "rate", float(self.rate))

    @property
    def dimension(self) -> int:
        return self.operator.shape[0]

    @classmethod
    def annihilation(cls, dim: int, rate: float) -> "LindbladOperator":
        """a with <n-1|a|n> = sqrt(n) (energy relaxation)."""
        if rate < 0.0:
            raise InvalidParameterError("Lindblad rate must be non-negative")
        return cls(destroy(dim).full(), rate)

    @classmethod
    def dephasing(cls, dim: int, rate: float) -> "LindbladOperator":
        """n = Σ_n n |n><n| (pure dephasing)."""
        if rate < 0.0:
            raise InvalidParameterError("Lindblad rate must be non-negative")
        return cls(num(dim).full(), rate)


@dataclass(eq=False)
class LindbladSolver:
    """Lindblad generator and fixed-step RK4 propagation of ρ."""

    hamiltonian: Hamiltonian
    lindblad_ops: Sequence[LindbladOperator] = field(default_factory=tuple)

    def __post_init__(self):
        self.lindblad_ops = tuple(self.lindblad_ops)
        dim = self.hamiltonian.dimension

        for op in self.lindblad_ops:
            if op.operator.shape != (dim, dim):
                raise DimensionMismatchError(dim, op.operator.shape[0])

        # L†L does not depend on time or ρ
        self._ldag_l = tuple(op.operator.conj().T @ op.operator for op in self.lindblad_ops)
        self._h_buffer = np.zeros((dim, dim), dtype=COMPLEX_DTYPE)

    @property
    def dimension(self) -> int:
        return self.hamiltonian.dimension

    def derivative(self, rho: DensityMatrix, t: float) -> np.ndarray:
        """dρ/dt at time t. O(dim^3) per jump operator."""
        if rho.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, rho.dimension)

        h = self.hamiltonian.sample(t, self._h_buffer)
        rho_data = rho.data

        drho_dt = -1j * (h @ rho_data - rho_data @ h)

        for op, ldag_l in zip(self.lindblad_ops, self._ldag_l):
            l = op.operator
            l_rho_ldag = (l @ rho_data) @ l.conj().T
            anticommutator = ldag_l @ rho_data + rho_data @ ldag_l
            drho_dt += op.rate * (l_rho_ldag - 0.5 * anticommutator)

        return drho_dt

    def step(self, rho: DensityMatrix, t: float, dt: float) -> DensityMatrix:
        """Advance ρ from t to t + dt (RK4); intermediate stages are unchecked."""
        rho_data = rho.data

        k1 = self.derivative(rho, t)
        k2 = self.derivative(DensityMatrix._unchecked(rho_data + dt / 2.0 * k1), t + dt / 2.0)
        k3 = self.derivative(DensityMatrix._unchecked(rho_data + dt / 2.0 * k2), t + dt / 2.0)
        k4 = self.derivative(DensityMatrix._unchecked(rho_data + dt * k3), t + dt)

        new_data = rho_data + dt / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
        return DensityMatrix._unchecked(new_data)

    def evolve(
        self,
        rho: DensityMatrix,
        t0: float,
        num_steps: int,
        dt: float,
        callback: Optional[Callable[[int, float, DensityMatrix], None]] = None,
    ) -> DensityMatrix:
        """Apply ``num_steps`` steps starting at ``t0``; ``callback`` sees each pre-step state."""
        for step in range(num_steps):
            t = t0 + step * dt
            if callback is not None:
                callback(step, t, rho)
            rho = self.step(rho, t, dt)
        return rho


__all__ = ["LindbladOperator", "LindbladSolver"]
