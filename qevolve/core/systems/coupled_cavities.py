"""Coupled cavity arrays (SSH model and generalizations).

Single-excitation subspace: basis index 0 is the vacuum, index i (1..N) is
one photon in cavity i.

    H = Σ_i ωc |i><i| + Σ_i J_i (|i><i+1| + |i+1><i|)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from qevolve.core.hamiltonian import Hamiltonian
from qevolve.exceptions import InvalidParameterError


class CoupledCavities(Hamiltonian):
    """Tight-binding chain of ``num_cavities`` resonators."""

    def __init__(self, omega_c: float, couplings: Sequence[float], num_cavities: int):
        if num_cavities < 1:
            raise InvalidParameterError(
                f"need at least one cavity, got num_cavities={num_cavities}"
            )
        couplings = tuple(float(j) for j in couplings)
        if len(couplings) != num_cavities - 1:
            raise InvalidParameterError(
                f"expected {num_cavities - 1} couplings for {num_cavities} cavities, "
                f"got {len(couplings)}"
            )
        self.omega_c = float(omega_c)
        self.couplings = couplings
        self.num_cavities = num_cavities

    @classmethod
    def ssh(cls, omega_c: float, j1: float, j2: float, num_cavities: int) -> "CoupledCavities":
        """Dimerized chain: j1 on even bonds, j2 on odd bonds."""
        couplings = [j1 if i % 2 == 0 else j2 for i in range(max(num_cavities - 1, 0))]
        return cls(omega_c, couplings, num_cavities)

    @classmethod
    def uniform(cls, omega_c: float, j: float, num_cavities: int) -> "CoupledCavities":
        return cls(omega_c, [j] * max(num_cavities - 1, 0), num_cavities)

    @property
    def dimension(self) -> int:
        return self.num_cavities + 1

    def fill(self, t: float, out: np.ndarray) -> None:
        out.fill(0.0)

        sites = np.arange(1, self.num_cavities + 1)
        out[sites, sites] = self.omega_c

        for idx, j in enumerate(self.couplings):
            i = idx + 1
            out[i, i + 1] = j
            out[i + 1, i] = j

    def is_time_independent(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"CoupledCavities(omega_c={self.omega_c}, couplings={list(self.couplings)}, "
            f"num_cavities={self.num_cavities})"
        )
