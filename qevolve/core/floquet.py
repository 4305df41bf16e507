"""Floquet analysis for time-periodic Hamiltonians.

Only the interface exists so far; the spectral computations raise
``NotImplementedFeatureError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from qevolve.core.hamiltonian import Hamiltonian
from qevolve.exceptions import InvalidParameterError, NotImplementedFeatureError


@dataclass(eq=False)
class FloquetSpectrum:
    """Quasi-energies (defined modulo 2π/period) and Floquet modes."""

    quasi_energies: List[float]
    modes: np.ndarray
    period: float

    @classmethod
    def compute(
        cls, hamiltonian: Hamiltonian, period: float, num_steps: int
    ) -> "FloquetSpectrum":
        """Diagonalize the one-period propagator of ``hamiltonian``."""
        if not hamiltonian.is_time_independent() and hamiltonian.period() is None:
            raise InvalidParameterError(
                "Hamiltonian must be time-periodic for Floquet analysis"
            )
        raise NotImplementedFeatureError("FloquetSpectrum.compute")

    def num_levels(self) -> int:
        return len(self.quasi_energies)

    def level_spacing(self, n: int) -> Optional[float]:
        if n + 1 < len(self.quasi_energies):
            return self.quasi_energies[n + 1] - self.quasi_energies[n]
        return None


class FloquetHamiltonian:
    """Floquet Hamiltonian in the extended (Sambe) space."""

    def __init__(self, hamiltonian: Hamiltonian, omega: float, n_fourier: int):
        self.hamiltonian = hamiltonian
        self.omega = omega
        self.n_fourier = n_fourier

    @property
    def extended_dimension(self) -> int:
        """dim * (2 n_fourier + 1)"""
        return self.hamiltonian.dimension * (2 * self.n_fourier + 1)

    def compute_extended(self) -> np.ndarray:
        raise NotImplementedFeatureError("FloquetHamiltonian.compute_extended")


__all__ = ["FloquetSpectrum", "FloquetHamiltonian"]
