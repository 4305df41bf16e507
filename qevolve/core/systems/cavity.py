"""Parametrically driven cavity mode (truncated Fock space)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from qevolve.constants import TWOPI
from qevolve.core.hamiltonian import Hamiltonian
from qevolve.exceptions import InvalidParameterError


@dataclass(frozen=True)
class DrivenCavity(Hamiltonian):
    """Cavity ladder with a two-photon parametric drive.

    H(t) = Σ_n ωc n |n><n|
         + g cos(ωp t) Σ_n sqrt((n+1)(n+2)) (|n+2><n| + |n><n+2|)
    """

    omega_c: float
    omega_p: float
    g: float
    dim: int

    def __post_init__(self):
        if self.dim < 1:
            raise InvalidParameterError(f"cavity dimension must be >= 1, got {self.dim}")

    @property
    def dimension(self) -> int:
        return self.dim

    def fill(self, t: float, out: np.ndarray) -> None:
        out.fill(0.0)

        drive = self.g * np.cos(self.omega_p * t)

        n = np.arange(self.dim)
        out[n, n] = self.omega_c * n

        # n -> n+2 coupling; empty for dim <= 2
        m = np.arange(max(self.dim - 2, 0))
        amp = drive * np.sqrt((m + 1.0) * (m + 2.0))
        out[m + 2, m] += amp
        out[m, m + 2] += amp

    def is_time_independent(self) -> bool:
        return self.omega_p == 0.0

    def period(self) -> Optional[float]:
        if self.omega_p == 0.0:
            return None
        return TWOPI / self.omega_p
