"""Periodically driven two-level system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from qevolve.constants import TWOPI
from qevolve.core.hamiltonian import Hamiltonian


@dataclass(frozen=True)
class DrivenTLS(Hamiltonian):
    """Two-level system with a cosine drive on the off-diagonal.

    H(t) = [[ ω0/2,              Ω cos(ωd t + φ) ],
            [ Ω cos(ωd t + φ),   -ω0/2           ]]

    Parameters
    ----------
    omega_0 : float
        Transition frequency ω0.
    omega_d : float
        Drive frequency ωd.
    rabi_freq : float
        Rabi frequency Ω (drive amplitude).
    phase : float
        Drive phase φ.
    """

    omega_0: float
    omega_d: float
    rabi_freq: float
    phase: float = 0.0

    @classmethod
    def with_phase(
        cls, omega_0: float, omega_d: float, rabi_freq: float, phase: float
    ) -> "DrivenTLS":
        return cls(omega_0, omega_d, rabi_freq, phase)

    @property
    def dimension(self) -> int:
        return 2

    def detuning(self) -> float:
        """ω0 - ωd"""
        return self.omega_0 - self.omega_d

    def fill(self, t: float, out: np.ndarray) -> None:
        omega_eff = self.rabi_freq * np.cos(self.omega_d * t + self.phase)

        out[0, 0] = self.omega_0 / 2.0
        out[1, 1] = -self.omega_0 / 2.0
        out[0, 1] = omega_eff
        out[1, 0] = omega_eff

    def is_time_independent(self) -> bool:
        return self.omega_d == 0.0

    def period(self) -> Optional[float]:
        """2π/ωd, or None for a static (ωd = 0) drive."""
        if self.omega_d == 0.0:
            return None
        return TWOPI / self.omega_d
