"""Fixed-step integrators for the Schrödinger equation dψ/dt = -i H(t) ψ."""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

import numpy as np

from qevolve.core.hamiltonian import Hamiltonian
from qevolve.core.state import PureState
from qevolve.exceptions import ConfigError, DimensionMismatchError
from project_config.logging_setup import get_logger

logger = get_logger(__name__)


class IntegratorType(str, Enum):
    """Selectable integration schemes."""

    RK4 = "rk4"
    MAGNUS2 = "magnus2"
    MAGNUS4 = "magnus4"


class Integrator(ABC):
    """One fixed step of unitary evolution."""

    @abstractmethod
    def step(
        self, hamiltonian: Hamiltonian, state: PureState, t: float, dt: float
    ) -> PureState:
        """Advance ``state`` from t to t + dt and return the new state."""

    @property
    @abstractmethod
    def integrator_type(self) -> IntegratorType:
        ...


def _apply_hamiltonian(h: np.ndarray, state: PureState) -> np.ndarray:
    """-i H |ψ>"""
    return -1j * (h @ state.data)


class RK4Integrator(Integrator):
    """Classical 4th-order Runge-Kutta with explicit renormalization.

    RK4 is not unitary: every step leaks O(dt^5) norm. The update is
    therefore divided by its norm before it is accepted as a state, instead
    of moving to a higher-order or geometric scheme.
    """

    def step(
        self, hamiltonian: Hamiltonian, state: PureState, t: float, dt: float
    ) -> PureState:
        dim = hamiltonian.dimension
        if state.dimension != dim:
            raise DimensionMismatchError(dim, state.dimension)

        psi = state.data
        h = np.empty((dim, dim), dtype=psi.dtype)

        # k1 = -i H(t) |ψ>
        hamiltonian.fill(t, h)
        k1 = _apply_hamiltonian(h, state)

        # k2 = -i H(t + dt/2) |ψ + dt/2 k1>
        hamiltonian.fill(t + dt / 2.0, h)
        k2 = _apply_hamiltonian(h, PureState._unchecked(psi + dt / 2.0 * k1))

        # k3 = -i H(t + dt/2) |ψ + dt/2 k2>   (same H as k2)
        k3 = _apply_hamiltonian(h, PureState._unchecked(psi + dt / 2.0 * k2))

        # k4 = -i H(t + dt) |ψ + dt k3>
        hamiltonian.fill(t + dt, h)
        k4 = _apply_hamiltonian(h, PureState._unchecked(psi + dt * k3))

        new_data = psi + dt / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)

        # Renormalize
        normalized = new_data / np.linalg.norm(new_data)

        return PureState(normalized)

    @property
    def integrator_type(self) -> IntegratorType:
        return IntegratorType.RK4

    def __repr__(self) -> str:
        return "RK4Integrator()"


def create_integrator(integrator_type: Union[IntegratorType, str]) -> Integrator:
    """Create an integrator of the requested kind.

    The Magnus schemes are accepted but not implemented yet: they are
    replaced by ``RK4Integrator`` and the substitution is reported as a
    ``UserWarning`` and a WARNING log record.
    """
    try:
        kind = IntegratorType(integrator_type)
    except ValueError:
        raise ConfigError(
            f"Unknown integrator '{integrator_type}'. "
            f"Supported: {[k.value for k in IntegratorType]}"
        ) from None

    if kind is IntegratorType.RK4:
        return RK4Integrator()

    # TODO: implement the Magnus expansions (exponential of the averaged/commutator-corrected H)
    message = (
        f"Integrator '{kind.value}' is not implemented; "
        f"falling back to '{IntegratorType.RK4.value}' (4th-order Runge-Kutta)."
    )
    logger.warning(message)
    warnings.warn(message, category=UserWarning, stacklevel=2)
    return RK4Integrator()


__all__ = ["IntegratorType", "Integrator", "RK4Integrator", "create_integrator"]
