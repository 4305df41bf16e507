"""Fluent assembly of a ``SimulationRunner``."""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from qevolve.config.models import SimulationConfig
from qevolve.core.hamiltonian import Hamiltonian
from qevolve.core.integrator import IntegratorType
from qevolve.core.lindblad import LindbladOperator
from qevolve.core.observables import Observable
from qevolve.core.state import PureState
from qevolve.exceptions import ConfigError
from qevolve.simulation.runner import SimulationRunner, StepCallback


class SimulationBuilder:
    """Collects the pieces of a run; ``build()`` checks that nothing is missing.

    Example
    -------
    >>> runner = (
    ...     SimulationBuilder()
    ...     .hamiltonian(DrivenTLS(5.0, 5.0, 0.5))
    ...     .initial_state(PureState.ground_state(2))
    ...     .duration(10.0)
    ...     .timestep(0.1)
    ...     .observable("P0", PopulationOperator(2, 0))
    ...     .build()
    ... )
    """

    def __init__(self):
        self._hamiltonian: Optional[Hamiltonian] = None
        self._initial_state: Optional[PureState] = None
        self._duration: Optional[float] = None
        self._timestep: Optional[float] = None
        self._integrator_type: Union[IntegratorType, str] = IntegratorType.RK4
        self._observables: List[Tuple[str, Observable]] = []
        self._lindblad_ops: List[LindbladOperator] = []
        self._callback: Optional[StepCallback] = None

    def hamiltonian(self, hamiltonian: Hamiltonian) -> "SimulationBuilder":
        self._hamiltonian = hamiltonian
        return self

    def initial_state(self, state: PureState) -> "SimulationBuilder":
        self._initial_state = state
        return self

    def duration(self, duration: float) -> "SimulationBuilder":
        self._duration = duration
        return self

    def timestep(self, timestep: float) -> "SimulationBuilder":
        self._timestep = timestep
        return self

    def integrator(self, integrator_type: Union[IntegratorType, str]) -> "SimulationBuilder":
        self._integrator_type = integrator_type
        return self

    def observable(self, name: str, observable: Observable) -> "SimulationBuilder":
        self._observables.append((name, observable))
        return self

    def lindblad_operator(self, operator: LindbladOperator) -> "SimulationBuilder":
        self._lindblad_ops.append(operator)
        return self

    def callback(self, callback: StepCallback) -> "SimulationBuilder":
        self._callback = callback
        return self

    def from_config(self, config: SimulationConfig) -> "SimulationBuilder":
        """Take duration, timestep and integrator from a ``SimulationConfig``."""
        self._duration = config.duration
        self._timestep = config.timestep
        self._integrator_type = config.integrator
        return self

    def build(self) -> SimulationRunner:
        if self._hamiltonian is None:
            raise ConfigError("Hamiltonian not specified")
        if self._initial_state is None:
            raise ConfigError("Initial state not specified")
        if self._duration is None:
            raise ConfigError("Duration not specified")
        if self._timestep is None:
            raise ConfigError("Timestep not specified")

        return SimulationRunner(
            self._hamiltonian,
            self._initial_state,
            self._duration,
            self._timestep,
            integrator_type=self._integrator_type,
            observables=list(self._observables),
            lindblad_ops=list(self._lindblad_ops),
            callback=self._callback,
        )


__all__ = ["SimulationBuilder"]
