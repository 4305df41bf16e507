"""
Simulation runner.

Drives the fixed-step loop: at every step the registered observables are
sampled on the pre-step state, then the state is advanced by one step of
size ``timestep``. Closed systems use a Schrödinger integrator; passing
Lindblad operators switches to density-matrix evolution.
"""

# =============================
# IMPORTS
# =============================
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence, Tuple, Union

### Project-specific imports
from qevolve.config.default_simulation_params import (
    PROGRESS_EVERY,
    TRACE_DRIFT_TOLERANCE,
)
from qevolve.core.hamiltonian import Hamiltonian
from qevolve.core.integrator import IntegratorType, create_integrator
from qevolve.core.lindblad import LindbladOperator, LindbladSolver
from qevolve.core.observables import Observable
from qevolve.core.state import DensityMatrix, PureState
from qevolve.exceptions import ConfigError, DimensionMismatchError
from qevolve.simulation.results import SimulationResults
from project_config.logging_setup import get_logger

logger = get_logger(__name__)

State = Union[PureState, DensityMatrix]
StepCallback = Callable[[int, float, State], Optional[bool]]


# =============================
# RUNNER
# =============================
class SimulationRunner:
    """Single simulation run; owns its Hamiltonian, state and results.

    Parameters
    ----------
    hamiltonian : Hamiltonian
        Validated (Hermitian at t=0) on construction.
    initial_state : PureState
        Start state; converted to |ψ><ψ| for open-system runs.
    duration, timestep : float
        Both > 0; the loop performs ceil(duration / timestep) steps.
    integrator_type : IntegratorType | str
        Unitary scheme (ignored when ``lindblad_ops`` are given).
    observables : sequence of (name, Observable)
    lindblad_ops : sequence of LindbladOperator
        Non-empty -> Lindblad master equation instead of Schrödinger equation.
    callback : callable(step, t, state), optional
        Called before each step with the pre-step state. Returning ``False``
        stops the run; the results are then flagged ``partial``.
    """

    def __init__(
        self,
        hamiltonian: Hamiltonian,
        initial_state: PureState,
        duration: float,
        timestep: float,
        integrator_type: Union[IntegratorType, str] = IntegratorType.RK4,
        observables: Sequence[Tuple[str, Observable]] = (),
        lindblad_ops: Sequence[LindbladOperator] = (),
        callback: Optional[StepCallback] = None,
    ):
        if not duration > 0:
            raise ConfigError(f"duration must be > 0, got {duration}")
        if not timestep > 0:
            raise ConfigError(f"timestep must be > 0, got {timestep}")

        hamiltonian.validate()
        dim = hamiltonian.dimension
        if initial_state.dimension != dim:
            raise DimensionMismatchError(dim, initial_state.dimension)

        observables = list(observables)
        for _, observable in observables:
            if observable.dimension != dim:
                raise DimensionMismatchError(dim, observable.dimension)

        self.hamiltonian = hamiltonian
        self.initial_state = initial_state
        self.duration = float(duration)
        self.timestep = float(timestep)
        self.observables: List[Tuple[str, Observable]] = observables
        self.callback = callback

        # checked even when the Lindblad solver does the propagation
        self.integrator = create_integrator(integrator_type)

        self.lindblad_ops = tuple(lindblad_ops)
        self.solver: Optional[LindbladSolver] = None
        if self.lindblad_ops:
            self.solver = LindbladSolver(hamiltonian, self.lindblad_ops)
            logger.info(
                "Open system with %d jump operator(s): propagating with Lindblad RK4",
                len(self.lindblad_ops),
            )

    # --- properties ----------------------------------------------------------------
    @property
    def num_steps(self) -> int:
        return math.ceil(self.duration / self.timestep)

    @property
    def is_open_system(self) -> bool:
        return self.solver is not None

    # --- execution -----------------------------------------------------------------
    def _advance(self, state: State, t: float) -> State:
        if self.solver is not None:
            return self.solver.step(state, t, self.timestep)
        return self.integrator.step(self.hamiltonian, state, t, self.timestep)

    def run(self) -> SimulationResults:
        num_steps = self.num_steps
        logger.info(
            "Starting simulation: %d steps of dt=%g (%s)",
            num_steps,
            self.timestep,
            "Lindblad" if self.is_open_system else self.integrator.integrator_type.value,
        )

        state: State = self.initial_state
        if self.is_open_system:
            state = self.initial_state.to_density_matrix()

        results = SimulationResults()
        max_drift = 0.0

        for step in range(num_steps):
            t = step * self.timestep

            if self.callback is not None and self.callback(step, t, state) is False:
                logger.info("Simulation stopped by callback at step %d/%d", step, num_steps)
                results.partial = True
                break

            for name, observable in self.observables:
                results.add_observable(name, t, observable.expectation(state))

            state = self._advance(state, t)

            if self.is_open_system:
                max_drift = max(max_drift, abs(state.trace() - 1.0))

            if step % PROGRESS_EVERY == 0:
                logger.debug("Step %d/%d", step, num_steps)

        results.final_state = state
        if self.is_open_system:
            results.trace_drift = max_drift
            if max_drift > TRACE_DRIFT_TOLERANCE:
                logger.warning(
                    "Trace drift %.3e exceeds %.1e; reduce the timestep for long runs",
                    max_drift,
                    TRACE_DRIFT_TOLERANCE,
                )

        logger.info("Simulation complete")
        return results

    def summary(self) -> str:
        scheme = "Lindblad RK4" if self.is_open_system else self.integrator.integrator_type.value
        return (
            "SimulationRunner Summary\n"
            f"Hamiltonian        : {type(self.hamiltonian).__name__} (dim={self.hamiltonian.dimension})\n"
            f"Duration           : {self.duration}\n"
            f"Time Step          : {self.timestep}\n"
            f"Steps              : {self.num_steps}\n"
            f"Scheme             : {scheme}\n"
            f"Jump operators     : {len(self.lindblad_ops)}\n"
            f"Observables        : {[name for name, _ in self.observables]}\n"
        )

    def __str__(self) -> str:
        return self.summary()


__all__ = ["SimulationRunner"]
