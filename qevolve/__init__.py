"""
qevolve - time evolution of finite-dimensional quantum systems

A small Python package for propagating quantum states with fixed-step
integrators. This package provides tools for:

- Hamiltonians (time-independent, composite, driven two-level system,
  parametrically driven cavity, coupled-cavity chains)
- Pure states and density matrices with validated invariants
- Unitary evolution (Schrödinger equation, RK4)
- Open-system evolution (Lindblad master equation, RK4)
- Expectation values of observables collected as time series

Main subpackages:
- core: Hamiltonians, states, integrators, Lindblad solver, observables
- simulation: SimulationBuilder / SimulationRunner / SimulationResults / Scheduler
- config: Simulation defaults and the SimulationConfig dataclass
- utils: Linear-algebra helpers
"""

__version__ = "0.1.0"  # Keep in sync with setup.py
__author__ = "Leopold Bodamer"
__email__ = ""


# LAZY IMPORTS (keep `import qevolve` cheap and free of import cycles)

_CORE_EXPORTS = {
    "Hamiltonian",
    "TimeIndependentHamiltonian",
    "CompositeHamiltonian",
    "DrivenTLS",
    "DrivenCavity",
    "CoupledCavities",
    "PureState",
    "DensityMatrix",
    "IntegratorType",
    "Integrator",
    "RK4Integrator",
    "create_integrator",
    "LindbladOperator",
    "LindbladSolver",
    "Observable",
    "MatrixObservable",
    "NumberOperator",
    "PopulationOperator",
    "CoherenceOperator",
    "ExpectationValue",
    "FloquetSpectrum",
    "FloquetHamiltonian",
}

_SIMULATION_EXPORTS = {
    "SimulationBuilder",
    "SimulationRunner",
    "SimulationResults",
    "Scheduler",
}


def __getattr__(name):  # PEP 562 lazy attribute loading
    if name in _CORE_EXPORTS:
        from . import core as _core

        return getattr(_core, name)

    if name in _SIMULATION_EXPORTS:
        from . import simulation as _sim

        return getattr(_sim, name)

    if name == "SimulationConfig":
        from .config import SimulationConfig

        return SimulationConfig

    raise AttributeError(f"module 'qevolve' has no attribute '{name}'")


from .exceptions import (  # noqa: E402  (dependency-free, safe to import eagerly)
    QevolveError,
    ConfigError,
    HamiltonianError,
    DimensionMismatchError,
    InvalidParameterError,
    NotImplementedFeatureError,
)


# PUBLIC API - MOST COMMONLY USED

__all__ = sorted(_CORE_EXPORTS | _SIMULATION_EXPORTS) + [
    "SimulationConfig",
    # Errors
    "QevolveError",
    "ConfigError",
    "HamiltonianError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "NotImplementedFeatureError",
]
