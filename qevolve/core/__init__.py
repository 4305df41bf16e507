"""
Core module for qevolve package.

This module provides the fundamental building blocks for time evolution:
- Hamiltonian abstraction and concrete model systems
- Pure states and density matrices
- Unitary (Schrödinger) integrators
- Lindblad master-equation solver
- Observables and expectation values
"""

# =============================
# HAMILTONIANS
# =============================
from .hamiltonian import (
    Hamiltonian,
    TimeIndependentHamiltonian,
    CompositeHamiltonian,
)
from .systems import DrivenTLS, DrivenCavity, CoupledCavities

# =============================
# STATES
# =============================
from .state import PureState, DensityMatrix

# =============================
# TIME EVOLUTION
# =============================
from .integrator import IntegratorType, Integrator, RK4Integrator, create_integrator
from .lindblad import LindbladOperator, LindbladSolver

# =============================
# OBSERVABLES
# =============================
from .observables import (
    ExpectationValue,
    Observable,
    MatrixObservable,
    NumberOperator,
    PopulationOperator,
    CoherenceOperator,
)

# =============================
# FLOQUET (interface only)
# =============================
from .floquet import FloquetSpectrum, FloquetHamiltonian

# =============================
# PUBLIC API
# =============================
__all__ = [
    # Hamiltonians
    "Hamiltonian",
    "TimeIndependentHamiltonian",
    "CompositeHamiltonian",
    "DrivenTLS",
    "DrivenCavity",
    "CoupledCavities",
    # States
    "PureState",
    "DensityMatrix",
    # Integrators
    "IntegratorType",
    "Integrator",
    "RK4Integrator",
    "create_integrator",
    # Open systems
    "LindbladOperator",
    "LindbladSolver",
    # Observables
    "ExpectationValue",
    "Observable",
    "MatrixObservable",
    "NumberOperator",
    "PopulationOperator",
    "CoherenceOperator",
    # Floquet
    "FloquetSpectrum",
    "FloquetHamiltonian",
]
