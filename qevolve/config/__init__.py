"""Configuration package.

This package exposes:
  - Simulation defaults and their validation helper
  - The ``SimulationConfig`` dataclass
"""

from __future__ import annotations

from .default_simulation_params import (
    SUPPORTED_INTEGRATORS,
    TRACE_DRIFT_TOLERANCE,
    validate as validate_defaults,
)
from .models import SimulationConfig

__all__ = [
    "SUPPORTED_INTEGRATORS",
    "TRACE_DRIFT_TOLERANCE",
    "validate_defaults",
    "SimulationConfig",
]
