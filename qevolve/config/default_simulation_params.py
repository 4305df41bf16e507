"""
Default simulation parameters for qevolve.

This module contains default values for simulation parameters used across
the project. Centralizing these constants makes them easier to maintain
and reduces code duplication.
"""

from qevolve.constants import (
    HERMITIAN_TOLERANCE,
    NORM_TOLERANCE,
    TRACE_TOLERANCE,
)
from qevolve.exceptions import ConfigError


# =============================
# fixed constants: don't change!
# =============================

# supported integrators (magnus* currently fall back to rk4 with a warning)
SUPPORTED_INTEGRATORS = ["rk4", "magnus2", "magnus4"]

# Validation thresholds for physics checks (re-exported from qevolve.constants)
NORM_TOLERANCE = NORM_TOLERANCE
HERMITIAN_TOLERANCE = HERMITIAN_TOLERANCE
TRACE_TOLERANCE = TRACE_TOLERANCE

# Open-system runs report (but never correct) trace drift above this value
TRACE_DRIFT_TOLERANCE = 1e-6


# =============================
# SIMULATION DEFAULTS
# =============================
DURATION = 10.0  # total evolution time (natural units)
TIMESTEP = 0.01  # fixed integration step
INTEGRATOR = "rk4"

# === PARALLEL EXECUTION ===
MAX_WORKERS = 1  # independent runs executed concurrently by the Scheduler

# === LOGGING ===
PROGRESS_EVERY = 100  # emit a DEBUG progress record every N steps


def validate(params: dict) -> None:
    """Validate a flat dict of simulation parameters.

    Recognised keys: ``duration``, ``timestep``, ``integrator``, ``max_workers``.
    Missing keys are skipped; present keys are checked.

    Raises
    ------
    ConfigError
        On the first invalid value.
    """
    duration = params.get("duration")
    if duration is not None and not duration > 0:
        raise ConfigError(f"duration must be > 0, got {duration}")

    timestep = params.get("timestep")
    if timestep is not None and not timestep > 0:
        raise ConfigError(f"timestep must be > 0, got {timestep}")

    integrator = params.get("integrator")
    if integrator is not None:
        name = getattr(integrator, "value", integrator)
        if name not in SUPPORTED_INTEGRATORS:
            raise ConfigError(
                f"integrator '{name}' not in {SUPPORTED_INTEGRATORS}"
            )

    max_workers = params.get("max_workers")
    if max_workers is not None and max_workers < 1:
        raise ConfigError(f"max_workers must be >= 1, got {max_workers}")


__all__ = [
    "SUPPORTED_INTEGRATORS",
    "NORM_TOLERANCE",
    "HERMITIAN_TOLERANCE",
    "TRACE_TOLERANCE",
    "TRACE_DRIFT_TOLERANCE",
    "DURATION",
    "TIMESTEP",
    "INTEGRATOR",
    "MAX_WORKERS",
    "PROGRESS_EVERY",
    "validate",
]
