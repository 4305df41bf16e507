"""Structured configuration models.

Typed dataclass wrappers around the module-level constants in
``default_simulation_params`` (single source of truth for defaults).

Usage:
    from qevolve.config import SimulationConfig
    cfg = SimulationConfig(duration=5.0, timestep=0.01)
    builder = SimulationBuilder().from_config(cfg)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict

from .default_simulation_params import (
    DURATION,
    TIMESTEP,
    INTEGRATOR,
    MAX_WORKERS,
    validate as validate_defaults_fn,
)


@dataclass
class SimulationConfig:
    """Numerical parameters of a single run (validated on construction)."""

    duration: float = DURATION
    timestep: float = TIMESTEP
    integrator: str = INTEGRATOR  # "rk4" | "magnus2" | "magnus4"
    max_workers: int = MAX_WORKERS

    def __post_init__(self) -> None:
        # accept IntegratorType members as well as plain strings
        self.integrator = getattr(self.integrator, "value", self.integrator)
        self.validate()

    def validate(self) -> None:
        validate_defaults_fn(asdict(self))

    @property
    def num_steps(self) -> int:
        return math.ceil(self.duration / self.timestep)

    def summary(self) -> str:
        return (
            "SimulationConfig Summary:\n"
            "-------------------------------\n"
            f"Duration           : {self.duration}\n"
            f"Time Step          : {self.timestep}\n"
            f"Number of Steps    : {self.num_steps}\n"
            f"Integrator         : {self.integrator}\n"
            f"Max Workers        : {self.max_workers}\n"
            "-------------------------------\n"
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        return cls(**data)

    def __str__(self) -> str:
        return self.summary()


__all__ = ["SimulationConfig"]
