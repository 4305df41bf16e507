"""Simulation orchestration: builder, runner, results and scheduling."""

from .results import SimulationResults
from .runner import SimulationRunner
from .builder import SimulationBuilder
from .scheduler import Scheduler
from .utils import get_max_workers

__all__ = [
    "SimulationResults",
    "SimulationRunner",
    "SimulationBuilder",
    "Scheduler",
    "get_max_workers",
]
