"""
Execution of independent simulation runs.

Runs share no mutable state, so they are distributed over a process pool
bounded by ``max_concurrent``. Runners must be pickleable for parallel
execution (lambdas as callbacks are not).
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Sequence

from qevolve.config.models import SimulationConfig
from qevolve.exceptions import ConfigError
from qevolve.simulation.results import SimulationResults
from qevolve.simulation.runner import SimulationRunner
from qevolve.simulation.utils import get_max_workers
from project_config.logging_setup import get_logger

logger = get_logger(__name__)


def _run_single(runner: SimulationRunner) -> SimulationResults:
    # module level so the process pool can pickle it
    return runner.run()


class Scheduler:
    """Runs many ``SimulationRunner`` objects with bounded concurrency."""

    def __init__(self, max_concurrent: Optional[int] = None):
        if max_concurrent is None:
            max_concurrent = get_max_workers()
        if max_concurrent < 1:
            raise ConfigError(f"max_concurrent must be >= 1, got {max_concurrent}")
        self._max_concurrent = max_concurrent

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Scheduler":
        return cls(config.max_workers)

    @property
    def max_concurrent(self) -> int:
        return self._max_concurrent

    def run_all(self, runners: Sequence[SimulationRunner]) -> List[SimulationResults]:
        """Execute all runs; results come back in input order, the first error propagates."""
        runners = list(runners)
        if self._max_concurrent == 1 or len(runners) <= 1:
            return [runner.run() for runner in runners]

        max_workers = min(self._max_concurrent, len(runners))
        logger.info("Running %d simulations on %d workers", len(runners), max_workers)

        results: List[Optional[SimulationResults]] = [None] * len(runners)
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(_run_single, runner): idx
                for idx, runner in enumerate(runners)
            }
            for future in as_completed(futures):
                idx = futures[future]
                try:
                    results[idx] = future.result()
                except Exception:
                    logger.error("Simulation %d failed", idx)
                    for pending in futures:
                        pending.cancel()
                    raise
        return results


__all__ = ["Scheduler"]
