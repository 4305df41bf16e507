"""Simulation results storage."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np

from qevolve.core.observables import ExpectationValue
from qevolve.core.state import DensityMatrix, PureState
from qevolve.exceptions import NotImplementedFeatureError


class SimulationResults:
    """Named, chronologically ordered expectation-value time series.

    Attributes
    ----------
    final_state : PureState | DensityMatrix | None
        State after the last completed step.
    partial : bool
        True if the run was stopped early by its callback.
    trace_drift : float | None
        max_t |Tr ρ(t) - 1| for open-system runs, None for unitary runs.
    """

    def __init__(self):
        self._observables: Dict[str, List[ExpectationValue]] = {}
        self.final_state: Optional[Union[PureState, DensityMatrix]] = None
        self.partial: bool = False
        self.trace_drift: Optional[float] = None

    def add_observable(self, name: str, time: float, value: complex) -> None:
        """Append one sample to the series ``name`` (created on first use)."""
        self._observables.setdefault(name, []).append(ExpectationValue(time, complex(value)))

    def get_observable(self, name: str) -> Optional[List[ExpectationValue]]:
        return self._observables.get(name)

    def observable_names(self) -> List[str]:
        """Names in registration order."""
        return list(self._observables)

    def num_samples(self, name: str) -> int:
        return len(self._observables.get(name, ()))

    def sample_counts(self) -> Dict[str, int]:
        return {name: len(data) for name, data in self._observables.items()}

    def times(self, name: str) -> np.ndarray:
        return np.array([s.time for s in self._series(name)], dtype=float)

    def values(self, name: str) -> np.ndarray:
        return np.array([s.value for s in self._series(name)], dtype=complex)

    def _series(self, name: str) -> List[ExpectationValue]:
        try:
            return self._observables[name]
        except KeyError:
            raise KeyError(
                f"No observable named '{name}'. Available: {self.observable_names()}"
            ) from None

    def __contains__(self, name: str) -> bool:
        return name in self._observables

    def __len__(self) -> int:
        return len(self._observables)

    def save(self, path: Union[str, Path]) -> None:
        raise NotImplementedFeatureError("SimulationResults.save")

    def summary(self) -> str:
        lines = ["Simulation Results:"]
        if self.partial:
            lines.append("  (partial: run stopped before the last step)")
        lines.append(f"  Observables: {self.observable_names()}")
        for name, data in self._observables.items():
            lines.append(f"  {name}: {len(data)} data points")
        if self.trace_drift is not None:
            lines.append(f"  Max trace drift: {self.trace_drift:.3e}")
        return "\n".join(lines)

    def print_summary(self) -> None:
        print(self.summary())

    def __str__(self) -> str:
        return self.summary()


__all__ = ["SimulationResults"]
