"""Concrete physical model Hamiltonians."""

from .driven_tls import DrivenTLS
from .cavity import DrivenCavity
from .coupled_cavities import CoupledCavities

__all__ = [
    "DrivenTLS",
    "DrivenCavity",
    "CoupledCavities",
]
