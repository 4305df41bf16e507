"""Error taxonomy for qevolve.

Every failure raised by the package derives from ``QevolveError``. The
value-like errors also subclass ``ValueError`` and the unsupported-feature
error subclasses ``NotImplementedError`` so callers can keep catching the
builtin types.
"""

from __future__ import annotations


class QevolveError(Exception):
    """Base class of all qevolve errors."""


class ConfigError(QevolveError, ValueError):
    """Missing or invalid simulation assembly input."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class HamiltonianError(QevolveError, ValueError):
    """Semantic validation failure of a Hamiltonian."""

    def __init__(self, message: str):
        super().__init__(f"Hamiltonian error: {message}")


class DimensionMismatchError(QevolveError, ValueError):
    """Operator / state sizes are inconsistent."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dimension mismatch: expected {expected}, got {actual}")


class InvalidParameterError(QevolveError, ValueError):
    """Out-of-range scalar or an invalid quantum state."""

    def __init__(self, message: str):
        super().__init__(f"Invalid parameter: {message}")


class NotImplementedFeatureError(QevolveError, NotImplementedError):
    """Explicitly unsupported path; never silently approximated."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Not implemented: {feature}")


__all__ = [
    "QevolveError",
    "ConfigError",
    "HamiltonianError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "NotImplementedFeatureError",
]
