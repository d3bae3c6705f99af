"""Exception types raised by :mod:`travgraph`."""

from __future__ import annotations


class TravGraphError(Exception):
    """Base class for all package-specific errors."""


class InvalidArgument(TravGraphError, ValueError):
    """Raised for a bad vertex count or a vertex index outside ``[0, n)``."""


class ConfigError(TravGraphError, ValueError):
    """Raised for invalid query configuration options."""


class AlgorithmError(TravGraphError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "TravGraphError",
    "InvalidArgument",
    "ConfigError",
    "AlgorithmError",
]
