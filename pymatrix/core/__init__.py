"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the dense
matrix type and its compute backends.

Key components:
    protocols: Numeric element capability set, Backend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    config: Backend selection policy
"""

from pymatrix.core.protocols import Numeric, Backend
from pymatrix.core.config import BackendConfig, DEFAULT_CONFIG, select_backend_name
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "Numeric",
    "Backend",
    # Config
    "BackendConfig",
    "DEFAULT_CONFIG",
    "select_backend_name",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
]
