"""
pymatrix: a small generic dense matrix value type for Python.

Works with any numeric-like element type that has an additive identity:
int, float, complex, Fraction, Decimal, numpy scalars.

Submodules:
    core: exceptions, protocols, validation, backend policy
    dense: the Matrix type, literal builders and compute backends
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import PyMatrixError, ValidationError, DimensionError
from pymatrix.core.config import BackendConfig
from pymatrix.dense import Matrix, MatrixBuilder, mat

__all__ = [
    "__version__",
    "Matrix",
    "MatrixBuilder",
    "mat",
    "BackendConfig",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
]
