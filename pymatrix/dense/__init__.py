"""
Dense matrix module.

Public API:
    Matrix          - generic dense row-major matrix
    mat(...)        - literal builder ("1, 2; 3, 4" or row sequences)
    MatrixBuilder   - fluent row-appending builder
    CPUBackend      - sequential reference kernels
    ThreadedBackend - row-parallel kernels
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.literal import mat, parse_literal, MatrixBuilder
from pymatrix.dense.backends import CPUBackend, ThreadedBackend

__all__ = [
    "Matrix",
    "mat",
    "parse_literal",
    "MatrixBuilder",
    "CPUBackend",
    "ThreadedBackend",
]
