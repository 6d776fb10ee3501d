"""
CPU reference backend for dense matrix kernels.

Plain sequential loops over row-major grids. Every other backend must
produce results identical to this one.
"""

from __future__ import annotations

from copy import copy as _clone
from typing import Any, Callable

from pymatrix.core.protocols import Grid


class CPUBackend:
    """Sequential reference backend."""

    @property
    def name(self) -> str:
        return 'cpu'

    def transpose(self, values: Grid, rows: int, cols: int) -> Grid:
        return [[_clone(values[i][j]) for i in range(rows)] for j in range(cols)]

    def map(self, values: Grid, func: Callable[[Any], Any]) -> Grid:
        return [_map_row(row, func) for row in values]

    def matmul(
        self,
        a: Grid,
        b: Grid,
        n: int,
        m: int,
        q: int,
        zero: Callable[[], Any],
    ) -> Grid:
        """
        Classical triple-loop product of an (n x m) and an (m x q) grid.

        Parameters
        ----------
        a, b : list of row lists
            Operands; shapes are assumed already checked.
        n, m, q : int
            Output is n x q; m is the shared inner dimension.
        zero : callable
            Additive identity factory used to seed each accumulator.
        """
        return [_matmul_row(a[i], b, m, q, zero) for i in range(n)]


def _map_row(row: list[Any], func: Callable[[Any], Any]) -> list[Any]:
    return [func(x) for x in row]


def _matmul_row(
    a_row: list[Any],
    b: Grid,
    m: int,
    q: int,
    zero: Callable[[], Any],
) -> list[Any]:
    """One output row of a product: a_row (length m) times b (m x q)."""
    out = []
    for j in range(q):
        acc = zero()
        for k in range(m):
            acc += a_row[k] * b[k][j]
        out.append(acc)
    return out
