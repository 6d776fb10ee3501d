"""
Thread-pool backend for dense matrix kernels.

Parallelizes map and matmul over rows with a ThreadPoolExecutor. Output
rows are independent, so results are identical to the CPU reference; only
the order in which elements are evaluated changes. Mapping functions must
therefore be pure.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable

from pymatrix.core.protocols import Grid
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_dimension
from pymatrix.dense.backends.cpu import CPUBackend, _map_row, _matmul_row


class ThreadedBackend(CPUBackend):
    """
    Row-parallel backend.

    Transpose is inherited from the CPU backend; it only moves references
    and gains nothing from a pool.
    """

    def __init__(self, max_workers: int | None = None):
        """
        Args:
            max_workers: Pool size. None uses the executor's default.
                         1 runs sequentially without a pool.
        """
        if max_workers is not None:
            max_workers = check_dimension(max_workers, 'max_workers')
            if max_workers == 0:
                raise ValidationError("max_workers: must be at least 1, got 0")
        self._max_workers = max_workers

    @property
    def name(self) -> str:
        return 'threads'

    @property
    def max_workers(self) -> int | None:
        return self._max_workers

    def map(self, values: Grid, func: Callable[[Any], Any]) -> Grid:
        return self._run_rows(partial(_map_row, func=func), values)

    def matmul(
        self,
        a: Grid,
        b: Grid,
        n: int,
        m: int,
        q: int,
        zero: Callable[[], Any],
    ) -> Grid:
        row_fn = partial(_matmul_row, b=b, m=m, q=q, zero=zero)
        return self._run_rows(row_fn, a[:n])

    def _run_rows(self, row_fn: Callable[[list[Any]], list[Any]], rows: Grid) -> Grid:
        if self._max_workers == 1:
            return [row_fn(row) for row in rows]

        # Executor.map yields results in submission order
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(row_fn, rows))
