"""
Matrix: generic dense row-major matrix value type.

A Matrix owns a rectangular grid of elements of any numeric-like type
(see pymatrix.core.protocols.Numeric) together with a zero factory
(``dtype``) that produces the element type's additive identity.

Operations:
    Matrix.from_(grid) / Matrix(grid)   - copy a nested sequence
    Matrix.alloca(rows, cols)           - zero-filled allocation
    m.T() / m.transpose()               - new transposed matrix
    m.mapped(func)                      - new matrix, func applied per element
    m.multiply(other) / m * other       - matrix product
    m.add(other) / m + other            - element-wise sum (new matrix)
    m.add_scalar(s) / m + s             - scalar sum (new matrix)
    m += other / m += s                 - in-place sums

All shape violations raise DimensionError before any element is touched.
"""

from __future__ import annotations

from copy import copy as _clone
from typing import Any, Callable, Generic, Iterator, Literal, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.config import BackendConfig, DEFAULT_CONFIG, select_backend_name
from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.protocols import Backend, Grid, Numeric
from pymatrix.core.validation import (
    check_callable,
    check_conformant,
    check_dimension,
    check_rectangular,
    check_same_shape,
)
from pymatrix.dense.backends.cpu import CPUBackend
from pymatrix.dense.backends.threads import ThreadedBackend


E = TypeVar('E', bound=Numeric)  # Element type

BackendChoice = Literal['auto', 'cpu', 'threads']


def _get_backend(
    backend: BackendChoice,
    n_elements: int,
    max_workers: int | None,
    config: BackendConfig,
) -> Backend:
    """Select backend based on preference and amount of work."""
    name = select_backend_name(backend, n_elements, config)
    if name == 'cpu':
        return CPUBackend()
    if max_workers is None:
        max_workers = config.max_workers
    return ThreadedBackend(max_workers=max_workers)


class Matrix(Generic[E]):
    """
    Dense rectangular grid of elements, stored row-major.

    Attributes:
        values: list of ``rows`` row lists, each holding ``cols`` elements
        rows: Row count
        cols: Column count
        dtype: Zero factory; ``dtype()`` is the additive identity of E

    Construction:
        Matrix.from_([[1, 2], [3, 4]])
        Matrix.alloca(3, 3, dtype=Fraction)
        Matrix.from_numpy(array)

    Matrices are mutable (``+=`` works in place) and therefore unhashable.
    Every operation that returns a Matrix builds fresh rows; no two
    matrices ever share row storage.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, grid: Any = (), dtype: Callable[[], E] | None = None):
        rows, cols = check_rectangular(grid, 'grid')
        if dtype is None:
            dtype = type(grid[0][0]) if rows and cols else int
        check_callable(dtype, 'dtype')

        self.values: Grid = [[_clone(x) for x in row] for row in grid]
        self.rows = rows
        self.cols = cols
        self.dtype = dtype

    # --- Construction ---

    @classmethod
    def from_(cls, grid: Any, dtype: Callable[[], E] | None = None) -> Matrix[E]:
        """
        Build a matrix from a nested sequence of rows.

        Parameters
        ----------
        grid : sequence of sequences or of 1D arrays
            Row-major data. ``rows`` is the outer length; ``cols`` is the
            length of the first row (0 when ``grid`` is empty). A whole 2D
            array goes through ``from_numpy`` instead.
        dtype : callable, optional
            Zero factory. Defaults to the type of the first element, or
            ``int`` for an empty grid.

        Raises
        ------
        DimensionError
            If the rows do not all have the same length.
        """
        return cls(grid, dtype=dtype)

    @classmethod
    def alloca(cls, rows: int, cols: int, dtype: Callable[[], E] = int) -> Matrix[E]:
        """
        Allocate a rows x cols matrix filled with ``dtype()``.

        Each element is constructed independently.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        check_callable(dtype, 'dtype')
        values = [[dtype() for _ in range(cols)] for _ in range(rows)]
        return cls._wrap(values, rows, cols, dtype)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 1D or 2D array.

        A 1D array becomes a single row. Elements keep their numpy scalar
        type, and ``dtype`` is the array's scalar type.
        """
        arr = np.asarray(array)
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}",
                operation='from_numpy',
            )

        rows, cols = arr.shape
        values = [list(row) for row in arr]
        if arr.dtype == object:
            dtype = type(values[0][0]) if rows and cols else int
        else:
            dtype = arr.dtype.type
        return cls._wrap(values, rows, cols, dtype)

    @classmethod
    def _wrap(cls, values: Grid, rows: int, cols: int, dtype: Callable[[], Any]) -> Matrix[Any]:
        """Adopt an already-built grid without copying or validation."""
        m = cls.__new__(cls)
        m.values = values
        m.rows = rows
        m.cols = cols
        m.dtype = dtype
        return m

    # --- Conversion ---

    def copy(self) -> Matrix[E]:
        """Independent copy: fresh rows, cloned elements."""
        return self._wrap(self.to_list(), self.rows, self.cols, self.dtype)

    def to_list(self) -> Grid:
        """Grid as fresh nested lists with cloned elements."""
        return [[_clone(x) for x in row] for row in self.values]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Grid as a (rows, cols) numpy array."""
        return np.array(self.values, dtype=dtype).reshape(self.rows, self.cols)

    # --- Shape & access ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, key: int | slice | tuple[int, int]) -> Any:
        """
        ``m[i, j]`` is an element; ``m[i]`` is a copy of row i; ``m[a:b]``
        is a list of row copies.
        """
        if isinstance(key, tuple):
            i, j = key
            return self.values[i][j]
        if isinstance(key, slice):
            return [list(row) for row in self.values[key]]
        return list(self.values[key])

    def __iter__(self) -> Iterator[list[E]]:
        for row in self.values:
            yield list(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.values == other.values

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, values={self.values!r})"

    # --- Transforms ---

    def T(self) -> Matrix[E]:
        """
        Transpose.

        Returns a new cols x rows matrix with ``out[j][i] == self[i][j]``.
        The receiver is left unchanged.
        """
        values = CPUBackend().transpose(self.values, self.rows, self.cols)
        return self._wrap(values, self.cols, self.rows, self.dtype)

    transpose = T

    def mapped(
        self,
        func: Callable[[E], E],
        *,
        backend: BackendChoice = 'cpu',
        max_workers: int | None = None,
        config: BackendConfig = DEFAULT_CONFIG,
    ) -> Matrix[E]:
        """
        Apply ``func`` to every element.

        Parameters
        ----------
        func : callable
            Pure function of one element. No evaluation order is
            guaranteed, and with backend='threads' calls run concurrently.
        backend : str
            'cpu' (sequential), 'threads' (row-parallel) or 'auto'.
        max_workers : int, optional
            Thread pool size; overrides config.max_workers.
        config : BackendConfig
            Policy used to resolve backend='auto'.

        Returns
        -------
        New matrix of the same shape and dtype.
        """
        check_callable(func, 'func')
        be = _get_backend(backend, self.rows * self.cols, max_workers, config)
        values = be.map(self.values, func)
        return self._wrap(values, self.rows, self.cols, self.dtype)

    # --- Multiplication ---

    def multiply(
        self,
        other: Matrix[E],
        *,
        backend: BackendChoice = 'cpu',
        max_workers: int | None = None,
        config: BackendConfig = DEFAULT_CONFIG,
    ) -> Matrix[E]:
        """
        Matrix product ``self * other``.

        Requires ``self.cols == other.rows``; the result is
        ``self.rows x other.cols``. Each cell is accumulated with ``+=``
        starting from ``self.dtype()``.

        Raises
        ------
        DimensionError
            If the operands are not conformant.
        """
        _check_matrix(other, 'multiply')
        check_conformant(self.shape, other.shape, 'multiply')

        n, m, q = self.rows, self.cols, other.cols
        be = _get_backend(backend, n * m * q, max_workers, config)
        values = be.matmul(self.values, other.values, n, m, q, self.dtype)
        return self._wrap(values, n, q, self.dtype)

    def __mul__(self, other: Any) -> Matrix[E]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    # --- Addition ---

    def add(self, other: Matrix[E]) -> Matrix[E]:
        """Element-wise sum as a new matrix. Shapes must match exactly."""
        _check_matrix(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        result = self.copy()
        result.add_assign(other)
        return result

    def add_assign(self, other: Matrix[E]) -> None:
        """Add ``other`` into this matrix element by element."""
        _check_matrix(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        for row, other_row in zip(self.values, other.values):
            for j in range(self.cols):
                row[j] += other_row[j]

    def add_scalar(self, scalar: E) -> Matrix[E]:
        """New matrix with ``scalar`` added to every element."""
        result = self.copy()
        result.add_assign_scalar(scalar)
        return result

    def add_assign_scalar(self, scalar: E) -> None:
        """Add ``scalar`` to every element in place."""
        for row in self.values:
            for j in range(self.cols):
                row[j] += _clone(scalar)

    def __add__(self, other: Any) -> Matrix[E]:
        if isinstance(other, Matrix):
            return self.add(other)
        return self.add_scalar(other)

    def __iadd__(self, other: Any) -> Matrix[E]:
        if isinstance(other, Matrix):
            self.add_assign(other)
        else:
            self.add_assign_scalar(other)
        return self


def _check_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )
