"""
Literal construction helpers.

Sugar over Matrix.from_; none of these carry semantics of their own.

    mat("1, 2; 3, 4")              rows separated by ';', elements by ','
    mat([1, 2], [3, 4])            one positional argument per row
    MatrixBuilder().row(1, 2).row(3, 4).build()
"""

from __future__ import annotations

import ast
import numbers
from typing import Any, Callable

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Grid
from pymatrix.dense.matrix import Matrix


ROW_SEPARATOR = ';'
ELEMENT_SEPARATOR = ','


def parse_literal(text: str) -> Grid:
    """
    Parse matrix literal text into a grid.

    Each element must be a numeric Python literal (``4``, ``-1.5``,
    ``2+3j``). Whitespace around separators is ignored. Empty text yields
    an empty grid; an empty row or element is an error.

    Raises
    ------
    ValidationError
        If any element is missing or is not a numeric literal.
    """
    if not isinstance(text, str):
        raise ValidationError(f"text: expected str, got {type(text).__name__}")
    if not text.strip():
        return []

    grid = []
    for i, row_text in enumerate(text.split(ROW_SEPARATOR)):
        if not row_text.strip():
            raise ValidationError(f"text: row {i} is empty")
        row = []
        for j, item in enumerate(row_text.split(ELEMENT_SEPARATOR)):
            row.append(_parse_element(item.strip(), i, j))
        grid.append(row)
    return grid


def _parse_element(item: str, i: int, j: int) -> Any:
    try:
        value = ast.literal_eval(item)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as e:
        raise ValidationError(
            f"text: element ({i}, {j}) {item!r} is not a valid literal"
        ) from e
    if not isinstance(value, numbers.Number):
        raise ValidationError(
            f"text: element ({i}, {j}) {item!r} is not numeric "
            f"(got {type(value).__name__})"
        )
    return value


def mat(*rows: Any, dtype: Callable[[], Any] | None = None) -> Matrix[Any]:
    """
    Build a matrix from literal text or from row arguments.

    Parameters
    ----------
    *rows : str or sequences
        Either a single literal string (``"1, 2; 3, 4"``) or one
        sequence per row.
    dtype : callable, optional
        Element type. When given, every element is converted with
        ``dtype(x)`` (e.g. ``numpy.int8``) and it becomes the matrix's
        zero factory.

    Examples
    --------
    >>> mat("10, 10, 10, 10").shape
    (1, 4)
    >>> mat("4; 4; 4; 4").shape
    (4, 1)
    >>> mat([1, 2], [3, 4]) == mat("1, 2; 3, 4")
    True
    """
    if len(rows) == 1 and isinstance(rows[0], str):
        grid = parse_literal(rows[0])
    else:
        grid = [list(row) for row in rows]

    if dtype is not None:
        grid = [[dtype(x) for x in row] for row in grid]
    return Matrix.from_(grid, dtype=dtype)


class MatrixBuilder:
    """Fluent row-appending builder."""

    def __init__(self) -> None:
        self._rows: Grid = []

    def row(self, *elements: Any) -> MatrixBuilder:
        """Append one row and return the builder."""
        self._rows.append(list(elements))
        return self

    def build(self, dtype: Callable[[], Any] | None = None) -> Matrix[Any]:
        """
        Build the matrix from the rows appended so far.

        Raises DimensionError if the rows have differing lengths.
        """
        return Matrix.from_(self._rows, dtype=dtype)

    def __len__(self) -> int:
        return len(self._rows)
