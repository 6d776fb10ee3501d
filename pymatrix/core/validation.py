"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of dimensions or shapes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError, DimensionError


BACKEND_CHOICES = ('auto', 'cpu', 'threads')


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    # bool is an int subclass but never a meaningful dimension
    if isinstance(value, bool) or not hasattr(value, '__index__'):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    value = value.__index__()
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_rectangular(grid: Any, name: str) -> tuple[int, int]:
    """
    Verify a nested sequence is a rectangular grid.

    The column count is taken from the first row (0 for an empty grid),
    and every other row must match it.

    Args:
        grid: Outer sequence of rows; each row is a sequence or a 1D ndarray
        name: Parameter name for error messages

    Returns:
        (rows, cols)

    Raises:
        ValidationError: If grid is not a sequence, or a row is neither a
            sequence nor a 1D array
        DimensionError: If any row length differs from the first row
    """
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(grid).__name__}"
        )

    rows = len(grid)
    if rows == 0:
        return 0, 0

    for i, row in enumerate(grid):
        if not _is_row(row):
            raise ValidationError(
                f"{name}: row {i} is not a sequence or 1D array (got {type(row).__name__})"
            )

    cols = len(grid[0])
    for i, row in enumerate(grid):
        if len(row) != cols:
            raise DimensionError(
                f"{name}: ragged rows, row {i} has {len(row)} elements, "
                f"expected {cols} (from row 0)",
                operation='from',
            )
    return rows, cols


def _is_row(row: Any) -> bool:
    if isinstance(row, np.ndarray):
        return row.ndim == 1
    return isinstance(row, Sequence) and not isinstance(row, (str, bytes))


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical (rows, cols) shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the shapes differ in rows or columns
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, left is {left[0]}x{left[1]}, "
            f"right is {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_conformant(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = 'multiply',
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the operands are not conformant
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"{operation}: left has {left[1]} columns but right has "
            f"{right[0]} rows ({left[0]}x{left[1]} * {right[0]}x{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_callable(func: Any, name: str) -> None:
    """
    Verify an argument is callable.

    Raises:
        ValidationError: If func is not callable
    """
    if not callable(func):
        raise ValidationError(
            f"{name}: expected a callable, got {type(func).__name__}"
        )


def check_backend_choice(backend: Any) -> None:
    """
    Verify a backend selector is one of the known choices.

    Raises:
        ValidationError: If backend is not 'auto', 'cpu' or 'threads'
    """
    if backend not in BACKEND_CHOICES:
        raise ValidationError(
            f"Unknown backend: {backend!r}. Must be one of {BACKEND_CHOICES}"
        )
