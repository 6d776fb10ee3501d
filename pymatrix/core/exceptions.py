"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape violations are programming errors: they are
raised at the point of violation and are never recovered internally.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, callables, backend
    choices, literal text) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised when a grid is ragged, when multiplication operands are not
    conformant, or when addition operands differ in shape.

    Attributes:
        operation: Name of the operation that was attempted ('multiply', 'add', ...)
        left_shape: (rows, cols) of the left operand, if applicable
        right_shape: (rows, cols) of the right operand, if applicable
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
