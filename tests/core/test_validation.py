"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: integer, non-negative, bool rejection
    - check_rectangular: shape inference, ragged detection
    - check_same_shape / check_conformant: operand shape checks
    - check_callable / check_backend_choice
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_backend_choice,
    check_callable,
    check_conformant,
    check_dimension,
    check_rectangular,
    check_same_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_accepts_zero(self):
        assert check_dimension(0, "rows") == 0

    def test_accepts_numpy_integer(self):
        result = check_dimension(np.int64(3), "rows")
        assert result == 3
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="rows: must be non-negative, got -1"):
            check_dimension(-1, "rows")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="cols: expected a non-negative integer"):
            check_dimension(2.0, "cols")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_dimension(True, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_regular_grid(self):
        assert check_rectangular([[1, 2, 3], [4, 5, 6]], "grid") == (2, 3)

    def test_empty_grid(self):
        assert check_rectangular([], "grid") == (0, 0)

    def test_single_empty_row(self):
        assert check_rectangular([[]], "grid") == (1, 0)

    def test_tuples_accepted(self):
        assert check_rectangular(((1, 2), (3, 4)), "grid") == (2, 2)

    def test_ragged_rows(self):
        with pytest.raises(DimensionError, match="row 1 has 1 elements, expected 2"):
            check_rectangular([[1, 2], [3]], "grid")

    def test_ragged_error_names_operation(self):
        with pytest.raises(DimensionError) as exc_info:
            check_rectangular([[1], [2, 3]], "grid")
        assert exc_info.value.operation == "from"

    def test_rejects_flat_sequence(self):
        with pytest.raises(ValidationError, match="row 0 is not a sequence"):
            check_rectangular([1, 2, 3], "grid")

    def test_rejects_string_rows(self):
        with pytest.raises(ValidationError):
            check_rectangular(["ab", "cd"], "grid")

    def test_rejects_non_sequence(self):
        with pytest.raises(ValidationError, match="expected a sequence of rows"):
            check_rectangular(42, "grid")


# ═══════════════════════════════════════════════════════════════════════
# Operand shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_equal_shapes_pass(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_row_mismatch(self):
        with pytest.raises(DimensionError, match="left is 4x1, right is 1x4"):
            check_same_shape((4, 1), (1, 4), "add")

    def test_column_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            check_same_shape((2, 3), (2, 2), "add")
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 2)


class TestCheckConformant:

    def test_conformant_pass(self):
        check_conformant((2, 3), (3, 5))

    def test_non_conformant(self):
        with pytest.raises(DimensionError, match="left has 3 columns but right has 2 rows"):
            check_conformant((2, 3), (2, 3))

    def test_default_operation_name(self):
        with pytest.raises(DimensionError) as exc_info:
            check_conformant((1, 2), (3, 1))
        assert exc_info.value.operation == "multiply"


# ═══════════════════════════════════════════════════════════════════════
# check_callable / check_backend_choice
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCallable:

    def test_lambda_passes(self):
        check_callable(lambda x: x, "func")

    def test_type_passes(self):
        check_callable(int, "dtype")

    def test_non_callable(self):
        with pytest.raises(ValidationError, match="func: expected a callable, got int"):
            check_callable(3, "func")


class TestCheckBackendChoice:

    @pytest.mark.parametrize("choice", ["auto", "cpu", "threads"])
    def test_known_choices(self, choice):
        check_backend_choice(choice)

    def test_unknown_choice(self):
        with pytest.raises(ValidationError, match="Unknown backend: 'gpu'"):
            check_backend_choice("gpu")
