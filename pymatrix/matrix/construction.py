"""
Matrix construction: identity and the row-literal builder.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import numbers
import numpy as np

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_array, check_dimension
from pymatrix.matrix._common import Matrix


def identity(dim: int) -> Matrix:
    """
    Build the dim x dim identity matrix.

    Parameters
    ----------
    dim : int
        Number of rows and columns. 0 gives an empty (0, 0) matrix.

    Returns
    -------
    Matrix with 1.0 on the diagonal and 0.0 elsewhere.

    Raises
    ------
    ValidationError
        If dim is negative or not an integer.
    """
    dim = check_dimension(dim, "dim")
    return np.eye(dim, dtype=np.float64)


def _is_row(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _convert_row(literal: Any, name: str) -> np.ndarray:
    """
    Convert one row literal to a 1D float array.

    Plain sequences of real numbers are converted value by value, so
    literals NumPy cannot hold in a fixed-width dtype (ints beyond int64,
    Fraction) still become floats. Anything else goes through
    check_array for its diagnostics.
    """
    if not isinstance(literal, np.ndarray) and all(
        isinstance(x, numbers.Real) for x in literal
    ):
        try:
            return np.array([float(x) for x in literal], dtype=np.float64)
        except OverflowError as e:
            raise ValidationError(f"{name}: value too large for float64: {e}") from e
    return check_array(literal, name)


def _split_rows(rows: tuple[Any, ...]) -> list[Any]:
    """Resolve the calling form of matrix() into a list of row literals."""
    if len(rows) != 1:
        return list(rows)

    (single,) = rows
    if isinstance(single, np.ndarray):
        if single.ndim == 2:
            return list(single)
        return [single]
    if _is_row(single) and all(_is_row(r) for r in single):
        return list(single)
    return [single]


def matrix(*rows: Any) -> Matrix:
    """
    Build a Matrix from row literals, zero-padding short rows.

    Every value is converted to float64. When rows have unequal lengths
    each row is right-padded with 0.0 up to the longest row, so the
    result is always rectangular. Row order and the order within each
    row are kept as written.

    Accepted forms::

        matrix([0, 1, 2], [1, 1], [2, 3, 4])     # one argument per row
        matrix([[0, 1, 2], [1, 1], [2, 3, 4]])   # one nested sequence
        matrix(np.array([[1, 2], [3, 4]]))       # copy of a 2D array

    The first two both give::

        [[0., 1., 2.],
         [1., 1., 0.],
         [2., 3., 4.]]

    Raises
    ------
    DimensionError
        If there are no rows, every row is empty, or a row is not 1D.
    ValidationError
        If any entry is non-numeric, or an exact number (a large int,
        Fraction) is too large for float64.
    """
    literals = _split_rows(rows)
    if not literals:
        raise DimensionError(
            "matrix: no rows given", shape=(0,), expected="at least one row"
        )

    converted = []
    for i, literal in enumerate(literals):
        name = f"matrix row {i}"
        if not _is_row(literal):
            raise DimensionError(
                f"{name}: expected a sequence of numbers, got {type(literal).__name__}",
                expected="1D row",
            )
        row = _convert_row(literal, name)
        if row.ndim != 1:
            raise DimensionError(
                f"{name}: expected 1D row, got {row.ndim}D with shape {row.shape}",
                shape=row.shape,
                expected="1D row",
            )
        converted.append(row)

    width = max(len(row) for row in converted)
    if width == 0:
        raise DimensionError(
            f"matrix: all {len(converted)} rows are empty",
            shape=(len(converted), 0),
            expected="at least one column",
        )

    result = np.zeros((len(converted), width), dtype=np.float64)
    for i, row in enumerate(converted):
        result[i, :len(row)] = row
    return result
