"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - In-place operations never receive a converted copy: the caller
      would not observe the mutation
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, ragged nesting or
    non-numeric data). Booleans and integers are promoted to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D matrix, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
            expected="2D",
        )


def check_nonempty(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the array has zero rows or zero columns
    """
    n_rows, n_cols = array.shape
    if n_rows == 0 or n_cols == 0:
        raise DimensionError(
            f"{name}: malformed matrix, expected at least one row and one "
            f"column, got shape {array.shape}",
            shape=array.shape,
            expected="at least 1x1",
        )


def check_matrix(array: Any, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify an argument can be mutated in place as a Matrix.

    The array is returned unchanged (same object). Converting it here
    would hand the in-place routine a copy and hide the mutation from
    the caller, so anything other than a floating ndarray is rejected.

    Args:
        array: Candidate matrix
        name: Parameter name for error messages

    Returns:
        The same array

    Raises:
        ValidationError: If not an ndarray, or not a floating dtype,
            or not writeable
        DimensionError: If not 2D, or with zero rows or columns
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: in-place operation requires a numpy.ndarray, got "
            f"{type(array).__name__}; build one with pymatrix.matrix()"
        )

    if not np.issubdtype(array.dtype, np.floating):
        raise ValidationError(
            f"{name}: in-place operation requires a floating dtype, got {array.dtype}"
        )

    if not array.flags.writeable:
        raise ValidationError(f"{name}: array is read-only")

    check_2d(array, name)
    check_nonempty(array, name)
    return array


def check_dimension(dim: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        dim: Candidate dimension
        name: Parameter name for error messages

    Returns:
        dim as a Python int

    Raises:
        ValidationError: If dim is not an integer or is negative
    """
    if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(dim).__name__} {dim!r}"
        )
    if dim < 0:
        raise ValidationError(f"{name}: must be non-negative, got {dim}")
    return int(dim)


def check_tolerance(tol: Any, name: str) -> float:
    """
    Verify a tolerance is a finite, non-negative real number.

    Args:
        tol: Candidate tolerance
        name: Parameter name for error messages

    Returns:
        tol as a Python float

    Raises:
        ValidationError: If tol is not real, not finite, or negative
    """
    if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(tol).__name__} {tol!r}"
        )
    tol = float(tol)
    if not math.isfinite(tol):
        raise ValidationError(f"{name}: must be finite, got {tol}")
    if tol < 0:
        raise ValidationError(f"{name}: must be non-negative, got {tol}")
    return tol
