"""
Reduction to reduced row-echelon form (RREF).

Two Gauss-Jordan variants, both in place:

    rref(a)                 - diagonal pivots only, no row exchanges
    rref_partial_pivot(a)   - column scan with partial pivoting

rref() is the default and deliberately does no pivot selection: a zero
on the diagonal is skipped even if a lower row could supply a usable
pivot, and a tiny nonzero diagonal is used as is. Pivot tests are exact
comparisons against 0.0. rref_partial_pivot() is the stable alternative
and is never substituted for rref() behind the caller's back.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.validation import check_matrix, check_tolerance
from pymatrix.matrix._common import Matrix


def _eliminate(a: Matrix, row: int, col: int, divisor: float) -> None:
    """
    Subtract multiples of a[row] from every other row to clear column col.

    Each row j gets a[j] -= a[row] * (a[j, col] / divisor). The factors
    are read before any row changes, and row `row` itself is never
    touched, so updating all rows at once matches the row-by-row order.
    """
    others = np.arange(a.shape[0]) != row
    factors = a[others, col] / divisor
    a[others] -= np.outer(factors, a[row])


def rref(a: Matrix) -> None:
    """
    Reduce a to reduced row-echelon form in place, without pivoting.

    Pass 1 walks the diagonal i = 0 .. min(rows, cols) - 1. When a[i, i]
    is exactly 0.0 the position is skipped; otherwise column i is
    eliminated from every other row, including rows past the diagonal
    bound. Pass 2 then divides each row with a nonzero diagonal entry by
    that entry so the pivot becomes 1.0.

    Rank-deficient input leaves its dependent rows as zero rows. Overflow
    and invalid operations yield inf/nan in the result rather than an
    exception, whatever the global numpy error state.

    Parameters
    ----------
    a : Matrix
        2D floating ndarray with at least one row and one column.
        Modified in place.

    Raises
    ------
    ValidationError
        If a is not a writeable floating ndarray.
    DimensionError
        If a is not 2D or has zero rows or columns.

    Examples
    --------
    >>> a = matrix([1, 1, 1], [0, 1, 1], [1, 1, 1])
    >>> rref(a)
    >>> a
    array([[1., 0., 0.],
           [0., 1., 1.],
           [0., 0., 0.]])
    """
    check_matrix(a, "a")
    n = min(a.shape)

    with np.errstate(all='ignore'):
        for i in range(n):
            divisor = a[i, i]
            if divisor != 0.0:
                _eliminate(a, i, i, divisor)

        for i in range(n):
            divisor = a[i, i]
            if divisor != 0.0:
                a[i] /= divisor


def rref_partial_pivot(a: Matrix, *, tol: float = 0.0) -> None:
    """
    Reduce a to reduced row-echelon form in place, with partial pivoting.

    Columns are scanned left to right. For each one, the row at or below
    the next pivot row with the largest absolute entry in that column is
    swapped up and scaled so its pivot is exactly 1.0, and the column is
    cleared from every other row. A column whose best candidate has
    magnitude <= tol is treated as free and skipped.

    Unlike rref(), a zero diagonal entry never blocks a pivot that a
    lower row could supply, and pivot columns may move right of the
    diagonal, so the result is a proper RREF for any input.

    Parameters
    ----------
    a : Matrix
        2D floating ndarray with at least one row and one column.
        Modified in place.
    tol : float
        Largest magnitude still treated as zero when choosing a pivot.
        Default 0.0 keeps the exact comparison used by rref(). Entries
        are never rounded to zero after elimination.

    Raises
    ------
    ValidationError
        If a is not a writeable floating ndarray, or tol is negative or
        not finite.
    DimensionError
        If a is not 2D or has zero rows or columns.
    """
    check_matrix(a, "a")
    tol = check_tolerance(tol, "tol")
    n_rows, n_cols = a.shape

    pivot_row = 0
    with np.errstate(all='ignore'):
        for col in range(n_cols):
            if pivot_row == n_rows:
                break

            magnitudes = np.abs(a[pivot_row:, col])
            # NaN never qualifies
            magnitudes[np.isnan(magnitudes)] = -np.inf
            best = int(np.argmax(magnitudes))
            if not magnitudes[best] > tol:
                continue

            best += pivot_row
            if best != pivot_row:
                a[[pivot_row, best]] = a[[best, pivot_row]]

            a[pivot_row] /= a[pivot_row, col]
            _eliminate(a, pivot_row, col, 1.0)
            pivot_row += 1
