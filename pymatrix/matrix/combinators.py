"""
Apply an in-place transform to a copy of a matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.validation import check_array, check_2d
from pymatrix.matrix._common import Matrix, Transform


def dup(f: Transform, a: ArrayLike) -> Matrix:
    """
    Return f applied to a fresh copy of a, leaving a unchanged.

    The copy is a new float64 array that shares no memory with a, and f
    is called on it exactly once. Whatever f does to its argument is what
    the returned matrix shows; exceptions raised by f propagate.

    Parameters
    ----------
    f : callable
        Mutates its single matrix argument in place, e.g. rref or
        normalize. Its return value is ignored.
    a : array-like
        Rectangular 2D numeric data.

    Returns
    -------
    The transformed copy.

    Raises
    ------
    ValidationError
        If a is jagged or non-numeric.
    DimensionError
        If a is not 2D.

    Examples
    --------
    >>> arg = matrix([2, 3, 4], [5, 6, 7], [9, 2, 0])
    >>> reduced = dup(rref, arg)
    >>> np.array_equal(reduced, identity(3))
    True
    >>> np.array_equal(arg, reduced)
    False
    """
    source = check_array(a, "a")
    check_2d(source, "a")

    copy = np.array(source, dtype=np.float64, copy=True)
    f(copy)
    return copy
