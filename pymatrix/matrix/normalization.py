"""
Column normalization to unit Euclidean length.
"""

from __future__ import annotations

import warnings
import numpy as np

from pymatrix.core.validation import check_matrix
from pymatrix.matrix._common import Matrix


def normalize(a: Matrix) -> None:
    """
    Rescale every column of a in place to Euclidean norm 1.

    Each column is divided by sqrt(sum of its squared entries). The shape
    of a is unchanged.

    A column of all zeros has length 0 and its entries become NaN (0/0).
    That result is returned as is, with a RuntimeWarning listing the
    affected columns, never an exception. The warning is issued through
    warnings.warn after every column has been rescaled, so under a
    warnings-as-errors filter (python -W error, pytest -W error) the
    RuntimeWarning propagates as an exception while a is already fully
    modified.

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
    """
    check_matrix(a, "a")

    with np.errstate(all='ignore'):
        lengths = np.sqrt(np.sum(a * a, axis=0))
        a /= lengths

    zero_cols = np.flatnonzero(lengths == 0.0)
    if zero_cols.size > 0:
        warnings.warn(
            f"normalize: columns {zero_cols.tolist()} have zero length; "
            f"their entries are NaN",
            RuntimeWarning,
            stacklevel=2,
        )
