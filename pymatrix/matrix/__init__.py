"""
Dense matrix routines.

Public API:
    matrix(*rows)          - Build a Matrix from row literals, zero-padding short rows
    identity(dim)          - dim x dim identity matrix
    rref(a)                - In-place Gauss-Jordan reduction, no pivoting
    rref_partial_pivot(a)  - In-place Gauss-Jordan reduction with partial pivoting
    normalize(a)           - In-place scaling of columns to unit length
    dup(f, a)              - Apply an in-place transform to a copy of a
"""

from pymatrix.matrix._common import Matrix, Transform
from pymatrix.matrix.construction import identity, matrix
from pymatrix.matrix.reduction import rref, rref_partial_pivot
from pymatrix.matrix.normalization import normalize
from pymatrix.matrix.combinators import dup

__all__ = [
    "Matrix",
    "Transform",
    "matrix",
    "identity",
    "rref",
    "rref_partial_pivot",
    "normalize",
    "dup",
]
