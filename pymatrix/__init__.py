"""
PyMatrix: dense real-valued matrix primitives.

Provides identity construction, reduction to reduced row-echelon form by
Gauss-Jordan elimination, column normalization, and a copy-then-transform
combinator, all on float64 NumPy arrays.

Submodules:
    matrix: Construction, reduction, normalization, dup
    core: Exceptions, validation, tolerance tiers
"""

__version__ = "0.1.0"

from pymatrix.matrix import (
    Matrix,
    Transform,
    matrix,
    identity,
    rref,
    rref_partial_pivot,
    normalize,
    dup,
)
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
)

__all__ = [
    "__version__",
    "Matrix",
    "Transform",
    "matrix",
    "identity",
    "rref",
    "rref_partial_pivot",
    "normalize",
    "dup",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
]
