"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Numerical degeneracy (zero pivots, zero-length columns) is a result,
      not an error, and is never raised from here
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    data, a non-floating array handed to an in-place operation, a negative
    identity dimension, and so on.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shape is malformed.

    Raised when an input is not a 2D matrix or has zero rows or zero
    columns. This is the "malformed matrix" signal for inputs the
    elimination and normalization routines cannot index.

    Attributes:
        shape: Actual shape of the offending input, if known
        expected: Human-readable description of what was required
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        expected: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.expected = expected

