"""
Core infrastructure for PyMatrix.

This module provides shared abstractions used by the matrix routines.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
]
