"""
Common types for the matrix routines.

A Matrix is a 2D float64 ndarray: one contiguous buffer with a row
stride, rows of equal length by construction. In-place routines share
the Transform signature so they can be handed to dup().
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray


Matrix = NDArray[np.float64]

# Mutates its single argument in place and returns None
Transform = Callable[[NDArray[np.floating[Any]]], None]
