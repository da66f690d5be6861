"""
Protocol definitions for colormatrix transform interfaces.

Defines the common interface shared by every stage that can be composed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Anything accepted as a color vector: list, tuple, or 1-D array
ColorComponents = Sequence[float] | NDArray[np.floating]


@runtime_checkable
class ColorTransform(Protocol):
    """
    Protocol for color vector transforms (ColorMatrix and compatible stages).

    Any object implementing this interface can be passed to
    ``apply_matrices`` and ``apply_matrices_to_array``.
    """

    def transform(self, components: ColorComponents) -> NDArray[np.float64]:
        """
        Transform a single color vector.

        Args:
            components: Color vector of length N

        Returns:
            Transformed color vector of length N
        """
        ...

    def transform_array(self, colors: np.ndarray, inplace: bool = False) -> np.ndarray:
        """
        Transform every color vector of a [..., N] array.

        Args:
            colors: Array whose last axis holds the channels
            inplace: If True, write results back into colors

        Returns:
            Transformed array of the same shape
        """
        ...
