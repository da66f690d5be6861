"""
Sequential composition of color transforms.

Applies matrices one after another, each consuming the previous output.
This is function application, not matrix multiplication: stages may have
different sizes (e.g. a 3x3 effect followed by a 4x5 affine matrix), and
the combined transform need not be representable as a single matrix.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from colormatrix.protocols import ColorComponents, ColorTransform

logger = logging.getLogger(__name__)


def _check_stages(matrices: tuple[ColorTransform, ...]) -> None:
    if len(matrices) == 0:
        raise TypeError("At least one matrix is required, got none")
    for index, matrix in enumerate(matrices):
        if not isinstance(matrix, ColorTransform):
            raise TypeError(
                f"Stage {index} must provide transform() and transform_array(), "
                f"got {type(matrix).__name__}"
            )


def apply_matrices(
    components: ColorComponents, *matrices: ColorTransform
) -> NDArray[np.float64]:
    """
    Apply one or more matrices to a color vector, in order.

    Args:
        components: Color vector of length N
        *matrices: Stages M1..Mk (k >= 1); Mi consumes the output of Mi-1

    Returns:
        Output of the last stage, a float64 vector of length N

    Raises:
        TypeError: If no matrix is given or a stage is not a ColorTransform

    Example:
        >>> apply_matrices([0.2, 0.4, 0.6, 1.0], saturate(0.5), hue_rotate(30))
    """
    _check_stages(matrices)

    result = matrices[0].transform(components)
    for matrix in matrices[1:]:
        result = matrix.transform(result)
    return result


def apply_matrices_to_array(
    colors: np.ndarray, *matrices: ColorTransform, inplace: bool = False
) -> np.ndarray:
    """
    Apply one or more matrices to every color vector of a [..., N] array.

    Args:
        colors: Array whose last axis holds the channels
        *matrices: Stages applied in order
        inplace: If True, the final result is written back into colors

    Returns:
        Transformed array with the same shape as colors

    Example:
        >>> image = np.random.rand(256, 256, 4).astype(np.float32)
        >>> apply_matrices_to_array(image, sepia(0.3), saturate(1.2), inplace=True)
    """
    _check_stages(matrices)

    if inplace and not (
        isinstance(colors, np.ndarray) and np.issubdtype(colors.dtype, np.floating)
    ):
        raise TypeError(
            "inplace=True requires a floating-point numpy array. "
            "Convert with colors.astype(np.float32) first."
        )

    logger.debug(
        "[Compose] Applying %d stages to array of shape %s", len(matrices), np.shape(colors)
    )

    # Each stage writes a fresh buffer; colors is only touched at the end
    result = colors
    for matrix in matrices:
        result = matrix.transform_array(result)

    if inplace:
        colors[...] = result
        return colors
    return result
