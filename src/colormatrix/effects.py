"""
Filter effect matrices: grayscale, sepia, saturate, hue_rotate.

Each factory returns a 3x3 ColorMatrix built from a single scalar. Values
follow the W3C Filter Effects Module (feColorMatrix and the shorthand
filter equivalents). A parameter of 1.0 (or an angle of 0) yields the
identity; lowering the amount moves each row towards the effect's
coefficients.

grayscale() and sepia() clamp their blend weight to [0, 1]. saturate() and
hue_rotate() do not clamp, so saturate(2.0) over-saturates and any angle is
accepted.

Example:
    >>> from colormatrix import apply_matrices, grayscale, hue_rotate
    >>> apply_matrices([1.0, 0.0, 0.0, 1.0], hue_rotate(180), grayscale(0.5))
"""

from __future__ import annotations

import logging
import math

import numpy as np

from colormatrix.constants import (
    DEFAULT_AMOUNT,
    DEFAULT_HUE_ANGLE,
    EFFECT_SIZE,
    GRAYSCALE_LUMINANCE,
    HUE_ROTATE_SIN_BASIS,
    MATRIX_DTYPE,
    SATURATE_LUMINANCE,
    SEPIA_COEFFICIENTS,
)
from colormatrix.matrix import ColorMatrix
from colormatrix.validators import validate_finite

logger = logging.getLogger(__name__)

EffectMatrix = ColorMatrix[EFFECT_SIZE, EFFECT_SIZE]

_IDENTITY = np.eye(EFFECT_SIZE, dtype=MATRIX_DTYPE)
_GRAYSCALE_ROWS = np.array([GRAYSCALE_LUMINANCE] * EFFECT_SIZE, dtype=MATRIX_DTYPE)
_SEPIA_ROWS = np.array(SEPIA_COEFFICIENTS, dtype=MATRIX_DTYPE)
_SATURATE_ROWS = np.array([SATURATE_LUMINANCE] * EFFECT_SIZE, dtype=MATRIX_DTYPE)
_HUE_SIN_BASIS = np.array(HUE_ROTATE_SIN_BASIS, dtype=MATRIX_DTYPE)


def _blend_with_identity(effect_rows: np.ndarray, weight: float) -> ColorMatrix:
    """
    Row-wise blend: effect_rows * weight + identity * (1 - weight).

    weight=0 gives the identity and weight=1 the effect rows, both exactly.
    """
    return EffectMatrix.from_rows(effect_rows * weight + _IDENTITY * (1.0 - weight))


@validate_finite("amount")
def grayscale(amount: float = DEFAULT_AMOUNT) -> ColorMatrix:
    """
    Grayscale matrix using Rec. 709 luminance weights.

    Args:
        amount: 1.0 = unchanged, 0.0 = fully gray. The luminance weight
            ``1 - amount`` is clamped to [0, 1].

    Returns:
        3x3 ColorMatrix

    Example:
        >>> grayscale(0.0).transform([1.0, 0.0, 0.0])
        array([0.2126, 0.2126, 0.2126])
    """
    one_minus_amount = min(max(1.0 - amount, 0.0), 1.0)
    logger.debug("[Effects] grayscale amount=%.4f", amount)
    return _blend_with_identity(_GRAYSCALE_ROWS, one_minus_amount)


@validate_finite("amount")
def sepia(amount: float = DEFAULT_AMOUNT) -> ColorMatrix:
    """
    Sepia tone matrix.

    Args:
        amount: 1.0 = unchanged, 0.0 = full sepia. The sepia weight
            ``1 - amount`` is clamped to [0, 1].

    Returns:
        3x3 ColorMatrix
    """
    one_minus_amount = min(max(1.0 - amount, 0.0), 1.0)
    logger.debug("[Effects] sepia amount=%.4f", amount)
    return _blend_with_identity(_SEPIA_ROWS, one_minus_amount)


@validate_finite("amount")
def saturate(amount: float = DEFAULT_AMOUNT) -> ColorMatrix:
    """
    Saturation matrix (feColorMatrix type="saturate").

    Not clamped: values above 1.0 over-saturate, negative values invert hues
    around the gray axis.

    Args:
        amount: 1.0 = unchanged, 0.0 = fully desaturated

    Returns:
        3x3 ColorMatrix
    """
    logger.debug("[Effects] saturate amount=%.4f", amount)
    return _blend_with_identity(_SATURATE_ROWS, 1.0 - amount)


@validate_finite("angle_in_degrees")
def hue_rotate(angle_in_degrees: float = DEFAULT_HUE_ANGLE) -> ColorMatrix:
    """
    Hue rotation matrix (feColorMatrix type="hueRotate").

    The matrix is ``lum + cos(a) * (I - lum) + sin(a) * S`` where ``lum`` has
    every row equal to the saturate luminance weights and ``S`` is the W3C
    sine basis. Angles are not normalized or clamped.

    Args:
        angle_in_degrees: Rotation around the gray axis, in degrees

    Returns:
        3x3 ColorMatrix
    """
    radians = math.radians(angle_in_degrees)
    cos_hue = math.cos(radians)
    sin_hue = math.sin(radians)

    logger.debug("[Effects] hue_rotate angle=%.4f", angle_in_degrees)

    # Identity weighted by cos first so that angle=0 is exactly the identity
    coefficients = _IDENTITY * cos_hue + _SATURATE_ROWS * (1.0 - cos_hue)
    coefficients = coefficients + _HUE_SIN_BASIS * sin_hue
    return EffectMatrix.from_rows(coefficients)
