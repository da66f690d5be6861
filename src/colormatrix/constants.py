"""
Constants and coefficient tables for colormatrix.

Centralizes the filter-effect coefficients and storage defaults.
Coefficient values are those of the W3C Filter Effects Module Level 1.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Storage
# =============================================================================

MATRIX_DTYPE = np.float64  # Coefficient storage (exact round-trip of Python floats)
BATCH_DTYPES = (np.float32, np.float64)  # Dtypes the batch kernel works in natively

# =============================================================================
# Effect Matrices
# =============================================================================

EFFECT_SIZE = 3  # Effect matrices are 3x3 (R, G, B)

# https://www.w3.org/TR/filter-effects-1/#grayscaleEquivalent
GRAYSCALE_LUMINANCE = (0.2126, 0.7152, 0.0722)

# https://www.w3.org/TR/filter-effects-1/#sepiaEquivalent
SEPIA_COEFFICIENTS = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# https://www.w3.org/TR/filter-effects-1/#feColorMatrixElement
SATURATE_LUMINANCE = (0.213, 0.715, 0.072)

# Sine terms of the hueRotate matrix (same source as SATURATE_LUMINANCE)
HUE_ROTATE_SIN_BASIS = (
    (-0.213, -0.715, 0.928),
    (0.143, 0.140, -0.283),
    (-0.787, 0.715, 0.072),
)

# Neutral parameter values
DEFAULT_AMOUNT = 1.0  # grayscale/sepia/saturate: no change
DEFAULT_HUE_ANGLE = 0.0  # hue_rotate: no change
