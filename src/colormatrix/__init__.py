"""
colormatrix - Fixed-size color matrices for filter effects

Transforms color-channel vectors with small immutable matrices.

Features:
- ColorMatrix[R, C]: fixed-size, row-major, immutable coefficient matrices
- Affine transforms: columns beyond the vector length act as bias terms
- Pass-through of channels the matrix does not cover (e.g. alpha)
- W3C filter effects: grayscale, sepia, saturate, hue_rotate
- Sequential composition of matrices of any size
- Numba-parallel batch path for whole images ([..., N] arrays)

Example - Single color:
    >>> from colormatrix import apply_matrices, grayscale, sepia
    >>>
    >>> rgba = [0.8, 0.4, 0.2, 1.0]
    >>> apply_matrices(rgba, sepia(0.0), grayscale(0.5))

Example - Custom affine matrix:
    >>> from colormatrix import ColorMatrix
    >>>
    >>> brighten = ColorMatrix[3, 4](
    ...     1.0, 0.0, 0.0, 0.1,
    ...     0.0, 1.0, 0.0, 0.1,
    ...     0.0, 0.0, 1.0, 0.1,
    ... )
    >>> brighten.transform([0.2, 0.3, 0.4])
    array([0.3, 0.4, 0.5])

Example - Images:
    >>> from colormatrix import apply_matrices_to_array, hue_rotate, saturate
    >>>
    >>> image = np.random.rand(1080, 1920, 4).astype(np.float32)
    >>> apply_matrices_to_array(image, hue_rotate(45), saturate(1.3), inplace=True)
"""

__version__ = "0.1.0"

# Composition
from colormatrix.compose import apply_matrices, apply_matrices_to_array

# Effect factories
from colormatrix.effects import grayscale, hue_rotate, saturate, sepia

# Matrix engine
from colormatrix.matrix import ColorMatrix

# Protocols
from colormatrix.protocols import ColorComponents, ColorTransform

__all__ = [
    # Version
    "__version__",
    # Matrix engine
    "ColorMatrix",
    # Effects
    "grayscale",
    "sepia",
    "saturate",
    "hue_rotate",
    # Composition
    "apply_matrices",
    "apply_matrices_to_array",
    # Protocols
    "ColorComponents",
    "ColorTransform",
]
