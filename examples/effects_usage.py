"""
Example: color matrix filter effects.

Demonstrates how to use colormatrix for:
- Single-color effects (grayscale, sepia, saturate, hue_rotate)
- Custom affine matrices with bias columns
- Chaining effects on whole images
"""

import logging

import numpy as np

from colormatrix import (
    ColorMatrix,
    apply_matrices,
    apply_matrices_to_array,
    grayscale,
    hue_rotate,
    saturate,
    sepia,
)

# Configure logging to see per-call debug output
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_single_color():
    """Apply each effect to one RGBA color."""
    print("\n" + "=" * 60)
    print("Example 1: Effects on a single color")
    print("=" * 60)

    orange = [1.0, 0.5, 0.0, 0.8]
    print(f"Input:            {orange}")
    print(f"grayscale(0.0):   {grayscale(0.0).transform(orange)}")
    print(f"sepia(0.0):       {sepia(0.0).transform(orange)}")
    print(f"saturate(2.0):    {saturate(2.0).transform(orange)}")
    print(f"hue_rotate(180):  {hue_rotate(180.0).transform(orange)}")


def example_2_affine_matrix():
    """Use a bias column to lift all channels."""
    print("\n" + "=" * 60)
    print("Example 2: Affine matrix with a bias column")
    print("=" * 60)

    lift = ColorMatrix[3, 4].from_rows(
        [
            [0.9, 0.0, 0.0, 0.1],
            [0.0, 0.9, 0.0, 0.1],
            [0.0, 0.0, 0.9, 0.1],
        ]
    )
    print(lift)
    print(f"Black becomes: {lift.transform([0.0, 0.0, 0.0, 1.0])}")


def example_3_chained_image():
    """Chain several effects over an image."""
    print("\n" + "=" * 60)
    print("Example 3: Chained effects on an image")
    print("=" * 60)

    np.random.seed(42)
    image = np.random.rand(120, 160, 4).astype(np.float32)
    stages = (hue_rotate(30.0), saturate(1.4), sepia(0.7))

    before = image[0, 0].copy()
    apply_matrices_to_array(image, *stages, inplace=True)

    print(f"Pixel (0, 0) before: {before}")
    print(f"Pixel (0, 0) after:  {image[0, 0]}")
    print(f"Single-vector check: {apply_matrices(before, *stages)}")


if __name__ == "__main__":
    example_1_single_color()
    example_2_affine_matrix()
    example_3_chained_image()
