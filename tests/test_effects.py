"""Tests for filter effect matrices (grayscale, sepia, saturate, hue_rotate)."""

import math

import numpy as np
import pytest

from colormatrix import ColorMatrix, grayscale, hue_rotate, saturate, sepia

IDENTITY = ColorMatrix[3, 3].identity()


def w3c_hue_rotate(angle_in_degrees):
    """Reference hueRotate matrix written out as in the W3C table."""
    c = math.cos(math.radians(angle_in_degrees))
    s = math.sin(math.radians(angle_in_degrees))
    return np.array(
        [
            [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
            [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
            [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
        ]
    )


class TestGrayscale:
    """Test grayscale()."""

    def test_one_is_identity(self):
        assert grayscale(1.0) == IDENTITY

    def test_zero_is_luminance(self):
        """Every row equals the luminance weights."""
        expected = ColorMatrix[3, 3].from_rows([(0.2126, 0.7152, 0.0722)] * 3)
        assert grayscale(0.0) == expected

    def test_red_to_gray(self):
        """Pure red becomes its luminance on every channel."""
        result = grayscale(0.0).transform([1.0, 0.0, 0.0])
        np.testing.assert_allclose(result, [0.2126, 0.2126, 0.2126], atol=1e-12)

    def test_clamped(self):
        """Amounts outside [0, 1] saturate at the end points."""
        assert grayscale(-3.0) == grayscale(0.0)
        assert grayscale(5.0) == IDENTITY

    def test_half(self):
        """Intermediate amounts blend the diagonal towards 1."""
        matrix = grayscale(0.5)
        np.testing.assert_allclose(matrix.at(0, 0), 0.2126 + 0.7874 * 0.5)
        np.testing.assert_allclose(matrix.at(0, 1), 0.7152 - 0.7152 * 0.5)
        np.testing.assert_allclose(matrix.at(2, 2), 0.0722 + 0.9278 * 0.5)

    def test_preserves_white(self):
        """Luminance weights sum to one."""
        for amount in (0.0, 0.3, 1.0):
            np.testing.assert_allclose(grayscale(amount).transform([1.0, 1.0, 1.0]), 1.0)

    def test_default(self):
        assert grayscale() == IDENTITY


class TestSepia:
    """Test sepia()."""

    def test_one_is_identity(self):
        assert sepia(1.0) == IDENTITY

    def test_zero_is_sepia_tone(self):
        expected = ColorMatrix[3, 3](
            0.393, 0.769, 0.189,
            0.349, 0.686, 0.168,
            0.272, 0.534, 0.131,
        )
        assert sepia(0.0) == expected

    def test_clamped(self):
        assert sepia(-1.0) == sepia(0.0)
        assert sepia(2.0) == IDENTITY

    def test_alpha_untouched(self):
        """Applied to RGBA, alpha is kept."""
        result = sepia(0.0).transform([0.5, 0.5, 0.5, 0.3])
        assert result[3] == 0.3
        np.testing.assert_allclose(result[0], 0.5 * (0.393 + 0.769 + 0.189))


class TestSaturate:
    """Test saturate()."""

    def test_one_is_identity(self):
        assert saturate(1.0) == IDENTITY

    def test_zero_is_luminance(self):
        expected = ColorMatrix[3, 3].from_rows([(0.213, 0.715, 0.072)] * 3)
        assert saturate(0.0) == expected

    def test_not_clamped(self):
        """Amounts above 1 over-saturate."""
        matrix = saturate(2.0)
        np.testing.assert_allclose(matrix.at(0, 0), 0.213 + 0.787 * 2.0)
        np.testing.assert_allclose(matrix.at(0, 1), 0.715 - 0.715 * 2.0)
        assert saturate(2.0) != saturate(1.0)
        assert saturate(-1.0) != saturate(0.0)

    def test_matches_w3c_formula(self):
        amount = 0.35
        matrix = saturate(amount)
        expected = np.array(
            [
                [0.213 + 0.787 * amount, 0.715 - 0.715 * amount, 0.072 - 0.072 * amount],
                [0.213 - 0.213 * amount, 0.715 + 0.285 * amount, 0.072 - 0.072 * amount],
                [0.213 - 0.213 * amount, 0.715 - 0.715 * amount, 0.072 + 0.928 * amount],
            ]
        )
        np.testing.assert_allclose(matrix.to_numpy(), expected, atol=1e-12)


class TestHueRotate:
    """Test hue_rotate()."""

    def test_zero_is_identity(self):
        assert hue_rotate(0.0) == IDENTITY

    def test_full_turn(self):
        np.testing.assert_allclose(hue_rotate(360.0).to_numpy(), np.eye(3), atol=1e-12)

    @pytest.mark.parametrize("angle", [-270.0, -45.0, 30.0, 90.0, 180.0, 725.5])
    def test_matches_w3c_formula(self, angle):
        np.testing.assert_allclose(
            hue_rotate(angle).to_numpy(), w3c_hue_rotate(angle), atol=1e-12
        )

    def test_preserves_gray(self):
        """Gray colors are on the rotation axis."""
        for angle in (45.0, 120.0, 300.0):
            np.testing.assert_allclose(
                hue_rotate(angle).transform([0.4, 0.4, 0.4, 1.0]), [0.4, 0.4, 0.4, 1.0], atol=1e-12
            )


class TestParameterValidation:
    """Test scalar validation shared by all factories."""

    @pytest.mark.parametrize("factory", [grayscale, sepia, saturate, hue_rotate])
    def test_rejects_non_numbers(self, factory):
        with pytest.raises(TypeError, match="must be a number"):
            factory("0.5")
        with pytest.raises(TypeError, match="must be a number"):
            factory(True)

    @pytest.mark.parametrize("factory", [grayscale, sepia, saturate, hue_rotate])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_rejects_non_finite(self, factory, value):
        with pytest.raises(ValueError, match="must be finite"):
            factory(value)

    def test_accepts_numpy_scalars_and_keywords(self):
        assert grayscale(np.float32(1.0)) == IDENTITY
        assert saturate(amount=np.float64(1.0)) == IDENTITY
        assert hue_rotate(angle_in_degrees=0) == IDENTITY
