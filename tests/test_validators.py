"""Tests for validation helpers."""

import numpy as np
import pytest

from colormatrix.validators import validate_dimension, validate_finite


@validate_finite("scale", param_index=1)
def scaled(base, scale=2.0):
    return base * scale


class TestValidateFinite:
    def test_positional(self):
        assert scaled(3, 0.5) == 1.5

    def test_keyword(self):
        assert scaled(3, scale=4) == 12

    def test_default_skips_validation(self):
        assert scaled(3) == 6.0

    def test_errors_name_parameter(self):
        with pytest.raises(ValueError, match="scale=nan must be finite"):
            scaled(1.0, float("nan"))
        with pytest.raises(TypeError, match="scale must be a number, got list"):
            scaled(1.0, scale=[1.0])

    def test_preserves_metadata(self):
        assert scaled.__name__ == "scaled"


class TestValidateDimension:
    @pytest.mark.parametrize("value", [1, 3, np.int64(4)])
    def test_valid(self, value):
        assert validate_dimension(value, "rows") == int(value)
        assert type(validate_dimension(value, "rows")) is int

    @pytest.mark.parametrize("value", [0, -2])
    def test_not_positive(self, value):
        with pytest.raises(ValueError, match="must be positive"):
            validate_dimension(value, "columns")

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_not_int(self, value):
        with pytest.raises(TypeError, match="columns must be an int"):
            validate_dimension(value, "columns")
