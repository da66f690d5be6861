"""
ColorMatrix: fixed-size, immutable color matrices.

A ColorMatrix has a row count R and a column count C fixed by its class:
``ColorMatrix[R, C]`` returns a cached concrete subclass, and instances of
that subclass hold exactly R x C coefficients in row-major order.

Applied to a color vector of N channels, row ``r`` produces output channel
``r`` as a weighted sum of the first min(C, N) input channels. Columns past
N act as constant bias terms, which makes a matrix wider than the vector an
affine transform. Channels from R to N-1 pass through unchanged, so a 3x3
matrix leaves the alpha channel of an RGBA vector untouched.

Example:
    >>> swap_red_blue = ColorMatrix[3, 3](
    ...     0.0, 0.0, 1.0,
    ...     0.0, 1.0, 0.0,
    ...     1.0, 0.0, 0.0,
    ... )
    >>> swap_red_blue.transform([1.0, 0.5, 0.0, 0.8])
    array([0. , 0.5, 1. , 0.8])
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Any, ClassVar, Self

import numpy as np
from numpy.typing import NDArray

from colormatrix.constants import BATCH_DTYPES, MATRIX_DTYPE
from colormatrix.kernels import color_matrix_transform_numba
from colormatrix.protocols import ColorComponents
from colormatrix.validators import validate_dimension

logger = logging.getLogger(__name__)


def _rebuild(rows: int, columns: int, values: tuple[float, ...]) -> ColorMatrix:
    """Unpickle helper: sized classes are created on demand, not importable by name."""
    return ColorMatrix[rows, columns](*values)


class ColorMatrix:
    """
    Immutable R x C matrix of float64 coefficients, stored row-major.

    Use ``ColorMatrix[rows, columns]`` to obtain the class for a given size,
    then construct it from exactly ``rows * columns`` values:

        >>> m = ColorMatrix[2, 3](1, 2, 3, 4, 5, 6)
        >>> m.at(1, 0)
        4.0

    Matrices of the same size compare element-wise. Comparing matrices of
    different sizes is a type error, not an inequality.
    """

    __slots__ = ("_values",)

    rows: ClassVar[int | None] = None
    columns: ClassVar[int | None] = None

    # (rows, columns) -> sized subclass, shared by all sizes
    _sized_classes: ClassVar[dict[tuple[int, int], type[ColorMatrix]]] = {}

    _values: NDArray[np.float64]

    def __class_getitem__(cls, shape: tuple[int, int]) -> type[ColorMatrix]:
        if cls.rows is not None:
            raise TypeError(f"{cls.__name__} already has a fixed size")
        if not isinstance(shape, tuple) or len(shape) != 2:
            raise TypeError(
                f"ColorMatrix needs exactly two dimensions, e.g. ColorMatrix[3, 3], got {shape!r}"
            )

        rows = validate_dimension(shape[0], "rows")
        columns = validate_dimension(shape[1], "columns")

        key = (rows, columns)
        sized = ColorMatrix._sized_classes.get(key)
        if sized is None:
            name = f"ColorMatrix[{rows}, {columns}]"
            sized = type(
                name,
                (ColorMatrix,),
                {
                    "__slots__": (),
                    "__module__": __name__,
                    "__qualname__": name,
                    "rows": rows,
                    "columns": columns,
                },
            )
            # setdefault keeps the first class if two threads race here
            sized = ColorMatrix._sized_classes.setdefault(key, sized)
        return sized

    def __init__(self, *values: float):
        """
        Create a matrix from its coefficients in row-major order.

        Args:
            *values: Exactly rows * columns numbers (row 0, then row 1, ...)

        Raises:
            TypeError: If the class has no fixed size or a value is not a scalar
            ValueError: If the number of values is not rows * columns
        """
        if self.rows is None or self.columns is None:
            raise TypeError(
                "ColorMatrix has no fixed size. Use ColorMatrix[rows, columns](...) instead."
            )

        expected = self.rows * self.columns
        if len(values) != expected:
            raise ValueError(
                f"{type(self).__name__} takes exactly {expected} values "
                f"({self.rows} rows x {self.columns} columns), got {len(values)}"
            )

        array = np.array(values, dtype=MATRIX_DTYPE)
        if array.ndim != 1:
            raise TypeError(f"{type(self).__name__} values must be scalars, not sequences")

        array = array.reshape(self.rows, self.columns)
        array.flags.writeable = False
        object.__setattr__(self, "_values", array)

    # ========================================================================
    # Alternate Constructors
    # ========================================================================

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Self:
        """
        Create a matrix from a sequence of rows.

        Args:
            rows: Exactly ``cls.rows`` sequences of ``cls.columns`` values each

        Returns:
            New matrix

        Example:
            >>> ColorMatrix[2, 2].from_rows([[1, 0], [0, 1]]) == ColorMatrix[2, 2].identity()
            True
        """
        if cls.rows is None or cls.columns is None:
            raise TypeError("ColorMatrix has no fixed size. Use ColorMatrix[rows, columns].from_rows(...)")
        if len(rows) != cls.rows:
            raise ValueError(f"{cls.__name__} needs {cls.rows} rows, got {len(rows)}")

        flat: list[float] = []
        for index, row in enumerate(rows):
            if len(row) != cls.columns:
                raise ValueError(
                    f"Row {index} of {cls.__name__} needs {cls.columns} values, got {len(row)}"
                )
            flat.extend(row)
        return cls(*flat)

    @classmethod
    def identity(cls) -> Self:
        """Identity matrix (square sizes only)."""
        if cls.rows is None or cls.rows != cls.columns:
            raise ValueError(f"Identity is only defined for square matrices, not {cls.__name__}")
        return cls(*np.eye(cls.rows, dtype=MATRIX_DTYPE).ravel().tolist())

    # ========================================================================
    # Properties and Element Access
    # ========================================================================

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)"""
        return (self.rows, self.columns)

    def at(self, row: int, column: int) -> float:
        """
        Coefficient at (row, column).

        Bounds are only asserted (skipped under ``python -O``); use
        ``checked_at`` when indices come from outside.
        """
        assert 0 <= row < self.rows and 0 <= column < self.columns, (
            f"({row}, {column}) is outside {type(self).__name__}"
        )
        return float(self._values[row, column])

    def checked_at(self, row: int, column: int) -> float:
        """
        Coefficient at (row, column), always bounds-checked.

        Raises:
            TypeError: If an index is not an integer
            IndexError: If (row, column) is outside [0, rows) x [0, columns)
        """
        for name, index in (("row", row), ("column", column)):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise TypeError(f"{name} index must be an int, got {type(index).__name__}")
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"({row}, {column}) is outside {type(self).__name__}: "
                f"row must be in [0, {self.rows}), column in [0, {self.columns})"
            )
        return float(self._values[row, column])

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable [rows, columns] copy of the coefficients."""
        return self._values.copy()

    # ========================================================================
    # Transforms
    # ========================================================================

    def transform(self, components: ColorComponents) -> NDArray[np.float64]:
        """
        Transform a single color vector.

        Args:
            components: Color vector of N >= rows channels

        Returns:
            New float64 vector of length N

        Raises:
            ValueError: If components is not 1-D or has fewer than rows channels
        """
        vector = np.asarray(components, dtype=MATRIX_DTYPE)
        if vector.ndim != 1:
            raise ValueError(
                f"Expected a 1-D color vector, got shape {vector.shape}. "
                f"Use transform_array() for batches."
            )

        n = vector.shape[0]
        if n < self.rows:
            raise ValueError(
                f"{type(self).__name__} produces {self.rows} channels but the color "
                f"vector only has {n}"
            )

        k = min(self.columns, n)
        result = vector.copy()
        result[: self.rows] = self._values[:, :k] @ vector[:k]
        if self.columns > n:
            # Bias columns: implicit input value of 1
            result[: self.rows] += self._values[:, n:].sum(axis=1)
        return result

    def transform_array(self, colors: np.ndarray, inplace: bool = False) -> np.ndarray:
        """
        Transform every color vector of a [..., N] array.

        float32 and float64 inputs are processed in their own precision;
        other dtypes are promoted to float64.

        Args:
            colors: Array whose last axis holds N >= rows channels
            inplace: If True, write results back into colors (must be a
                floating-point ndarray)

        Returns:
            Transformed array with the same shape as colors

        Example:
            >>> image = np.random.rand(480, 640, 4).astype(np.float32)
            >>> sepia(0.2).transform_array(image, inplace=True)
        """
        array = np.asarray(colors)
        if array.ndim == 0:
            raise ValueError("Expected an array of color vectors, got a scalar")

        n = array.shape[-1]
        if n < self.rows:
            raise ValueError(
                f"{type(self).__name__} produces {self.rows} channels but the colors "
                f"only have {n}"
            )

        if inplace:
            if array is not colors:
                raise TypeError(
                    f"inplace=True requires a numpy array, got {type(colors).__name__}"
                )
            if not np.issubdtype(array.dtype, np.floating):
                raise TypeError(
                    f"inplace=True requires a floating-point array, got dtype {array.dtype}. "
                    f"Convert with colors.astype(np.float32) first."
                )

        work_dtype = array.dtype if array.dtype in BATCH_DTYPES else MATRIX_DTYPE
        flat = np.ascontiguousarray(array.reshape(-1, n), dtype=work_dtype)
        out = np.empty_like(flat)
        color_matrix_transform_numba(self._values, flat, out)

        logger.debug(
            "[ColorMatrix] Transformed %d vectors with %s", flat.shape[0], type(self).__name__
        )

        result = out.reshape(array.shape)
        if inplace:
            colors[...] = result
            return colors
        return result

    # ========================================================================
    # Value Semantics
    # ========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorMatrix):
            return NotImplemented
        if other.shape != self.shape:
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}: "
                f"sizes differ"
            )
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        # tolist() so that 0.0 and -0.0 hash alike, matching __eq__
        return hash((self.rows, self.columns, tuple(self._values.ravel().tolist())))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_rebuild, (self.rows, self.columns, tuple(self._values.ravel().tolist())))

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._values.ravel().tolist())
        return f"{type(self).__name__}({values})"
