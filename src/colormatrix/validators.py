"""
Validation helpers for colormatrix.

Provides reusable parameter checks for effect factories and matrix shapes.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeAlias

# Type alias for callables
F: TypeAlias = Callable[..., Any]


def validate_finite(param_name: str = "value", param_index: int = 0) -> Callable[[F], F]:
    """
    Decorator for validating finite real scalar parameters.

    Booleans are rejected even though they are integers, since ``grayscale(True)``
    is almost always a mistake.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature (default: 0 = first arg)

    Returns:
        Decorated function with finiteness validation

    Example:
        >>> @validate_finite("amount")
        ... def grayscale(amount: float) -> ColorMatrix:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            # Get value from args or kwargs
            if len(args) > param_index:
                value = args[param_index]
            elif param_name in kwargs:
                value = kwargs[param_name]
            else:
                # No value provided, let function use its default
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if not math.isfinite(value):
                suggestion = ""
                if "angle" in param_name:
                    suggestion = " Use degrees, e.g. 90.0 for a quarter turn."
                elif "amount" in param_name:
                    suggestion = " Use 1.0 for no change, 0.0 for the full effect."
                raise ValueError(f"{param_name}={value} must be finite.{suggestion}")

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_dimension(value: Any, param_name: str) -> int:
    """
    Validate a matrix dimension (row or column count).

    Args:
        value: Candidate dimension
        param_name: Name of the dimension for error messages

    Returns:
        The dimension as int

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is not positive
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{param_name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{param_name}={value} must be positive (> 0).")
    return int(value)
