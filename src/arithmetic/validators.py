"""Input domain checks shared by the calculator and the numeric helpers."""

from typing import TypeVar

from arithmetic.exceptions import InvalidArgumentError, OutOfRangeError

T = TypeVar("T", int, float)


def validate_non_negative(value: T, reason: str = "Value must be non-negative") -> T:
    """
    Validate that a value is zero or greater.

    NaN compares false against zero and therefore passes.

    Args:
        value: The value to validate
        reason: Message carried by the raised error

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If value is negative
    """
    if value < 0:
        raise InvalidArgumentError(value, reason)

    return value


def validate_integer(value: T, reason: str = "Value must be an integer") -> T:
    """
    Validate that a value is integral.

    Floats with no fractional part (``3.0``) are accepted; ``bool`` is not.

    Raises:
        InvalidArgumentError: If value is not an integral number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(value, reason)

    if isinstance(value, float) and not value.is_integer():
        raise InvalidArgumentError(value, reason)

    return value


def validate_range(
    value: T,
    min_val: float | None = None,
    max_val: float | None = None,
) -> T:
    """
    Validate that a value is within a specified range, bounds inclusive.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)

    return value
