"""Formatting and predicate helpers for plain numbers."""

import sys

from arithmetic.exceptions import OutOfRangeError
from arithmetic.validators import validate_integer, validate_non_negative, validate_range

# Precision bounds accepted by format_number
MIN_DECIMALS = 0
MAX_DECIMALS = 100


def format_number(num: float, decimals: int = 2) -> float:
    """
    Round num to a fixed number of fractional digits.

    Uses the built-in ``round`` and returns a float, not a string.

    Args:
        num: The number to round
        decimals: Fractional digits to keep (0 to 100)

    Returns:
        The rounded value

    Raises:
        InvalidArgumentError: If decimals is not an integer
        OutOfRangeError: If decimals is outside [0, 100], or num is an int
            too large to convert to float
    """
    validate_integer(decimals, "Decimals must be an integer")
    validate_range(decimals, MIN_DECIMALS, MAX_DECIMALS)

    try:
        return float(round(num, int(decimals)))
    except OverflowError as e:
        raise OutOfRangeError(num, -sys.float_info.max, sys.float_info.max) from e


def is_even(num: float) -> bool:
    """True if num divides by 2 with no remainder."""
    return num % 2 == 0


def factorial(n: int) -> int:
    """
    Calculate n! by iterative multiplication.

    Properties:
        - Base cases: factorial(0) == factorial(1) == 1
        - Step: factorial(n) == n * factorial(n - 1)

    Raises:
        InvalidArgumentError: If n is negative or not integral
    """
    validate_non_negative(n, "Factorial of negative number")
    validate_integer(n, "Factorial of non-integer")

    result = 1
    for i in range(2, int(n) + 1):
        result *= i

    return result
