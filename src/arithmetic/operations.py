"""Core arithmetic operations."""

import math

from arithmetic.exceptions import DivisionByZeroError
from arithmetic.validators import validate_integer, validate_non_negative


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Inverse of multiply: divide(multiply(a, b), b) == a (for b != 0)
        - Identity: divide(a, 1) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def sqrt(number: float) -> float:
    """
    Non-negative square root of number.

    Raises:
        InvalidArgumentError: If number is negative
    """
    validate_non_negative(number, "Cannot calculate square root of negative number")
    return math.sqrt(number)


def power(base: float, exponent: int) -> float:
    """
    Raise base to an integer exponent by repeated multiplication.

    Properties:
        - Zero exponent: power(a, 0) == 1
        - Identity: power(a, 1) == a
        - Step: power(a, n) == a * power(a, n - 1)
        - Reciprocal: power(a, -n) == 1 / power(a, n), inf on underflow

    Args:
        base: The base number
        exponent: Integral exponent, negative values allowed

    Returns:
        base raised to the power of exponent

    Raises:
        InvalidArgumentError: If exponent is not integral
        DivisionByZeroError: If base is zero and exponent is negative
    """
    validate_integer(exponent, "Exponent must be an integer")
    exponent = int(exponent)

    if exponent < 0:
        if base == 0:
            raise DivisionByZeroError(1)
        denominator = power(base, -exponent)
        # Underflow to signed zero follows IEEE reciprocal semantics
        if denominator == 0:
            return math.copysign(math.inf, denominator)
        return 1 / denominator

    if exponent == 0:
        return 1

    result = base
    for _ in range(exponent - 1):
        result *= base

    return result
